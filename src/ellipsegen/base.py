"""
base.py
-------

Defines the abstract base class for generated point-set primitives.
"""

from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional

import numpy as np
from numpy.typing import NDArray
from matplotlib.axes import Axes
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from .utils.rng import RNG, get_rng

LOGGER_NAME = "ellipsegen"


class PointSet(ABC):
    """
    Abstract base class for primitives represented by an ordered point set.

    Subclasses implement `make_geometry`, which stores an (n, 2) array in
    `self._points` and a metadata dict in `self._meta`, and returns `self`.
    """

    __slots__ = ("_points", "_meta",)

    rng: RNG = get_rng(thread_safe=True)  # class-level RNG shared by all instances

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> PointSet:
        logger = logging.getLogger(LOGGER_NAME)
        logger.debug(f"Running {self.__class__.__name__} instance reset().")
        self._points: NDArray[np.float64] = np.empty((0, 2), dtype=np.float64)
        self._meta: Dict[str, Any] = {}
        return self

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------
    @property
    def points(self) -> NDArray[np.float64]:
        """Copy of the current (n, 2) point array (safe to mutate)."""
        return self._points.copy()

    def iter_points(self) -> Iterator[tuple[float, float]]:
        for x, y in self._points:
            yield float(x), float(y)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def meta(self) -> Dict[str, Any]:
        """Deep copy of the current metadata (safe to mutate)."""
        return copy.deepcopy(self._meta)

    @property
    def json(self) -> str:
        """JSON-encoded metadata string (sorted, compact)."""
        return json.dumps(self._meta, sort_keys=True, separators=(",", ":"), default=str)

    @property
    def jsonpp(self) -> str:
        """Return pretty-printed JSON (good for debugging / logs)."""
        return json.dumps(self._meta, sort_keys=True, indent=4, default=str)

    @classmethod
    def reseed(cls, seed: Optional[int] = None) -> None:
        """Re-seed the class-level RNG (for deterministic replay)."""
        cls.rng.seed(seed)

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def make_geometry(self, **kwargs) -> PointSet:
        """Generate the point set and its metadata."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def as_path(self) -> mplPath:
        """Closed polyline through the points in generation order."""
        if not len(self._points):
            raise ValueError("No geometry; call make_geometry() first.")
        verts = np.vstack([self._points, self._points[:1]])
        codes = np.full(len(verts), mplPath.LINETO, dtype=mplPath.code_type)
        codes[0] = mplPath.MOVETO
        codes[-1] = mplPath.CLOSEPOLY
        return mplPath(verts, codes)

    def draw(self, ax: Axes, **style: Any) -> PathPatch:
        """Render the point set onto `ax` as an unfilled closed outline."""
        if not isinstance(ax, Axes):
            raise TypeError(f"ax must be a Matplotlib Axes, not {type(ax).__name__}")
        style.setdefault("fill", False)
        patch = PathPatch(self.as_path(), **style)
        ax.add_patch(patch)
        return patch

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        """Readable summary showing point count and metadata keys."""
        return f"<{self.__class__.__name__} n={len(self)} keys={list(self._meta.keys())}>"

    def __str__(self) -> str:
        cls_name: str = self.__class__.__name__
        obj_id: str = hex(id(self))
        return f"{cls_name}(id={obj_id}):\n{self.jsonpp}"
