"""
sampler.py
----------

Implements EllipseSampler - a reusable object wrapper around the ellipse pipeline.

Responsibilities:
  - Generate the fitted point set and transform metadata (via make_geometry)
  - Draw rotation angles from the class-level RNG unless one is injected
  - Support object reuse (make_geometry() replaces the geometry in place)
"""

from __future__ import annotations

from typing import Optional, Union

from .base import PointSet
from .ellipse import BoundingBox, EllipseSpec, generate_ellipse
from .utils.rng import RNGBackend


class EllipseSampler(PointSet):
    """
    Ellipse point-set primitive.

    Extends:
        PointSet

    Example:
        >>> sampler = EllipseSampler()
        >>> sampler.make_geometry(100, 15.0, 2.0, rotate=True)
        >>> for x, y in sampler.iter_points():
        ...     print(f"({x}, {y})")
    """

    __slots__ = ()

    def make_geometry(
        self,
        n: int,
        semi_major_axis: float,
        semi_minor_axis: float,
        rotate: bool = False,
        box: Union[BoundingBox, tuple[float, float, float, float], None] = None,
        rng: Optional[RNGBackend] = None,
        angle_rad: Optional[float] = None,
    ) -> EllipseSampler:
        """
        Generate ellipse points fitted into `box`.

        Args:
            n: Number of points (>= 1).
            semi_major_axis: Semi-axis along X before scaling.
            semi_minor_axis: Semi-axis along Y before scaling.
            rotate: Rotate the ellipse by one random angle before fitting.
            box: BoundingBox or (x_min, x_max, y_min, y_max). Defaults to the
                unit square.
            rng: Angle source overriding the class-level RNG.
            angle_rad: Explicit rotation angle; no random draw is consumed.

        Returns:
            self, with `points` and `meta` replaced.
        """
        if box is None:
            box = BoundingBox.unit()
        elif not isinstance(box, BoundingBox):
            box = BoundingBox(*box)
        spec = EllipseSpec(n, semi_major_axis, semi_minor_axis, rotate)

        points, meta = generate_ellipse(
            spec, box,
            rng=self.__class__.rng if rng is None else rng,
            angle_rad=angle_rad,
        )
        meta["box"] = [box.x_min, box.x_max, box.y_min, box.y_max]
        self._points = points
        self._meta = meta
        return self
