"""
ellipse.py
----------

Parametric ellipse point sets fitted into a bounding box.

The generation workflow is performed in stages, each a pure function returning
a fresh (n, 2) float64 array:

 1. Sampling. `n` points evenly spaced in parametric angle
        theta_i = 2*pi*i/n,   P_i = (a*cos(theta_i), b*sin(theta_i))
    trace the axis-aligned ellipse counter-clockwise starting at (a, 0).
    Spacing is uniform in the parameter, not in arc length.

 2. Optional rigid rotation about the origin by ONE angle shared by all points.
    The angle is drawn uniformly from [0, 2*pi) unless supplied by the caller.

 3. Box fitting. A uniform scale
        min((x_max - x_min) / 2a, (y_max - y_min) / 2b)
    followed by translation to the box center. The scale is computed from the
    original semi-axes, also for rotated point sets. A rotated ellipse is
    therefore fitted approximately: its true axis-aligned extent generally
    differs from 2a x 2b and may cross the box edges.

Core API:

    generate_points(n, semi_major_axis, semi_minor_axis, rotate_ellipse,
                    x_min, x_max, y_min, y_max, rng=None, angle_rad=None) -> NDArray

    generate_ellipse(spec: EllipseSpec, box: BoundingBox, rng=None,
                     angle_rad=None) -> tuple[NDArray, dict]

    ellipse_points(n, a, b) -> NDArray
    rotate_points(points, angle_rad) -> NDArray
    random_rotation_angle(rng=None) -> float
    fit_to_box(points, a, b, box) -> tuple[NDArray, dict]
"""

from __future__ import annotations

__all__ = [
    "EllipseSpec", "BoundingBox", "TWO_PI",
    "ellipse_points", "rotate_points", "random_rotation_angle", "fit_to_box",
    "generate_ellipse", "generate_points",
]

import math
import logging
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Optional, TypeAlias, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from matplotlib.transforms import Affine2D

from .errors import InvalidAxisLength, InvalidBoundingBox, InvalidPointCount
from .utils.rng import RNGBackend, get_rng

numeric: TypeAlias = Union[int, float]
PointXY: TypeAlias = tuple[float, float]
CoordRange: TypeAlias = tuple[numeric, numeric]

TWO_PI = 2.0 * math.pi
LOGGER_NAME = "ellipsegen.ellipse"


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------
def _check_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    return float(value)


def _check_point_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise TypeError(f"Point count must be an integer, got {type(n).__name__}.")
    if n < 1:
        raise InvalidPointCount(n)
    return int(n)


def _check_axis(name: str, value) -> float:
    value = _check_real(name, value)
    if not (value > 0) or math.isinf(value):
        raise InvalidAxisLength(name, value)
    return value


def _check_box(x_min, x_max, y_min, y_max) -> tuple[float, float, float, float]:
    x_min, x_max = _check_real("x_min", x_min), _check_real("x_max", x_max)
    y_min, y_max = _check_real("y_min", y_min), _check_real("y_max", y_max)
    # Written as negated comparisons so NaN bounds are rejected too.
    if not (x_max > x_min) or not (y_max > y_min):
        raise InvalidBoundingBox((x_min, x_max), (y_min, y_max))
    # Width, height and center must also be representable.
    derived = (x_min, x_max, y_min, y_max, x_max - x_min, y_max - y_min,
               x_max + x_min, y_max + y_min)
    if not all(math.isfinite(v) for v in derived):
        raise InvalidBoundingBox((x_min, x_max), (y_min, y_max))
    return x_min, x_max, y_min, y_max


def _check_rotate(rotate) -> bool:
    if not isinstance(rotate, (bool, np.bool_)):
        raise TypeError(f"rotate must be a bool, got {type(rotate).__name__}.")
    return bool(rotate)


def _fit_scale(a: float, b: float, box: BoundingBox) -> tuple[float, float, float]:
    """Return (scale, scale_x, scale_y); the scale must be finite and positive."""
    sfx = box.width / (2 * a)
    sfy = box.height / (2 * b)
    if not math.isfinite(sfx):
        raise InvalidAxisLength("semi_major_axis", a)
    if not math.isfinite(sfy):
        raise InvalidAxisLength("semi_minor_axis", b)
    sf = min(sfx, sfy)
    if not sf > 0:
        raise InvalidBoundingBox((box.x_min, box.x_max), (box.y_min, box.y_max))
    return sf, sfx, sfy


def _as_points(points: ArrayLike) -> NDArray[np.float64]:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of points, got shape {arr.shape}.")
    return arr


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class EllipseSpec:
    """Validated sampling parameters: point count, semi-axes, rotation flag."""
    n: int
    semi_major_axis: float
    semi_minor_axis: float
    rotate: bool = False

    def __post_init__(self):
        object.__setattr__(self, "n", _check_point_count(self.n))
        object.__setattr__(self, "semi_major_axis",
                           _check_axis("semi_major_axis", self.semi_major_axis))
        object.__setattr__(self, "semi_minor_axis",
                           _check_axis("semi_minor_axis", self.semi_minor_axis))
        object.__setattr__(self, "rotate", _check_rotate(self.rotate))


@dataclass(frozen=True)
class BoundingBox:
    """Target rectangle with x_max > x_min and y_max > y_min."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self):
        for name, value in zip(("x_min", "x_max", "y_min", "y_max"),
                               _check_box(self.x_min, self.x_max, self.y_min, self.y_max)):
            object.__setattr__(self, name, value)

    @classmethod
    def from_ranges(cls, x1x2: CoordRange, y1y2: CoordRange) -> BoundingBox:
        return cls(x1x2[0], x1x2[1], y1y2[0], y1y2[1])

    @classmethod
    def unit(cls) -> BoundingBox:
        """The unit square [0, 1] x [0, 1]."""
        return cls(0.0, 1.0, 0.0, 1.0)

    @property
    def width(self) -> float: return self.x_max - self.x_min

    @property
    def height(self) -> float: return self.y_max - self.y_min

    @property
    def center(self) -> PointXY:
        return (self.x_max + self.x_min) / 2, (self.y_max + self.y_min) / 2


# ---------------------------------------------------------------------------
# Stage 1: sampling
# ---------------------------------------------------------------------------
def ellipse_points(n: int, a: float, b: float) -> NDArray[np.float64]:
    """Sample `n` points on the origin-centered, axis-aligned ellipse.

    Args:
        n: Number of points (>= 1).
        a: Semi-axis along X.
        b: Semi-axis along Y.

    Returns:
        (n, 2) array; row i is (a*cos(2*pi*i/n), b*sin(2*pi*i/n)).

    Raises:
        InvalidPointCount: n < 1.
        InvalidAxisLength: a or b not strictly positive.
    """
    n = _check_point_count(n)
    a = _check_axis("semi_major_axis", a)
    b = _check_axis("semi_minor_axis", b)

    theta = TWO_PI * np.arange(n, dtype=np.float64) / n
    return np.column_stack((a * np.cos(theta), b * np.sin(theta)))


# ---------------------------------------------------------------------------
# Stage 2: rotation
# ---------------------------------------------------------------------------
def random_rotation_angle(rng: Optional[RNGBackend] = None) -> float:
    """Draw one rotation angle uniformly from [0, 2*pi).

    Consumes exactly one `rng.random()` call. If `rng` is None, the per-thread
    RNG from `get_rng(thread_safe=True)` is used.
    """
    if rng is None:
        rng = get_rng(thread_safe=True)
    return TWO_PI * float(rng.random())


def rotate_points(points: ArrayLike, angle_rad: float) -> NDArray[np.float64]:
    """Rotate a point set rigidly about the origin.

    Each (x, y) becomes (x*cos(phi) - y*sin(phi), x*sin(phi) + y*cos(phi)).
    The input is not modified.
    """
    pts = _as_points(points)
    angle_rad = _check_real("angle_rad", angle_rad)
    return Affine2D().rotate(angle_rad).transform(pts)


# ---------------------------------------------------------------------------
# Stage 3: scale and translate into the box
# ---------------------------------------------------------------------------
def fit_to_box(points: ArrayLike, a: float, b: float,
               box: BoundingBox) -> tuple[NDArray[np.float64], dict]:
    """Uniformly scale and translate an origin-centered point set into `box`.

    The scale factor uses the pre-rotation extent 2a x 2b regardless of the
    actual extent of `points`.

    Returns:
        (new_points, meta) where meta holds "scale", "scale_x", "scale_y",
        "trans_x" and "trans_y".
    """
    pts = _as_points(points)
    a = _check_axis("semi_major_axis", a)
    b = _check_axis("semi_minor_axis", b)
    if not isinstance(box, BoundingBox):
        raise TypeError(f"Expected a BoundingBox, got {type(box).__name__}.")

    sf, sfx, sfy = _fit_scale(a, b, box)
    tx, ty = box.center

    trans: Affine2D = Affine2D().scale(sf).translate(tx, ty)
    meta = {
        "scale"   : sf,
        "scale_x" : sfx,
        "scale_y" : sfy,
        "trans_x" : tx,
        "trans_y" : ty,
    }
    return trans.transform(pts), meta


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------
def generate_ellipse(
        spec      : EllipseSpec,
        box       : BoundingBox,
        rng       : Optional[RNGBackend] = None,
        angle_rad : Optional[float]      = None,
    ) -> tuple[NDArray[np.float64], dict]:
    """Generate an ellipse point set fitted into `box`.

    Args:
        spec:
            Point count, semi-axes and rotation flag.
        box:
            Target rectangle.
        rng:
            Angle source for `spec.rotate`. Anything with a `.random()` method
            returning floats in [0, 1). Defaults to the per-thread RNG.
        angle_rad:
            Explicit rotation angle used instead of a random draw. Ignored
            when `spec.rotate` is False.

    Returns:
        (points, meta) where points is the (n, 2) array in generation order and
        meta is a JSON-serializable description of the applied transform.
    """
    if not isinstance(spec, EllipseSpec):
        raise TypeError(f"Expected an EllipseSpec, got {type(spec).__name__}.")
    if not isinstance(box, BoundingBox):
        raise TypeError(f"Expected a BoundingBox, got {type(box).__name__}.")

    logger = logging.getLogger(LOGGER_NAME)
    a, b = spec.semi_major_axis, spec.semi_minor_axis
    _fit_scale(a, b, box)  # fail before any draw

    pts = ellipse_points(spec.n, a, b)

    rot_rad = None
    if spec.rotate:
        rot_rad = random_rotation_angle(rng) if angle_rad is None else float(angle_rad)
        pts = rotate_points(pts, rot_rad)
        logger.debug(f"Rotated {spec.n} points by {rot_rad:.6f} rad")

    pts, fit_meta = fit_to_box(pts, a, b, box)
    logger.debug(f"Fitted ellipse a={a}, b={b} into {box}: scale={fit_meta['scale']:.6g}")

    meta: dict = {
        "operation"       : "ellipse",
        "n"               : spec.n,
        "semi_major_axis" : a,
        "semi_minor_axis" : b,
        "rotated"         : spec.rotate,
        "rot_rad"         : rot_rad,
        **fit_meta,
    }
    return pts, meta


def generate_points(
        n               : int,
        semi_major_axis : float,
        semi_minor_axis : float,
        rotate_ellipse  : bool,
        x_min           : float,
        x_max           : float,
        y_min           : float,
        y_max           : float,
        rng             : Optional[RNGBackend] = None,
        angle_rad       : Optional[float]      = None,
    ) -> NDArray[np.float64]:
    """Generate `n` ellipse points and move them into the given bounding box.

    Flat-argument form of `generate_ellipse`. All inputs are validated before
    any computation.

    Raises:
        InvalidPointCount: n < 1.
        InvalidAxisLength: a semi-axis is not strictly positive.
        InvalidBoundingBox: x_max <= x_min or y_max <= y_min.
        TypeError: non-numeric arguments.
    """
    spec = EllipseSpec(n, semi_major_axis, semi_minor_axis, rotate_ellipse)
    box = BoundingBox(x_min, x_max, y_min, y_max)
    points, _ = generate_ellipse(spec, box, rng=rng, angle_rad=angle_rad)
    return points
