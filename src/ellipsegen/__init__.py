from .errors import EllipseGenError, InvalidPointCount, InvalidAxisLength, InvalidBoundingBox
from .ellipse import (
    EllipseSpec, BoundingBox, TWO_PI,
    ellipse_points, rotate_points, random_rotation_angle, fit_to_box,
    generate_ellipse, generate_points,
)
from .sampler import EllipseSampler

__version__ = "0.1.0"

__all__ = [
    "errors",
    "ellipse",
    "base",
    "sampler",
    "config",
    "main",
    "utils",
]
