"""
errors.py
---------

Precondition failures raised by the ellipse sampler before any computation.
"""

__all__ = [
    "EllipseGenError", "InvalidPointCount", "InvalidAxisLength", "InvalidBoundingBox",
]


class EllipseGenError(ValueError):
    """Base class for invalid sampler inputs."""


class InvalidPointCount(EllipseGenError):
    """Point count is not a positive integer."""

    def __init__(self, n: int):
        super().__init__(f"invalid point count: {n!r} (expected n >= 1)")
        self.n = n


class InvalidAxisLength(EllipseGenError):
    """Semi-axis length is not strictly positive and finite."""

    def __init__(self, name: str, value: float):
        super().__init__(f"invalid axis length: {name}={value!r} (expected > 0)")
        self.name = name
        self.value = value


class InvalidBoundingBox(EllipseGenError):
    """Box has zero or negative width or height."""

    def __init__(self, x1x2: tuple[float, float], y1y2: tuple[float, float]):
        super().__init__(
            f"invalid bounding box: x=({x1x2[0]!r}, {x1x2[1]!r}), "
            f"y=({y1y2[0]!r}, {y1y2[1]!r}) (expected x_max > x_min and y_max > y_min)"
        )
        self.x1x2 = x1x2
        self.y1y2 = y1y2
