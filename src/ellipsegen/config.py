"""
config.py - Configuration dataclass for the ellipse demo driver.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class DemoConfig:
    """Immutable parameters of one demo run."""
    logger_level: int = logging.WARNING
    log_dir: Optional[Path] = None
    number_of_points: int = 100
    semi_major_range: Tuple[float, float] = (10.0, 20.0)
    semi_minor_range: Tuple[float, float] = (1.0, 3.0)
    box: Tuple[float, float, float, float] = (0.0, 1.0, 0.0, 1.0)
    rotate: Optional[bool] = None   # None - coin flip
    seed: Optional[int] = None
    plot_path: Optional[Path] = None

    def __post_init__(self):
        for name in ("semi_major_range", "semi_minor_range"):
            low, high = getattr(self, name)
            if not 0 < low <= high:
                raise ValueError(f"{name} must satisfy 0 < low <= high; got ({low}, {high}).")
        if len(self.box) != 4:
            raise ValueError(f"box must be (x_min, x_max, y_min, y_max); got {self.box}.")
