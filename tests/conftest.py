"""
-------
conftest.py
-------
Shared pytest fixtures for ellipse sampler tests.
"""

import random

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt

from ellipsegen.ellipse import BoundingBox
from ellipsegen.utils.rng import RNG


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
    """
    Create and yield an isolated Matplotlib Figure/Axes pair.

    The figure is automatically closed after the test to avoid memory leaks.
    """
    fig, ax = plt.subplots(figsize=(4, 3))
    yield fig, ax
    plt.close(fig)


# -----------------------------------------------------------------------------
# Geometry fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def unit_box() -> BoundingBox:
    return BoundingBox.unit()


@pytest.fixture
def wide_box() -> BoundingBox:
    """Off-origin box wider than tall."""
    return BoundingBox(-3.0, 5.0, 2.0, 4.0)


# -----------------------------------------------------------------------------
# RNG fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_rng() -> RNG:
    """Deterministic RNG instance."""
    return RNG(seed=123)


@pytest.fixture
def stdlib_rng() -> random.Random:
    return random.Random(7)
