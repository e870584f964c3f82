"""
rng.py
------

Thread-safe random source used for ellipse rotation angles and demo parameters.

- Wraps either `random.Random` (default) or `numpy.random.Generator`.
- Every draw is guarded by a lock, so one instance may be shared across threads.
- `get_rng()` hands out the process-wide instance or a per-thread one.
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Optional, TypeAlias, Union

import numpy as np

RNGBackend: TypeAlias = Union[random.Random, np.random.Generator, "RNG"]


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe random generator.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - A seed of None (the default) mixes PID, wall clock and stdlib entropy.
        - Seed 0 is a valid, reproducible seed.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        self._rng: RNGBackend = self._make_backend(seed)

    def _make_backend(self, seed: Optional[int]) -> RNGBackend:
        seed_val = _entropy_seed() if seed is None else seed
        if self._use_numpy:
            return np.random.default_rng(seed_val)
        return random.Random(seed_val)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._rng = self._make_backend(seed)

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def random(self) -> float:
        """Uniform float in [0, 1)."""
        with self._lock:
            return float(self._rng.random())

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Uniform float in [low, high)."""
        with self._lock:
            out = self._rng.uniform(low, high)
            if isinstance(out, Real):
                return float(out)
            return out

    def coin(self) -> bool:
        """Fair boolean draw."""
        with self._lock:
            if self._use_numpy:
                return bool(self._rng.integers(0, 2))
            return bool(self._rng.getrandbits(1))

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self):
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (shared or per-thread)."""
    if thread_safe:
        if not hasattr(_thread_local, "rng"):
            _thread_local.rng = RNG(use_numpy=use_numpy)
        return _thread_local.rng
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the process-wide RNG."""
    _global_rng.seed(seed)
