from .rng import RNGBackend, RNG, get_rng, set_global_seed
from .logging_utils import configure_logging


__all__ = [
    "rng",
    "logging_utils",
]
