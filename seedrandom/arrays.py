"""
numpy bridge: bulk draws as arrays and reproducible numpy Generators.

Arrays are filled by the same scalar draws, in order, so uint32_array(rng, n) equals
[rng.uint32() for _ in range(n)] and leaves rng in the same state.
"""

from __future__ import annotations

import numpy as np

from .core.errors import InvalidRange
from .generator import SeedRandom


def _check_count(n: int) -> int:
    if n < 0:
        raise InvalidRange(f"Array length must be >= 0, got {n}")
    return int(n)


def uint32_array(rng: SeedRandom, n: int) -> np.ndarray:
    """n raw draws as a uint32 array."""
    n = _check_count(n)
    return np.fromiter((rng.uint32() for _ in range(n)), dtype=np.uint32, count=n)


def float_array(rng: SeedRandom, n: int) -> np.ndarray:
    """n uniform [0, 1) draws as a float64 array."""
    n = _check_count(n)
    return np.fromiter((rng.float() for _ in range(n)), dtype=np.float64, count=n)


def numpy_generator(rng: SeedRandom) -> np.random.Generator:
    """
    numpy Generator seeded from four uint32 draws of rng (advances rng by 4).
    Use for vectorized distributions numpy provides; reproducible from rng's seed.
    """
    words = [rng.uint32() for _ in range(4)]
    return np.random.default_rng(np.random.SeedSequence(words))


__all__ = ["float_array", "numpy_generator", "uint32_array"]
