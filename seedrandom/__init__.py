"""
Top-level public API surface. Deterministic, seedable PRNG for non-cryptographic use.
Canonical entrypoint: from seedrandom import SeedRandom. core holds hashing, entropy and
the generator algorithms; arrays and naming are optional helpers built on SeedRandom.
"""

from __future__ import annotations

from . import arrays, core, naming
from ._version import __version__
from .core.errors import (
    EmptyInput,
    EntropyUnavailable,
    InvalidProbability,
    InvalidRange,
    InvalidSampleSize,
    InvalidState,
    InvalidWeight,
    SeedRandomError,
    UnknownAlgorithm,
    UnsupportedForAlgorithm,
)
from .core.types import Algorithm, NormalizedSeed, RNGState
from .generator import SeedRandom, create_random

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "Algorithm",
    "EmptyInput",
    "EntropyUnavailable",
    "InvalidProbability",
    "InvalidRange",
    "InvalidSampleSize",
    "InvalidState",
    "InvalidWeight",
    "NormalizedSeed",
    "RNGState",
    "SeedRandom",
    "SeedRandomError",
    "UnknownAlgorithm",
    "UnsupportedForAlgorithm",
    "arrays",
    "core",
    "create_random",
    "naming",
]
