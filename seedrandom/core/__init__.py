"""
Stable facade: seed hashing, entropy, generator cores and their value types.
No facade/config imports here; seedrandom.generator builds on this package, never the reverse.
"""

from __future__ import annotations

from .algorithms import GeneratorCore, Mulberry32, Xoshiro128StarStar, make_core
from .entropy import EntropySource, SystemEntropySource
from .errors import (
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
from .hashing import hash_string, normalize_seed
from .types import Algorithm, NormalizedSeed, RNGState, Seed

# Do not add exports without updating __all__.
__all__ = [
    "Algorithm",
    "EmptyInput",
    "EntropySource",
    "EntropyUnavailable",
    "GeneratorCore",
    "InvalidProbability",
    "InvalidRange",
    "InvalidSampleSize",
    "InvalidState",
    "InvalidWeight",
    "Mulberry32",
    "NormalizedSeed",
    "RNGState",
    "Seed",
    "SeedRandomError",
    "SystemEntropySource",
    "UnknownAlgorithm",
    "UnsupportedForAlgorithm",
    "Xoshiro128StarStar",
    "hash_string",
    "make_core",
    "normalize_seed",
]
