"""
Shared exception types for seedrandom.
Stable surface; extend only. Validation errors also subclass ValueError so callers
that already guard argument errors with ValueError keep working.
"""

from __future__ import annotations


class SeedRandomError(Exception):
    """Base exception for seedrandom; catch this for any package-raised error."""

    pass


class InvalidRange(SeedRandomError, ValueError):
    """Bounds are inverted, empty, or wider than a single uint32 draw can cover."""


class EmptyInput(SeedRandomError, ValueError):
    """A selection was requested from an empty collection."""


class InvalidSampleSize(EmptyInput, InvalidRange):
    """sample() asked for fewer than zero or more than len(seq) items."""


class InvalidWeight(SeedRandomError, ValueError):
    """Negative weight, zero total weight, or values/weights length mismatch."""


class InvalidProbability(SeedRandomError, ValueError):
    """Probability outside [0, 1]."""


class InvalidState(SeedRandomError, ValueError):
    """State snapshot is not four unsigned 32-bit words, or is all zero."""


class UnknownAlgorithm(SeedRandomError, ValueError):
    """Algorithm name is not one of the supported generators."""


class UnsupportedForAlgorithm(SeedRandomError):
    """Operation needs state the active algorithm cannot represent."""


class EntropyUnavailable(SeedRandomError):
    """No seed was given and the host has no secure entropy source."""


__all__ = [
    "EmptyInput",
    "EntropyUnavailable",
    "InvalidProbability",
    "InvalidRange",
    "InvalidSampleSize",
    "InvalidState",
    "InvalidWeight",
    "SeedRandomError",
    "UnknownAlgorithm",
    "UnsupportedForAlgorithm",
]
