"""
Shared value types for seedrandom: algorithm tag, normalized seed, state snapshot.
Plain immutable values; generators own the mutable state, never these.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import InvalidState, UnknownAlgorithm

UINT32_MASK = 0xFFFFFFFF
TWO_POW_32 = 4294967296

Words = Tuple[int, int, int, int]


class Algorithm(str, enum.Enum):
    """Closed set of generator algorithms. Value is the configuration name."""

    MULBERRY = "mulberry"
    XOSHIRO = "xoshiro"

    @classmethod
    def parse(cls, value: Union[str, "Algorithm"]) -> "Algorithm":
        """Accept an Algorithm or its name ('mulberry' / 'xoshiro', case-insensitive)."""
        if isinstance(value, Algorithm):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownAlgorithm(
                f"Unknown algorithm {value!r}. Available: {[a.value for a in cls]}"
            ) from None


def _check_words(words, what: str) -> Words:
    try:
        out = tuple(int(w) for w in words)
    except (TypeError, ValueError) as e:
        raise InvalidState(f"{what} must be four integers, got {words!r}") from e
    if len(out) != 4:
        raise InvalidState(f"{what} must have exactly 4 words, got {len(out)}")
    for w in out:
        if not 0 <= w <= UINT32_MASK:
            raise InvalidState(f"{what} word {w} is outside the uint32 range")
    return out  # type: ignore[return-value]


@dataclass(frozen=True)
class NormalizedSeed:
    """
    Fixed-width internal seed: four unsigned 32-bit words.
    Passing one back to SeedRandom reuses the words verbatim, so a run seeded from
    entropy can be replayed from its logged seed.
    """

    words: Words

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", _check_words(self.words, "NormalizedSeed"))

    def hex(self) -> str:
        """32 lowercase hex digits, word 0 first."""
        return "".join(f"{w:08x}" for w in self.words)

    @classmethod
    def from_hex(cls, text: str) -> "NormalizedSeed":
        text = text.strip().lower()
        if len(text) != 32:
            raise InvalidState(f"Seed hex must be 32 digits, got {len(text)}")
        try:
            words = tuple(int(text[i : i + 8], 16) for i in range(0, 32, 8))
        except ValueError as e:
            raise InvalidState(f"Seed hex is not hexadecimal: {text!r}") from e
        return cls(words)  # type: ignore[arg-type]


@dataclass(frozen=True)
class RNGState:
    """Opaque xoshiro128** snapshot (s0..s3 after the most recent advance)."""

    s: Words

    def __post_init__(self) -> None:
        words = _check_words(self.s, "RNGState")
        if not any(words):
            raise InvalidState("RNGState must not be all zero; xoshiro would emit zeros forever")
        object.__setattr__(self, "s", words)


# Accepted seed inputs: absent (entropy), integer, text, or a previously normalized seed.
Seed = Optional[Union[int, str, NormalizedSeed]]


__all__ = [
    "Algorithm",
    "NormalizedSeed",
    "RNGState",
    "Seed",
    "TWO_POW_32",
    "UINT32_MASK",
    "Words",
]
