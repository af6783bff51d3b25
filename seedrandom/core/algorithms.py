"""
Generator cores: raw uint32 streams from internal state.

Both cores satisfy GeneratorCore (advance / uniform_float). They share no base class;
make_core() selects one from the Algorithm tag. All arithmetic wraps at 32 bits.
"""

from __future__ import annotations

from typing import Callable, Dict, Protocol

from .errors import InvalidState
from .hashing import mul32
from .types import TWO_POW_32, UINT32_MASK, Algorithm, NormalizedSeed, Words


class GeneratorCore(Protocol):
    """A core owns its state exclusively; advance() is the only mutation path."""

    def advance(self) -> int: ...

    def uniform_float(self) -> float: ...


def rotl(x: int, k: int) -> int:
    """32-bit rotate left."""
    x &= UINT32_MASK
    return ((x << k) | (x >> (32 - k))) & UINT32_MASK


class Mulberry32:
    """
    Mulberry32: one 32-bit counter, tiny and fast. Uses only the seed's first word.
    Its state is not exposed; snapshot/restore is unsupported.
    """

    __slots__ = ("_t",)

    def __init__(self, seed_word: int) -> None:
        self._t = seed_word & UINT32_MASK

    def advance(self) -> int:
        t = (self._t + 0x6D2B79F5) & UINT32_MASK
        self._t = t
        r = mul32(t ^ (t >> 15), t | 1)
        r ^= (r + mul32(r ^ (r >> 7), r | 61)) & UINT32_MASK
        return (r ^ (r >> 14)) & UINT32_MASK

    def uniform_float(self) -> float:
        return self.advance() / TWO_POW_32


class Xoshiro128StarStar:
    """xoshiro128**: four 32-bit words, fully save/restorable."""

    __slots__ = ("_s0", "_s1", "_s2", "_s3")

    def __init__(self, words: Words) -> None:
        self.restore(words)

    def advance(self) -> int:
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        result = mul32(rotl(s1 * 5, 7), 9)
        t = (s1 << 9) & UINT32_MASK

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl(s3, 11)

        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result

    def uniform_float(self) -> float:
        return self.advance() / TWO_POW_32

    def snapshot(self) -> Words:
        return (self._s0, self._s1, self._s2, self._s3)

    def restore(self, words: Words) -> None:
        s0, s1, s2, s3 = (w & UINT32_MASK for w in words)
        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3


def _xoshiro_from_seed(seed: NormalizedSeed) -> Xoshiro128StarStar:
    if not any(seed.words):
        raise InvalidState("xoshiro cannot be seeded with all-zero words; it would emit zeros forever")
    return Xoshiro128StarStar(seed.words)


_FACTORIES: Dict[Algorithm, Callable[[NormalizedSeed], GeneratorCore]] = {
    Algorithm.MULBERRY: lambda seed: Mulberry32(seed.words[0]),
    Algorithm.XOSHIRO: _xoshiro_from_seed,
}


def make_core(algorithm: Algorithm, seed: NormalizedSeed) -> GeneratorCore:
    """Build a freshly seeded core for the given algorithm."""
    return _FACTORIES[Algorithm.parse(algorithm)](seed)


__all__ = [
    "GeneratorCore",
    "Mulberry32",
    "Xoshiro128StarStar",
    "make_core",
    "rotl",
]
