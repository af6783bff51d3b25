"""
Seed hashing: map any accepted seed value onto a NormalizedSeed (4 x uint32).

Contract:
- Pure function of the input (absent seeds consult the injected entropy source once).
- hash_string is an internal detail: same text and same package version give the same
  words; there is no promise across versions. Never use Python's built-in hash()
  (salted per process).
- Integers hash through their decimal string, so 42 and "42" normalize identically.
"""

from __future__ import annotations

import numbers
from typing import Optional

from .entropy import EntropySource, SystemEntropySource
from .types import UINT32_MASK, NormalizedSeed, Seed, Words

_H_INIT = (1779033703, 3144134277, 1013904242, 2773480762)
_M1 = 597399067
_M2 = 2869860233
_M3 = 951274213
_M4 = 2716044179


def mul32(a: int, b: int) -> int:
    """Wrapping 32-bit multiply (low 32 bits of the product)."""
    return (a * b) & UINT32_MASK


def _char_codes(text: str):
    # UTF-16 code units, so astral characters hash as their surrogate pair.
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_string(text: str) -> Words:
    """Hash text into four uint32 words. Not cryptographic, not MurmurHash."""
    h1, h2, h3, h4 = _H_INIT
    for k in _char_codes(text):
        h1, h2, h3, h4 = (
            h2 ^ mul32(h1 ^ k, _M1),
            h3 ^ mul32(h2 ^ k, _M2),
            h4 ^ mul32(h3 ^ k, _M3),
            h1 ^ mul32(h4 ^ k, _M4),
        )
    return (h1 & UINT32_MASK, h2 & UINT32_MASK, h3 & UINT32_MASK, h4 & UINT32_MASK)


def normalize_seed(seed: Seed, entropy: Optional[EntropySource] = None) -> NormalizedSeed:
    """
    absent -> entropy words; text -> hash(text); integer -> hash(str(integer));
    NormalizedSeed -> unchanged. Anything else is a TypeError.
    """
    if seed is None:
        source = entropy if entropy is not None else SystemEntropySource()
        return NormalizedSeed(tuple(source.words()))  # type: ignore[arg-type]
    if isinstance(seed, NormalizedSeed):
        return seed
    if isinstance(seed, bool):
        raise TypeError("Seed must be None, int, str or NormalizedSeed, not bool")
    if isinstance(seed, numbers.Integral):
        # numpy integers hash like the equivalent Python int
        return NormalizedSeed(hash_string(str(int(seed))))
    if isinstance(seed, str):
        return NormalizedSeed(hash_string(seed))
    raise TypeError(f"Seed must be None, int, str or NormalizedSeed, not {type(seed).__name__}")


__all__ = ["hash_string", "mul32", "normalize_seed"]
