"""
SeedRandom: the public random facade and its state manager.

Every draw goes through the active core's advance()/uniform_float(); nothing else
touches core state. Validation always runs before the first draw of a call, so a
failing call leaves the generator exactly where it was.

NOT for secrets, tokens, passwords or session IDs. Use the secrets module for those.

One SeedRandom per thread/task; use fork() to hand a parallel task its own
deterministic generator instead of sharing one.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from .config import default_algorithm, default_charset
from .core.algorithms import GeneratorCore, make_core
from .core.entropy import EntropySource, SystemEntropySource
from .core.errors import (
    EmptyInput,
    InvalidProbability,
    InvalidRange,
    InvalidSampleSize,
    InvalidWeight,
    UnsupportedForAlgorithm,
)
from .core.hashing import normalize_seed
from .core.types import TWO_POW_32, Algorithm, NormalizedSeed, RNGState, Seed

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def _seed_kind(seed: Seed) -> str:
    if seed is None:
        return "entropy"
    if isinstance(seed, NormalizedSeed):
        return "normalized"
    return type(seed).__name__


class SeedRandom:
    """
    Deterministic, seedable PRNG. Same seed + same algorithm => same sequence.

    Usage:
        rng = SeedRandom("my-sketch")
        rng.int(1, 6), rng.pick(palette), rng.normal(0, 0.1)
        child = rng.fork()      # independent, reproducible substream
    """

    def __init__(
        self,
        seed: Seed = None,
        algorithm: Optional[Union[str, Algorithm]] = None,
        *,
        entropy: Optional[EntropySource] = None,
    ) -> None:
        self._entropy: EntropySource = entropy if entropy is not None else SystemEntropySource()
        self._algorithm: Algorithm
        self._seed: NormalizedSeed
        self._core: GeneratorCore
        # config is read once; later yaml/env edits never change this generator
        self._charset: str = default_charset()
        self._reinitialize(seed, Algorithm.parse(algorithm or default_algorithm()))

    def _reinitialize(self, seed: Seed, algorithm: Algorithm) -> None:
        normalized = normalize_seed(seed, self._entropy)
        core = make_core(algorithm, normalized)
        self._algorithm, self._seed, self._core = algorithm, normalized, core
        logger.debug(
            "Seeded %s generator from %s seed %s",
            algorithm.value, _seed_kind(seed), normalized.hex(),
        )

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    def __repr__(self) -> str:
        return f"SeedRandom(seed={self._seed.hex()!r}, algorithm={self._algorithm.value!r})"

    # ------------------------------------------------------------------
    # Core primitives
    # ------------------------------------------------------------------

    def float(self) -> float:
        """Uniform float in [0, 1), 32 bits of resolution."""
        return self._core.uniform_float()

    def uint32(self) -> int:
        """Raw unsigned 32-bit output."""
        return self._core.advance()

    def int(self, lo: int, hi: int) -> int:
        """Bias-free integer in [lo, hi] (rejection sampling over one uint32 per try)."""
        lo, hi = operator.index(lo), operator.index(hi)
        if lo > hi:
            raise InvalidRange(f"Invalid range: {lo} > {hi}")
        span = hi - lo + 1
        if span > TWO_POW_32:
            raise InvalidRange(f"Range [{lo}, {hi}] spans more than 2**32 values")
        limit = (TWO_POW_32 // span) * span
        x = self._core.advance()
        while x >= limit:
            x = self._core.advance()
        return lo + (x % span)

    def bool(self) -> bool:
        return (self._core.advance() & 1) == 1

    def between(self, lo: float, hi: float) -> float:
        """Float in [lo, hi)."""
        if not lo < hi:
            raise InvalidRange(f"Invalid range: {lo} >= {hi}")
        return lo + (hi - lo) * self.float()

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def pick(self, seq: Sequence[T]) -> T:
        if len(seq) == 0:
            raise EmptyInput("Cannot pick from an empty sequence")
        return seq[self.int(0, len(seq) - 1)]

    def shuffle(self, seq: Iterable[T]) -> List[T]:
        """Fisher-Yates over a copy; the input is never modified."""
        a = list(seq)
        for i in range(len(a) - 1, 0, -1):
            j = self.int(0, i)
            a[i], a[j] = a[j], a[i]
        return a

    def sample(self, seq: Sequence[T], n: int) -> List[T]:
        """n distinct positions of seq, in shuffled order."""
        if n < 0 or n > len(seq):
            raise InvalidSampleSize(f"Invalid sample size {n} for sequence of length {len(seq)}")
        return self.shuffle(seq)[:n]

    def weighted(
        self,
        choices: Iterable[Any],
        weights: Optional[Iterable[float]] = None,
    ) -> Any:
        """
        Weighted choice. Either weighted([(value, weight), ...]) or
        weighted(values, weights). Weights are relative; they need not sum to 1.
        """
        if weights is None:
            pairs: List[Tuple[Any, float]] = [(v, w) for v, w in choices]
        else:
            values, ws = list(choices), list(weights)
            if len(values) != len(ws):
                raise InvalidWeight(f"Got {len(values)} values but {len(ws)} weights")
            pairs = list(zip(values, ws))
        if not pairs:
            raise EmptyInput("Empty choices")

        total = 0.0
        for _, w in pairs:
            if not math.isfinite(w) or w < 0:
                raise InvalidWeight(f"Weight must be finite and non-negative, got {w!r}")
            total += w
        if total == 0:
            raise InvalidWeight("Total weight must be positive")

        r = self.float() * total
        for v, w in pairs:
            r -= w
            if r < 0:
                return v
        # float rounding can leave r at exactly 0
        return pairs[-1][0]

    # ------------------------------------------------------------------
    # Distributions
    # ------------------------------------------------------------------

    def normal(self, mean: float = 0.0, std: float = 1.0) -> float:
        """Gaussian via Box-Muller (one value per two uniforms; the pair's sine half is discarded)."""
        u = 0.0
        while u == 0.0:
            u = self.float()
        v = 0.0
        while v == 0.0:
            v = self.float()
        return mean + std * math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def exponential(self, lam: float = 1.0) -> float:
        if not lam > 0:
            raise InvalidRange(f"Exponential rate must be > 0, got {lam!r}")
        return -math.log(1.0 - self.float()) / lam

    def chance(self, p: float) -> bool:
        if not 0 <= p <= 1:
            raise InvalidProbability(f"Probability must be in [0, 1], got {p!r}")
        return self.float() < p

    def dice(self, count: int, sides: int) -> List[int]:
        """count independent rolls of a sides-sided die (1..sides)."""
        if count < 0:
            raise InvalidRange(f"Dice count must be >= 0, got {count}")
        if sides < 1:
            raise InvalidRange(f"Dice must have at least 1 side, got {sides}")
        return [self.int(1, sides) for _ in range(count)]

    # ------------------------------------------------------------------
    # Bytes, strings, identifiers
    # ------------------------------------------------------------------

    def uuid_like_v4(self) -> str:
        """
        RFC 4122-shaped v4 string (version nibble 4, variant bits 10).
        Not a real UUID: drawn from this PRNG, so no collision resistance.
        """
        out = []
        for c in _UUID_TEMPLATE:
            if c == "x":
                out.append(f"{self.int(0, 15):x}")
            elif c == "y":
                out.append(f"{(self.int(0, 15) & 0x3) | 0x8:x}")
            else:
                out.append(c)
        return "".join(out)

    def bytes(self, n: int) -> bytes:
        """n pseudo-random bytes: whole uint32 draws little-endian, tail via int(0, 255)."""
        if n < 0:
            raise InvalidRange(f"Byte count must be >= 0, got {n}")
        out = bytearray()
        while len(out) + 4 <= n:
            out += self._core.advance().to_bytes(4, byteorder="little")
        while len(out) < n:
            out.append(self.int(0, 255))
        return bytes(out)

    def string(self, n: int, charset: Optional[str] = None) -> str:
        """n characters drawn independently from charset (default: config charset read at construction)."""
        if charset is None:
            charset = self._charset
        if n < 0:
            raise InvalidRange(f"String length must be >= 0, got {n}")
        if not charset:
            raise EmptyInput("Charset must not be empty")
        last = len(charset) - 1
        return "".join(charset[self.int(0, last)] for _ in range(n))

    def hex_color(self) -> str:
        """'#rrggbb' from the top 24 bits of one uint32 (kept for output compatibility)."""
        return "#" + f"{self._core.advance():08x}"[:6]

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def get_seed(self) -> NormalizedSeed:
        """Seed this generator was (re)initialized with. Log it to reproduce the run."""
        return self._seed

    def set_seed(self, seed: Seed, algorithm: Optional[Union[str, Algorithm]] = None) -> None:
        """Discard all state and reinitialize; keeps the current algorithm unless one is given."""
        algo = self._algorithm if algorithm is None else Algorithm.parse(algorithm)
        self._reinitialize(seed, algo)

    def _require_snapshot_support(self, op: str) -> None:
        if self._algorithm is not Algorithm.XOSHIRO:
            raise UnsupportedForAlgorithm(
                f"{op} requires the xoshiro algorithm; {self._algorithm.value} has no representable state"
            )

    def get_state(self) -> RNGState:
        self._require_snapshot_support("get_state")
        return RNGState(self._core.snapshot())  # type: ignore[attr-defined]

    def set_state(self, state: Union[RNGState, Sequence[int]]) -> None:
        """Restore a snapshot from get_state() (or any four non-zero uint32 words)."""
        self._require_snapshot_support("set_state")
        if not isinstance(state, RNGState):
            state = RNGState(tuple(state))  # type: ignore[arg-type]
        self._core.restore(state.s)  # type: ignore[attr-defined]
        logger.debug("Restored xoshiro state")

    def fork(self) -> "SeedRandom":
        """
        Child generator with the same algorithm, seeded from one uint32 of this one.
        Advances self by exactly one draw; same parent state => same child sequence.
        """
        child_seed = self._core.advance()
        logger.debug("Forking %s generator with child seed %d", self._algorithm.value, child_seed)
        child = SeedRandom(child_seed, self._algorithm, entropy=self._entropy)
        child._charset = self._charset
        return child


def create_random(
    seed: Seed = None,
    algorithm: Optional[Union[str, Algorithm]] = None,
    *,
    entropy: Optional[EntropySource] = None,
) -> SeedRandom:
    """Convenience factory; same as SeedRandom(seed, algorithm, entropy=entropy)."""
    return SeedRandom(seed, algorithm, entropy=entropy)


__all__ = ["SeedRandom", "create_random"]
