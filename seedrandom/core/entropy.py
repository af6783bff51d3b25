"""
Entropy sources for seeding only. Generators never consult entropy after construction.

Inject an EntropySource into SeedRandom to control what an absent seed resolves to
(tests use fixed-output fakes; see tests/fakes/entropy.py).
"""

from __future__ import annotations

import logging
import secrets
from typing import Protocol, Tuple, runtime_checkable

from .errors import EntropyUnavailable

logger = logging.getLogger(__name__)


@runtime_checkable
class EntropySource(Protocol):
    """Protocol for seed entropy: four independent uniform uint32 words per call."""

    def words(self) -> Tuple[int, int, int, int]: ...


class SystemEntropySource:
    """Operating-system CSPRNG via secrets (os.urandom). Words are little-endian."""

    def words(self) -> Tuple[int, int, int, int]:
        try:
            buf = secrets.token_bytes(16)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailable("No secure entropy source available") from e
        logger.debug("Drew 16 bytes of system entropy for seeding")
        return tuple(  # type: ignore[return-value]
            int.from_bytes(buf[i : i + 4], byteorder="little") for i in range(0, 16, 4)
        )


__all__ = ["EntropySource", "SystemEntropySource"]
