"""
Seed-stamped artifact names for exported renders/frames.

Embedding the seed in the file name is how a saved output is traced back to the
generator that produced it:  sketch_0007_2026-01-01_00-00-00_<seed>.png
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

from .config import naming_defaults
from .core.types import NormalizedSeed
from .generator import SeedRandom

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ("png", "jpg", "webp")

_UNSAFE = re.compile(r"[^A-Za-z0-9.-]+")


def seed_label(seed: Union[str, int, NormalizedSeed]) -> str:
    """Filesystem-safe seed label: full hex for normalized seeds, sanitized text otherwise."""
    if isinstance(seed, NormalizedSeed):
        return seed.hex()
    return _UNSAFE.sub("-", str(seed)) or "seed"


def format_timestamp(when: datetime) -> str:
    return when.strftime("%Y-%m-%d_%H-%M-%S")


def artifact_filename(
    prefix: Optional[str] = None,
    *,
    seed: Optional[Union[str, int, NormalizedSeed]] = None,
    postfix: str = "",
    extension: Optional[str] = None,
    frame: Optional[int] = None,
    pad: Optional[int] = None,
    timestamp: Optional[datetime] = None,
) -> str:
    """
    Join prefix, zero-padded frame, timestamp, seed label and postfix with '_'.
    Unset prefix/extension/pad come from config (naming.*).
    """
    defaults = naming_defaults()
    prefix = defaults["prefix"] if prefix is None else prefix
    extension = (defaults["extension"] if extension is None else extension).lower()
    pad = defaults["pad"] if pad is None else pad
    if extension not in ALLOWED_EXTENSIONS:
        raise ValueError(f"extension must be one of {ALLOWED_EXTENSIONS}, got {extension!r}")

    parts = [prefix]
    if frame is not None:
        parts.append(str(frame).zfill(pad))
    if timestamp is not None:
        parts.append(format_timestamp(timestamp))
    if seed is not None:
        parts.append(seed_label(seed))
    if postfix:
        parts.append(postfix)
    return f"{'_'.join(parts)}.{extension}"


@dataclass
class ArtifactNamer:
    """
    Successive file names for one run. Frame numbers start at 1 and increment
    per call when frames=True.
    """

    seed: Optional[Union[str, int, NormalizedSeed]] = None
    prefix: Optional[str] = None
    postfix: str = ""
    extension: Optional[str] = None
    pad: Optional[int] = None
    frames: bool = False
    timestamped: bool = True
    _frame_count: int = field(default=0, init=False, repr=False)

    @classmethod
    def for_generator(cls, rng: SeedRandom, **kwargs) -> "ArtifactNamer":
        """Namer stamped with rng's normalized seed."""
        return cls(seed=rng.get_seed(), **kwargs)

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def next_filename(self, now: Optional[datetime] = None) -> str:
        frame = None
        if self.frames:
            self._frame_count += 1
            frame = self._frame_count
        stamp = None
        if self.timestamped:
            stamp = now if now is not None else datetime.now(timezone.utc)
        name = artifact_filename(
            self.prefix,
            seed=self.seed,
            postfix=self.postfix,
            extension=self.extension,
            frame=frame,
            pad=self.pad,
            timestamp=stamp,
        )
        logger.debug("Artifact name: %s", name)
        return name


__all__ = ["ALLOWED_EXTENSIONS", "ArtifactNamer", "artifact_filename", "format_timestamp", "seed_label"]
