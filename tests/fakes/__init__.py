"""Test doubles: deterministic and failing entropy sources. No OS randomness."""

from .entropy import CountingEntropySource, FailingEntropySource, FixedEntropySource

__all__ = ["CountingEntropySource", "FailingEntropySource", "FixedEntropySource"]
