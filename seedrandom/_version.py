"""Canonical package version. Bump with CHANGELOG-worthy changes to the draw sequence."""

__version__ = "0.1.0"
