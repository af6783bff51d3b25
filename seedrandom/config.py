"""
Load config from seedrandom.yaml with optional env overrides.
Only defaults live here; an explicit argument to SeedRandom always wins over config.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# Defaults if no YAML or env
_DEFAULTS = {
    "generator": {"algorithm": "xoshiro"},
    "string": {"charset": DEFAULT_CHARSET},
    "naming": {"prefix": "sketch", "extension": "png", "pad": 4},
}


def _config_yaml_path() -> Path:
    """$SEEDRANDOM_CONFIG, else seedrandom.yaml at repo root (parent of package dir)."""
    override = os.environ.get("SEEDRANDOM_CONFIG")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "seedrandom.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    algorithm = os.environ.get("SEEDRANDOM_ALGORITHM")
    if algorithm:
        overrides.setdefault("generator", {})["algorithm"] = algorithm
    charset = os.environ.get("SEEDRANDOM_CHARSET")
    if charset:
        overrides.setdefault("string", {})["charset"] = charset
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- seedrandom.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def default_algorithm() -> str:
    return str(get_config()["generator"]["algorithm"])


def default_charset() -> str:
    return str(get_config()["string"]["charset"])


def naming_defaults() -> Dict[str, Any]:
    naming = get_config()["naming"]
    return {
        "prefix": str(naming.get("prefix", _DEFAULTS["naming"]["prefix"])),
        "extension": str(naming.get("extension", _DEFAULTS["naming"]["extension"])),
        "pad": int(naming.get("pad", _DEFAULTS["naming"]["pad"])),
    }
