"""
envx/config.py
Configuration state — defaults that shape every check, validation and load.

The live config is a plain dataclass; ``merge_config`` produces the next
value from shallow overrides (unspecified fields keep their value).
Overrides may also come from a YAML file:

    # envx.yaml
    envx:
      verbose: true
      env_file_paths: [".env", "~/.config/app/.env"]

Usage:
    from envx.config import DEFAULTS, merge_config, load_config_file
    cfg = merge_config(DEFAULTS, load_config_file("envx.yaml"))
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

CONFIG_SECTION = "envx"


@dataclass
class EnvxConfig:
    verbose: bool = False
    exit_on_error: bool = False          # only honoured when the host can terminate
    env_file_paths: list[str] = field(default_factory=list)
    trim_values: bool = True
    coerce_types: bool = True
    boolean_strict: bool = False         # True => only "true"/"false" for booleans


FIELD_TYPES = {
    "verbose": bool,
    "exit_on_error": bool,
    "env_file_paths": list,
    "trim_values": bool,
    "coerce_types": bool,
    "boolean_strict": bool,
}

DEFAULTS = MappingProxyType({f.name: getattr(EnvxConfig(), f.name)
                             for f in fields(EnvxConfig)})


def merge_config(config: EnvxConfig, overrides: dict | None = None,
                 **kwargs) -> EnvxConfig:
    """
    Shallow-merge overrides into a copy of ``config``.
    Values are taken as-is; only unknown field names are rejected.
    """
    merged = dict(overrides or {})
    merged.update(kwargs)
    unknown = set(merged) - set(FIELD_TYPES)
    if unknown:
        raise TypeError(f"Unknown config field(s): {', '.join(sorted(unknown))}")
    if "env_file_paths" in merged and isinstance(merged["env_file_paths"], (list, tuple)):
        merged["env_file_paths"] = list(merged["env_file_paths"])
    return replace(config, **merged)


# ── Config file ──────────────────────────────────────────────────────────────

def _read_yaml(path: str):
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if isinstance(data, dict) and isinstance(data.get(CONFIG_SECTION), dict):
        return data[CONFIG_SECTION]
    return data


def load_config_file(path: str) -> dict:
    """Read overrides from a YAML file. Missing file -> {}."""
    path = os.path.expanduser(path)
    if not os.path.exists(path):
        logger.debug("Config file %s not found, no overrides", path)
        return {}
    data = _read_yaml(path)
    if not data:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return {k: v for k, v in data.items() if k in FIELD_TYPES}


def validate_config_file(path: str) -> list[str]:
    """Validate a YAML config file.

    Returns list of error messages (empty = valid).
    """
    path = os.path.expanduser(path)
    if not os.path.exists(path):
        return ["Config file not found: " + path]

    try:
        data = _read_yaml(path)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]

    if data is None:
        return []
    if not isinstance(data, dict):
        return ["Config is not a dictionary"]

    errors: list[str] = []
    for key, value in data.items():
        expected = FIELD_TYPES.get(key)
        if expected is None:
            errors.append(
                f"Unknown key '{key}'. Valid: {', '.join(sorted(FIELD_TYPES))}")
            continue
        if not isinstance(value, expected):
            errors.append(f"'{key}' must be a {expected.__name__}")
        elif key == "env_file_paths" and not all(isinstance(p, str) for p in value):
            errors.append("'env_file_paths' must be a list of strings")
    return errors
