"""Shared utilities for CLI modules."""
from __future__ import annotations

import os
import re

_FLAG_BITS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def get_version() -> str:
    """Read version from pyproject.toml, fallback to '0.1.0'."""
    import tomllib

    pyproject = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                             "pyproject.toml")
    if os.path.exists(pyproject):
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.1.0")
        except (OSError, tomllib.TOMLDecodeError):
            pass
    try:
        from importlib.metadata import PackageNotFoundError, version
        return version("envx")
    except PackageNotFoundError:
        return "0.1.0"


def to_regex(text: str | None) -> re.Pattern | None:
    """
    Compile ``REGEX`` or ``/REGEX/flags``; None for empty or invalid input.
    Supported flags: i, m, s, x (unknown letters are ignored).
    """
    if not text:
        return None
    try:
        if text.startswith("/") and text.rfind("/") > 0:
            last = text.rfind("/")
            flags = 0
            for ch in text[last + 1:]:
                flags |= _FLAG_BITS.get(ch, 0)
            return re.compile(text[1:last], flags)
        return re.compile(text)
    except re.error:
        return None


def format_value(value) -> str:
    """Render a resolved value the way shell scripts expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
