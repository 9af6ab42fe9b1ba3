"""
envx/coercion.py
Raw string -> typed value.

``coerce()`` returns a ``Coerced`` tagged value, or None when the text does
not parse for the requested kind. Callers match on ``Coerced.kind``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Value = Union[str, int, float, bool]

TRUE_WORDS = frozenset({"true", "1", "yes", "y", "on"})
FALSE_WORDS = frozenset({"false", "0", "no", "n", "off"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?Infinity"
)

ECHO_LIMIT = 16


class ValueKind(str, Enum):
    STRING = "string"
    INTEGER = "int"
    NUMBER = "number"
    BOOLEAN = "boolean"


TYPE_NAMES = {
    "string": ValueKind.STRING,
    "int": ValueKind.INTEGER,
    "integer": ValueKind.INTEGER,
    "number": ValueKind.NUMBER,
    "boolean": ValueKind.BOOLEAN,
}


@dataclass(frozen=True)
class Coerced:
    kind: ValueKind
    value: Value


def resolve_kind(type_name: Optional[str]) -> ValueKind:
    """Map a type tag ("int", "boolean", ...) to its kind; None -> STRING."""
    if type_name is None:
        return ValueKind.STRING
    if isinstance(type_name, ValueKind):
        return type_name
    try:
        return TYPE_NAMES[type_name]
    except KeyError:
        raise ValueError(
            f"Unknown type '{type_name}'. Valid: {', '.join(TYPE_NAMES)}"
        ) from None


def parse_bool(raw: str, strict: bool) -> Optional[bool]:
    v = raw.strip().lower()
    if strict:
        if v == "true":
            return True
        if v == "false":
            return False
        return None
    if v in TRUE_WORDS:
        return True
    if v in FALSE_WORDS:
        return False
    return None


def parse_int(raw: str) -> Optional[int]:
    """Optional sign + ASCII digits, nothing else."""
    t = raw.strip()
    if not _INT_RE.fullmatch(t):
        return None
    return int(t)


def parse_number(raw: str) -> Optional[float]:
    """ASCII decimal or exponent form (or signed Infinity); NaN never parses."""
    t = raw.strip()
    if not _NUMBER_RE.fullmatch(t):
        return None
    return float(t)


def coerce(raw: str, kind: ValueKind, strict: bool = False) -> Optional[Coerced]:
    if kind is ValueKind.BOOLEAN:
        b = parse_bool(raw, strict)
        return None if b is None else Coerced(kind, b)
    if kind is ValueKind.INTEGER:
        i = parse_int(raw)
        return None if i is None else Coerced(kind, i)
    if kind is ValueKind.NUMBER:
        n = parse_number(raw)
        return None if n is None else Coerced(kind, n)
    return Coerced(ValueKind.STRING, raw)


def matches_kind(value, kind: ValueKind) -> bool:
    """True if ``value`` already has the Python shape of ``kind``."""
    if kind is ValueKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is ValueKind.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is ValueKind.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, str)


def safe_echo(raw: str) -> str:
    """Truncate a raw value for error text so long secrets don't leak."""
    t = str(raw)
    return t[:ECHO_LIMIT] + "…" if len(t) > ECHO_LIMIT else t
