"""
envx/accessor.py
Environment accessors — the get/set capability the rest of envx talks to.

The engine and loader never touch ``os.environ`` directly; they go through
an accessor picked once at startup by ``detect_accessor()``.

Usage:
    from envx.accessor import InMemoryAccessor
    acc = InMemoryAccessor({"PORT": "8080"})
    acc.get("PORT")   # "8080"
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

HOME_VARS = ("HOME", "USERPROFILE")


class EnvAccessor(Protocol):
    """Capability interface over a host key/value namespace."""

    runtime: str
    can_terminate: bool

    def get(self, name: str) -> Optional[str]: ...

    def set(self, name: str, value: str) -> None: ...

    def terminate(self, status: int) -> None: ...

    def home(self) -> Optional[str]: ...


class _HomeMixin:
    def home(self) -> Optional[str]:
        """First non-empty HOME-style variable, or None."""
        for var in HOME_VARS:
            value = self.get(var)  # type: ignore[attr-defined]
            if value:
                return value
        return None


class OsEnvironAccessor(_HomeMixin):
    """Reads and writes the real process environment."""

    runtime = "os"
    can_terminate = True

    def __init__(self, environ=None):
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> Optional[str]:
        value = self._environ.get(name)
        return None if value is None else str(value)

    def set(self, name: str, value: str) -> None:
        self._environ[name] = value

    def terminate(self, status: int) -> None:
        logger.debug("Terminating process with status %d", status)
        sys.exit(status)


class InMemoryAccessor(_HomeMixin):
    """
    Dict-backed accessor for hosts without a process environment.
    Also handy in tests: nothing leaks into os.environ.
    """

    runtime = "memory"
    can_terminate = False

    def __init__(self, initial: dict[str, str] | None = None):
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def set(self, name: str, value: str) -> None:
        self._vars[name] = value

    def terminate(self, status: int) -> None:
        # No process to end; the caller raises afterwards.
        pass

    def items(self) -> list[tuple[str, str]]:
        return list(self._vars.items())

    def __len__(self) -> int:
        return len(self._vars)


def detect_accessor() -> EnvAccessor:
    """Pick the accessor for this host: os.environ when present, else memory."""
    environ = getattr(os, "environ", None)
    if environ is not None:
        return OsEnvironAccessor(environ)
    logger.debug("os.environ unavailable, using in-memory environment")
    return InMemoryAccessor()
