"""
tests/conftest.py
Shared fixtures for envx tests.
Keeps the process-wide config pristine and offers an isolated Envx.
"""

import logging

import pytest

from envx import DEFAULTS, Envx, InMemoryAccessor, configure_defaults


@pytest.fixture(autouse=True)
def reset_defaults():
    """Every test starts (and ends) with the stock configuration."""
    configure_defaults(DEFAULTS)
    yield
    configure_defaults(DEFAULTS)


@pytest.fixture
def memory_env():
    """Envx over a fresh in-memory environment (nothing touches os.environ)."""
    return Envx(InMemoryAccessor())


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path/name`` and return the path as str."""
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def scrub_env(monkeypatch):
    """Unset keys in os.environ and make sure whatever a test writes is undone."""
    def _scrub(*keys):
        for key in keys:
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
    return _scrub


@pytest.fixture
def restore_root():
    """Put the root logger's handlers and level back after setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
