"""
envx/loader.py
Minimal .env file loader — KEY=VALUE lines into the environment.

- Skips blank lines and full-line comments (lines starting with #)
- Strips one matching pair of quotes (' or ") from values; any text after
  the closing quote is kept, e.g. Z="quoted value"\\n -> quoted value\\n
- Real environment values win unless ``override`` is set
- Missing or unreadable files are skipped silently

File reads run in a worker thread (``asyncio.to_thread``) so the event loop
is never blocked; paths are processed one after another so later files
deterministically overwrite earlier ones.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
from collections.abc import Iterator
from typing import Optional, Union

from envx.accessor import EnvAccessor
from envx.config import EnvxConfig

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

PathArg = Union[str, os.PathLike, list, tuple, None]

_LINE_SPLIT = re.compile(r"\r?\n")


def resolve_paths(paths: PathArg, config: EnvxConfig) -> list[str]:
    """
    Explicit paths > configured env_file_paths > ".env".

    An explicit empty list means "load nothing"; only None (or "") falls
    through to the configured paths.
    """
    if paths is not None and paths != "":
        if isinstance(paths, (list, tuple)):
            return [os.fspath(p) for p in paths]
        return [os.fspath(paths)]
    if config.env_file_paths:
        return list(config.env_file_paths)
    return [DEFAULT_ENV_FILE]


def expand_home(path: str, accessor: EnvAccessor) -> str:
    """Expand a leading ~ using the accessor's HOME; strip it if none."""
    if not path.startswith("~"):
        return path
    rest = path[1:]
    home = accessor.home()
    if not home:
        return rest
    if home.endswith(("/", "\\")) or rest.startswith(("/", "\\")):
        return home + rest
    return home + "/" + rest


def _read_text(path: str) -> Optional[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping %s: %s", path, e)
        return None


async def read_text_file_safe(path: str) -> Optional[str]:
    """File contents, or None when missing/unreadable."""
    return await asyncio.to_thread(_read_text, path)


def _strip_quotes(value: str) -> str:
    if not value or value[0] not in ("'", '"'):
        return value
    quote = value[0]
    end = value.find(quote, 1)
    if end < 0:
        return value
    return value[1:end] + value[end + 1:].strip()


def iter_dotenv(content: str) -> Iterator[tuple[str, str]]:
    """Yield (key, value) pairs in file order."""
    for line in _LINE_SPLIT.split(content):
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if not key:
            continue
        yield key, _strip_quotes(value.strip())


def parse_dotenv(content: str) -> dict[str, str]:
    """Parse .env text into an ordered {key: value} dict (last line wins)."""
    return dict(iter_dotenv(content))


async def load_env(accessor: EnvAccessor, config: EnvxConfig,
                   paths: PathArg = None, *, override: bool = False) -> dict[str, str]:
    """
    Load KEY=VALUE pairs from one or more files.

    Returns every pair read, including the ones not applied because the
    environment already had a value.
    """
    loaded: dict[str, str] = {}
    for fp in resolve_paths(paths, config):
        path = expand_home(fp, accessor)
        content = await read_text_file_safe(path)
        if not content:
            continue

        count = 0
        for key, value in iter_dotenv(content):
            if override or accessor.get(key) is None:
                accessor.set(key, value)
            loaded[key] = value
            count += 1
        logger.debug("Loaded %d key(s) from %s", count, path)
    return loaded
