"""
envx/api.py
Composition root — one accessor plus one live config.

``Envx`` bundles the accessor and config and hands them explicitly to the
checker, engine and loader. The module-level functions operate on a
process-wide instance created at import time.

Usage:
    from envx import get_env_var, load_env_sync
    load_env_sync()
    port = get_env_var("PORT", type="int", default=8080)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from envx import checker, engine, loader
from envx.accessor import EnvAccessor, detect_accessor
from envx.config import EnvxConfig, load_config_file, merge_config
from envx.engine import MISSING, ValidateOptions

logger = logging.getLogger(__name__)


class Envx:
    """Environment helper bound to one accessor and one config."""

    def __init__(self, accessor: EnvAccessor | None = None,
                 config: EnvxConfig | None = None):
        self.accessor = accessor if accessor is not None else detect_accessor()
        self._config = config if config is not None else EnvxConfig()

    @property
    def config(self) -> EnvxConfig:
        return self._config

    def configure(self, overrides: dict | None = None, **kwargs) -> None:
        """Shallow-merge overrides into the live config."""
        self._config = merge_config(self._config, overrides, **kwargs)

    def configure_from_file(self, path: str) -> dict:
        """Apply overrides from a YAML config file; returns what was applied."""
        overrides = load_config_file(path)
        if overrides:
            self.configure(overrides)
            logger.debug("Applied config from %s: %s", path, sorted(overrides))
        return overrides

    def check(self, name: str, *, required: bool = True,
              allow_empty: bool = False, message: Optional[str] = None) -> bool:
        return checker.check_env_var(self.accessor, self._config, name,
                                     required=required, allow_empty=allow_empty,
                                     message=message)

    def validate(self, name: str, **options):
        return engine.validate_env_var(self.accessor, self._config, name,
                                       ValidateOptions(**options))

    def get(self, name: str, *, default=MISSING,
            required: Optional[bool] = None, **options):
        return engine.get_env_var(self.accessor, self._config, name,
                                  ValidateOptions(**options),
                                  default=default, required=required)

    async def load(self, paths: loader.PathArg = None, *,
                   override: bool = False) -> dict[str, str]:
        return await loader.load_env(self.accessor, self._config, paths,
                                     override=override)

    def load_sync(self, paths: loader.PathArg = None, *,
                  override: bool = False) -> dict[str, str]:
        """Blocking variant of ``load`` for scripts without an event loop."""
        return asyncio.run(self.load(paths, override=override))


_default = Envx()


def default_env() -> Envx:
    """The process-wide instance behind the module-level functions."""
    return _default


def configure_defaults(overrides: dict | None = None, **kwargs) -> None:
    _default.configure(overrides, **kwargs)


def configure_from_file(path: str) -> dict:
    return _default.configure_from_file(path)


def check_env_var(name: str, *, required: bool = True, allow_empty: bool = False,
                  message: Optional[str] = None) -> bool:
    """Ensure ``name`` is set and non-blank (unless allow_empty). Raises on failure."""
    return _default.check(name, required=required, allow_empty=allow_empty,
                          message=message)


def validate_env_var(name: str, **options):
    """Validate ``name`` and return its coerced value. Raises on failure."""
    return _default.validate(name, **options)


def get_env_var(name: str, *, default=MISSING, required: Optional[bool] = None,
                **options):
    """Value with default/optional semantics + validation/coercion."""
    return _default.get(name, default=default, required=required, **options)


async def load_env(paths: loader.PathArg = None, *,
                   override: bool = False) -> dict[str, str]:
    """Load .env-style files; returns the loaded key -> value map."""
    return await _default.load(paths, override=override)


def load_env_sync(paths: loader.PathArg = None, *,
                  override: bool = False) -> dict[str, str]:
    return _default.load_sync(paths, override=override)
