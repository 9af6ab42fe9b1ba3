"""Resolve one variable and print it (the envx command itself)."""
from __future__ import annotations

import json
import logging

from envx import (
    EnvxError, configure_defaults, configure_from_file, get_env_var,
    load_env_sync, validate_config_file,
)
from envx.theme import theme as _theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE = "\n".join([
    "Usage: envx --var NAME [--type string|int|number|boolean] [--pattern PATTERN] [--default VALUE]",
    "       [--boolean-strict] [--env-file PATH]... [--config PATH] [--json]",
    "",
    "Examples:",
    "  envx --var API_KEY --type string --pattern '^[A-Za-z0-9_-]{16,}$'",
    "  envx --var DEBUG --type boolean --boolean-strict",
    "  envx --var PORT --type int --default 8080 --env-file .env.local",
])


def _stderr_console():
    from rich.console import Console
    return Console(stderr=True, no_color=_theme.no_color,
                   force_terminal=True if _theme.force_color else None,
                   highlight=False, emoji=False)


def print_error(message: str):
    from rich.markup import escape
    _stderr_console().print(_theme.wrap(_theme.error, escape(message)), soft_wrap=True)


def print_usage():
    print(USAGE)


def cmd_get(name: str, *, type_name: str | None = None, pattern=None,
            default: str | None = None, boolean_strict: bool = False,
            env_files: list[str] | None = None, config_path: str = "",
            json_output: bool = False) -> int:
    """Resolve ``name`` and print it. Returns the process exit code."""
    from cli.helpers import format_value

    if config_path:
        problems = validate_config_file(config_path)
        for problem in problems:
            print_error(f"{config_path}: {problem}")
        if problems:
            return EXIT_FAILURE
        configure_from_file(config_path)

    if boolean_strict:
        configure_defaults(boolean_strict=True)

    if env_files:
        loaded = load_env_sync(env_files)
        logger.info("Loaded %d key(s) from %s", len(loaded), ", ".join(env_files))

    opts: dict = {}
    if type_name:
        opts["type"] = type_name
    if pattern is not None:
        opts["pattern"] = pattern
    if default is not None:
        opts["default"] = default
    if boolean_strict:
        opts["boolean_strict"] = True

    try:
        value = get_env_var(name, **opts)
    except EnvxError as e:
        print_error(e.message)
        return EXIT_FAILURE

    if value is None:
        print_error("undefined")
        return EXIT_FAILURE

    if json_output:
        print(json.dumps({"name": name, "value": value}))
    else:
        print(format_value(value))
    return EXIT_OK
