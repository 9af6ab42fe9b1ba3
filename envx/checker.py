"""
envx/checker.py
Presence gate, used standalone and as the first step of validation.

``report_failure`` is the single exit path for every envx failure: it logs
(verbose mode), terminates the host process (exit_on_error, when the host
can), then raises.
"""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

from envx.accessor import EnvAccessor
from envx.config import EnvxConfig
from envx.errors import EmptyVariableError, EnvxError, MissingVariableError

logger = logging.getLogger("envx")


def report_failure(error: EnvxError, config: EnvxConfig,
                   accessor: EnvAccessor) -> NoReturn:
    if config.verbose:
        logger.error(error.message, extra={"extra_data": {
            "variable": error.name, "error": type(error).__name__,
        }})
    if config.exit_on_error and accessor.can_terminate:
        accessor.terminate(1)
    raise error


def check_env_var(accessor: EnvAccessor, config: EnvxConfig, name: str, *,
                  required: bool = True, allow_empty: bool = False,
                  message: Optional[str] = None) -> bool:
    """
    Ensure ``name`` is defined (and non-blank unless allow_empty).

    Returns True on success; raises MissingVariableError / EmptyVariableError.
    """
    if not required:
        return True

    raw = accessor.get(name)
    if raw is None:
        if message is None:
            message = f'Environment variable "{name}" is not defined.'
        report_failure(MissingVariableError(name, message), config, accessor)
    if not allow_empty and raw.strip() == "":
        if message is None:
            message = f'Environment variable "{name}" is empty.'
        report_failure(EmptyVariableError(name, message), config, accessor)
    return True
