"""envx — read, validate, coerce and load environment variables."""
from __future__ import annotations

from envx.accessor import (
    EnvAccessor, InMemoryAccessor, OsEnvironAccessor, detect_accessor,
)
from envx.api import (
    Envx, check_env_var, configure_defaults, configure_from_file, default_env,
    get_env_var, load_env, load_env_sync, validate_env_var,
)
from envx.coercion import Coerced, ValueKind
from envx.config import DEFAULTS, EnvxConfig, validate_config_file
from envx.errors import (
    CustomValidationFailedError, EmptyVariableError, EnvxError,
    InvalidBooleanError, InvalidChoiceError, InvalidIntegerError,
    InvalidNumberError, MissingVariableError, PatternMismatchError,
    TooLongError, TooShortError,
)
from envx.loader import parse_dotenv

__all__ = [
    "DEFAULTS", "Coerced", "CustomValidationFailedError", "EmptyVariableError",
    "EnvAccessor", "Envx", "EnvxConfig", "EnvxError", "InMemoryAccessor",
    "InvalidBooleanError", "InvalidChoiceError", "InvalidIntegerError",
    "InvalidNumberError", "MissingVariableError", "OsEnvironAccessor",
    "PatternMismatchError", "TooLongError", "TooShortError", "ValueKind",
    "check_env_var", "configure_defaults", "configure_from_file",
    "default_env", "detect_accessor", "get_env_var", "load_env",
    "load_env_sync", "parse_dotenv", "validate_config_file",
    "validate_env_var",
]
