"""
envx/engine.py
Validation engine and default resolution.

``validate_env_var`` runs a fixed pipeline over one variable:
presence -> trim -> coerce -> pattern -> length -> choices -> custom.
The first failing step raises; later steps never run.

``get_env_var`` sits in front of it and answers "missing but optional"
with the caller's default (or None) instead of raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, NoReturn, Optional, Union

from envx.accessor import EnvAccessor
from envx.checker import check_env_var, report_failure
from envx.coercion import (
    Coerced, Value, ValueKind, coerce, matches_kind, resolve_kind, safe_echo,
)
from envx.config import EnvxConfig
from envx.errors import (
    CustomValidationFailedError, EnvxError, InvalidBooleanError,
    InvalidChoiceError, InvalidIntegerError, InvalidNumberError,
    PatternMismatchError, TooLongError, TooShortError,
)

logger = logging.getLogger(__name__)

MISSING: Any = object()   # "no default supplied" marker

_TYPE_ERRORS = {
    ValueKind.BOOLEAN: (InvalidBooleanError, "a boolean"),
    ValueKind.INTEGER: (InvalidIntegerError, "an integer"),
    ValueKind.NUMBER: (InvalidNumberError, "a number"),
}

Choices = Union[Sequence[Value], Callable[[Value], Any]]


@dataclass(frozen=True)
class ValidateOptions:
    type: Optional[str] = None
    pattern: Union[str, re.Pattern, None] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    choices: Optional[Choices] = None
    validate: Optional[Callable[[Value], Any]] = None
    boolean_strict: Optional[bool] = None

    def strict_booleans(self, config: EnvxConfig) -> bool:
        """Per-call strictness wins over the configured default."""
        if self.boolean_strict is not None:
            return bool(self.boolean_strict)
        return bool(config.boolean_strict)


def _fail(name: str, error_cls: type[EnvxError], reason: str,
          config: EnvxConfig, accessor: EnvAccessor) -> NoReturn:
    message = f'Environment variable "{name}" {reason}.'
    report_failure(error_cls(name, message), config, accessor)


def _compile(pattern) -> re.Pattern:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def _same_value(a, b) -> bool:
    # A boolean never equals a number here, unlike Python's True == 1.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    return a == b


def _predicate_ok(fn, value) -> bool:
    try:
        return bool(fn(value))
    except Exception as e:
        logger.debug("Predicate raised %s, treating as rejection", type(e).__name__)
        return False


def _format_choice(choice) -> str:
    if isinstance(choice, bool):
        return "true" if choice else "false"
    return str(choice)


def validate_env_var(accessor: EnvAccessor, config: EnvxConfig, name: str,
                     options: ValidateOptions | None = None) -> Value:
    """Validate ``name`` and return its coerced value. Raises EnvxError."""
    options = options or ValidateOptions()
    kind = resolve_kind(options.type)

    check_env_var(accessor, config, name, required=True, allow_empty=False)
    raw = accessor.get(name)
    if config.trim_values:
        raw = raw.strip()

    coerced = coerce(raw, kind, options.strict_booleans(config))
    if coerced is None:
        error_cls, expected = _TYPE_ERRORS[kind]
        _fail(name, error_cls, f'expected {expected} (got "{safe_echo(raw)}")',
              config, accessor)
    value = coerced.value

    if options.pattern is not None:
        regex = _compile(options.pattern)
        text = value if coerced.kind is ValueKind.STRING else raw
        if not regex.fullmatch(text):
            _fail(name, PatternMismatchError,
                  f"does not match pattern {regex.pattern}", config, accessor)

    if coerced.kind is ValueKind.STRING:
        if options.min_length is not None and len(value) < options.min_length:
            _fail(name, TooShortError,
                  f"must have at least {options.min_length} characters",
                  config, accessor)
        if options.max_length is not None and len(value) > options.max_length:
            _fail(name, TooLongError,
                  f"must have no more than {options.max_length} characters",
                  config, accessor)

    if options.choices is not None:
        choices = options.choices
        if callable(choices):
            if not _predicate_ok(choices, value):
                _fail(name, InvalidChoiceError, "failed allowed-values check",
                      config, accessor)
        elif not any(_same_value(c, value) for c in choices):
            allowed = ", ".join(_format_choice(c) for c in choices)
            _fail(name, InvalidChoiceError, f"must be one of [{allowed}]",
                  config, accessor)

    if options.validate is not None and not _predicate_ok(options.validate, value):
        _fail(name, CustomValidationFailedError, "failed custom validation",
              config, accessor)

    return value


def _resolve_default(default, kind: Optional[ValueKind], strict: bool,
                     config: EnvxConfig):
    if kind is None or kind is ValueKind.STRING:
        if isinstance(default, str) and config.trim_values:
            return default.strip()
        return default
    if matches_kind(default, kind):
        return default
    coerced: Optional[Coerced] = coerce(str(default), kind, strict)
    return default if coerced is None else coerced.value


def get_env_var(accessor: EnvAccessor, config: EnvxConfig, name: str,
                options: ValidateOptions | None = None, *,
                default=MISSING, required: Optional[bool] = None):
    """
    Value of ``name`` with default/optional semantics.

    Missing (or blank) and not required -> the default, coerced to the
    requested type when it isn't already, or None without a default.
    Anything else goes through validate_env_var.
    """
    options = options or ValidateOptions()
    raw = accessor.get(name)
    absent = raw is None or raw.strip() == ""

    has_default = default is not MISSING
    if required is None:
        required = not has_default

    if absent and not required:
        if not has_default:
            return None
        kind = resolve_kind(options.type) if options.type is not None else None
        return _resolve_default(default, kind, options.strict_booleans(config),
                                config)

    return validate_env_var(accessor, config, name, options)
