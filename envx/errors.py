"""
envx/errors.py
Error taxonomy raised by the checker and the validation engine.

Every error carries the variable name; messages never include the raw
value except the truncated echo used by type-mismatch errors.
"""

from __future__ import annotations


class EnvxError(ValueError):
    """Base class for every envx failure."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message


class MissingVariableError(EnvxError):
    """The variable is not defined at all."""


class EmptyVariableError(EnvxError):
    """The variable is defined but blank after trimming."""


class InvalidBooleanError(EnvxError):
    pass


class InvalidIntegerError(EnvxError):
    pass


class InvalidNumberError(EnvxError):
    pass


class PatternMismatchError(EnvxError):
    pass


class TooShortError(EnvxError):
    pass


class TooLongError(EnvxError):
    pass


class InvalidChoiceError(EnvxError):
    pass


class CustomValidationFailedError(EnvxError):
    """The caller's predicate rejected the value (or raised)."""
