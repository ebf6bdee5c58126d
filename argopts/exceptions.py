# ArgOpts Command-Line Option Parser — MIT Licensed
"""
Defines all custom exception classes used by ArgOpts.

Scanning an argument vector never fails on option-level problems. Errors surface
only when a caller asks for the value attached to an option in a specific type,
or when the input itself cannot be represented as text.

All exceptions inherit from `ArgOptsError`, the base exception for the library.

Exception Hierarchy:
- ArgOptsError
    ├── ConversionError (also a ValueError)
    │     ├── MissingValueError
    │     └── MalformedValueError
    ├── ArgumentDecodeError (also a UnicodeError)
    └── ConfigError (also a ValueError)
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The two ways a value conversion can fail."""

    MISSING = "missing value"
    MALFORMED = "could not convert"

    def __str__(self) -> str:
        return self.value


class ArgOptsError(Exception):
    """Base exception for ArgOpts."""


class ConversionError(ArgOptsError, ValueError):
    """
    Raised when an option value cannot be converted to the requested type.

    Attributes:
        kind (ErrorKind): Whether the value was missing or malformed.
        value (str | None): The raw text that failed, or None when absent.
        type_name (str): Display name of the requested type.
        usage (str): Usage line of the option the value belongs to, if known.
    """

    kind: ErrorKind = ErrorKind.MALFORMED

    def __init__(self, value: str | None, type_name: str, usage: str = "") -> None:
        self.value = value
        self.type_name = type_name
        self.usage = usage
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.kind is ErrorKind.MISSING:
            message = f"{self.kind}: expected {self.type_name}"
        else:
            message = f"{self.kind} '{self.value}' to {self.type_name}"
        if self.usage:
            message += f"\nUsage: {self.usage}"
        return message


class MissingValueError(ConversionError):
    """Raised when a conversion is requested from an absent or empty value."""

    kind = ErrorKind.MISSING

    def __init__(self, type_name: str, usage: str = "") -> None:
        super().__init__(None, type_name, usage)


class MalformedValueError(ConversionError):
    """Raised when a value does not fully parse as the requested type."""

    kind = ErrorKind.MALFORMED


class ArgumentDecodeError(ArgOptsError, UnicodeError):
    """Raised when a short option token is not valid UTF-8 text."""

    def __init__(self, index: int, token: str) -> None:
        self.index = index
        self.token = token
        super().__init__(
            f"Argument {index} is not valid UTF-8 and cannot be split "
            f"into short options: {token!r}"
        )


class ConfigError(ArgOptsError, ValueError):
    """Raised when an option declaration file is malformed."""
