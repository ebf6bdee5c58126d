# ArgOpts Command-Line Option Parser — MIT Licensed
"""
Defines `StringStore`, the deferred conversion cell attached to every option found
during a scan.

A `StringStore` keeps the raw text of a value and only converts it when asked.
This lets one value be tried as several types (e.g. an int, falling back to a
string) without the parser knowing in advance what each option expects.

Example:
    store = StringStore("3.1415")
    store.get(float)     # 3.1415
    store.get(int)       # raises MalformedValueError
    int(StringStore("42"))  # 42
"""
from __future__ import annotations

from typing import Any, Callable

from argopts.converters import ValueKind, resolve_converter
from argopts.exceptions import MalformedValueError, MissingValueError
from argopts.logger import logger

ErrorHandler = Callable[[str | None, str], Any]


class StringStore:
    """
    Stores a value as text and converts it on demand.

    Args:
        value (str | None): The raw text, or None when there is no value.
        on_error (ErrorHandler | None): Called as `on_error(raw_value, type_name)`
            before a conversion error is raised. It is expected to raise its own
            exception; if it returns, the default error is raised instead.
    """

    __slots__ = ("_value", "_on_error")

    def __init__(
        self, value: str | None = None, on_error: ErrorHandler | None = None
    ) -> None:
        self._value: str | None = value
        self._on_error: ErrorHandler | None = on_error

    @property
    def value(self) -> str | None:
        """The raw text, exactly as stored."""
        return self._value

    @property
    def present(self) -> bool:
        return bool(self._value)

    def get(self, target: Any = str) -> Any:
        """
        Convert the stored text to `target`.

        Args:
            target (Any): A `ValueKind`, a supported type (int, float, str, bool,
                datetime, an Enum subclass) or a registered converter tag.

        Returns:
            Any: The converted value.

        Raises:
            MissingValueError: If there is no value, or it is empty.
            MalformedValueError: If the text does not fully parse as `target`.
            TypeError: If no converter exists for `target`.
        """
        converter = resolve_converter(target)
        if not self._value:
            if self._on_error:
                self._on_error(None, converter.name)
            raise MissingValueError(converter.name)

        try:
            return converter.func(self._value)
        except ValueError as error:
            logger.debug(
                "Conversion of %r to %s failed: %s", self._value, converter.name, error
            )
            if self._on_error:
                self._on_error(self._value, converter.name)
            raise MalformedValueError(self._value, converter.name) from error

    def as_int(self) -> int:
        return self.get(ValueKind.INT)

    def as_float(self) -> float:
        return self.get(ValueKind.FLOAT)

    def as_str(self) -> str:
        return self.get(ValueKind.STR)

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def __bool__(self) -> bool:
        return self.present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringStore):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"StringStore({self._value!r})"
