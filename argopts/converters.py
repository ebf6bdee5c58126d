# ArgOpts Command-Line Option Parser — MIT Licensed
"""
Text-to-value converters used by `StringStore`.

Every converter takes the raw text of an option value and returns the parsed
value, or raises `ValueError` if the text is not a complete lexeme of the target
type. Parsing is locale independent. Numeric converters skip leading whitespace;
all converters tolerate trailing whitespace and reject any other trailing text.

Built-in kinds are listed in `ValueKind`. Additional converters can be added with
`register_converter()` and are looked up by the tag they were registered under.

Functions:
- parse_int: Signed decimal integer.
- parse_float: Decimal floating point number with optional exponent.
- parse_string: Identity.
- parse_bool: Common truthy and falsy words.
- parse_datetime: Date and time text understood by python-dateutil.
- parse_enum: Enum member by name or by value.
- resolve_converter: Find the converter and display name for a target.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Callable

from dateutil import parser as date_parser

INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
FLOAT_PATTERN = re.compile(
    r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"
)

TRUE_WORDS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_WORDS = frozenset({"false", "f", "0", "no", "n", "off"})


class ValueKind(Enum):
    """Built-in conversion targets."""

    INT = "int"
    FLOAT = "float"
    STR = "str"
    BOOL = "bool"
    DATETIME = "datetime"


@dataclass(frozen=True)
class Converter:
    """A conversion function together with its display name."""

    name: str
    func: Callable[[str], Any]


def parse_int(value: str) -> int:
    if not INT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an integer")
    return int(value.strip())


def parse_float(value: str) -> float:
    if not FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a number")
    result = float(value.strip())
    if math.isinf(result):
        raise ValueError(f"'{value}' is out of range")
    return result


def parse_string(value: str) -> str:
    return value


def parse_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', 'on', '1' and their falsy counterparts, in any case.
    Unlike a plain `bool()` call, unrecognised words are an error.
    """
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def parse_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{value}' could not be parsed as a datetime") from error


def parse_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member.

    Tries the member name first, then the member value, converting the text
    to the type of the first member's value when that is not a string.

    Raises:
        ValueError: If no member matches.
    """
    name = value.strip()
    try:
        return enum_type[name]
    except KeyError:
        pass

    first = next(iter(enum_type), None)
    if first is None:
        raise ValueError(f"{enum_type.__name__} has no members")
    base_type = type(first.value)
    try:
        if base_type is int:
            return enum_type(parse_int(value))
        if base_type is float:
            return enum_type(parse_float(value))
        return enum_type(base_type(name))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


_BUILTINS: dict[ValueKind, Converter] = {
    ValueKind.INT: Converter("int", parse_int),
    ValueKind.FLOAT: Converter("float", parse_float),
    ValueKind.STR: Converter("str", parse_string),
    ValueKind.BOOL: Converter("bool", parse_bool),
    ValueKind.DATETIME: Converter("datetime", parse_datetime),
}

_TYPE_KINDS: dict[type, ValueKind] = {
    int: ValueKind.INT,
    float: ValueKind.FLOAT,
    str: ValueKind.STR,
    bool: ValueKind.BOOL,
    datetime: ValueKind.DATETIME,
}

_registry: dict[Any, Converter] = {}


def register_converter(
    tag: Any, func: Callable[[str], Any], name: str | None = None
) -> None:
    """
    Register a custom converter.

    Args:
        tag (Any): Key used to request the converter, usually a type or a string.
        func (Callable[[str], Any]): Converts text, raising ValueError on failure.
        name (str | None): Display name used in error messages. Defaults to the
            tag's `__name__`, or `str(tag)`.

    Raises:
        ValueError: If the tag names a built-in kind.
    """
    if isinstance(tag, ValueKind) or tag in _TYPE_KINDS or tag in {
        kind.value for kind in ValueKind
    }:
        raise ValueError(f"Cannot override built-in converter for {tag!r}")
    if not callable(func):
        raise TypeError(f"{func!r} is not callable")
    _registry[tag] = Converter(name or getattr(tag, "__name__", str(tag)), func)


def unregister_converter(tag: Any) -> None:
    """Remove a custom converter. Unknown tags are ignored."""
    _registry.pop(tag, None)


def resolve_converter(target: Any) -> Converter:
    """
    Find the converter for a conversion target.

    The target may be a `ValueKind`, the name of one (e.g. "int"), one of the
    built-in Python types, an Enum subclass, or a tag previously passed to
    `register_converter()`.

    Raises:
        TypeError: If nothing can convert to the target.
    """
    if isinstance(target, ValueKind):
        return _BUILTINS[target]
    if target in _registry:
        return _registry[target]
    if isinstance(target, type) and target in _TYPE_KINDS:
        return _BUILTINS[_TYPE_KINDS[target]]
    if isinstance(target, EnumMeta):
        return Converter(target.__name__, lambda value: parse_enum(value, target))
    if isinstance(target, str):
        try:
            return _BUILTINS[ValueKind(target)]
        except ValueError:
            pass
    raise TypeError(f"No converter registered for {target!r}")
