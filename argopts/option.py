# ArgOpts Command-Line Option Parser — MIT Licensed
"""
Defines the `Option` and `Occurrence` dataclasses.

An `Option` is the static description of a flag a program accepts: a short
character, a long name and a help string. An `Occurrence` is what `Parser.parse()`
returns for every flag it finds in an argument vector: the matching option's
fields (or synthesized ones for unknown flags), the position of the flag in the
argument vector and a `StringStore` holding the tentative value that follows it.

Key Attributes:
- `shortopt`: One Unicode character, or None when there is no short form.
- `longopt`: Long option name, or "" when there is no long form.
- `help`: Help text, may be empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from argopts.exceptions import MalformedValueError, MissingValueError
from argopts.store import StringStore


def format_flags(shortopt: str | None, longopt: str) -> str:
    """Render the flags of an option, e.g. `-v, --verbose`."""
    text = ""
    if shortopt:
        text = f"-{shortopt}"
        if longopt:
            text += ", "
    if longopt:
        text += f"--{longopt}"
    return text


def format_usage(shortopt: str | None, longopt: str, help: str) -> str:
    """Render a single usage line, e.g. `-v, --verbose\\t\\tprint more`."""
    text = format_flags(shortopt, longopt)
    if help:
        text += f"\t\t{help}"
    return text


def validate_shortopt(shortopt: str | None) -> None:
    if shortopt is None:
        return
    if not isinstance(shortopt, str) or len(shortopt) != 1:
        raise ValueError(
            f"Short option must be a single character or None, got {shortopt!r}"
        )


@dataclass(frozen=True)
class Option:
    """
    A declared command-line option.

    Attributes:
        shortopt (str | None): Single character short name, or None.
        longopt (str): Long name without the leading '--', or "".
        help (str): Help text for the option.
    """

    shortopt: str | None = None
    longopt: str = ""
    help: str = ""

    def __post_init__(self) -> None:
        validate_shortopt(self.shortopt)

    def usage(self) -> str:
        return format_usage(self.shortopt, self.longopt, self.help)


@dataclass
class Occurrence:
    """
    An option found while scanning an argument vector.

    Attributes:
        shortopt (str | None): The short character, or None for long options
            that matched nothing.
        longopt (str): The long name, or "" for short options that matched nothing.
        help (str): Help text copied from the declared option.
        index (int): Position in the argument vector of the token holding the flag.
        arg (StringStore): The value following the flag, if there is one.
    """

    shortopt: str | None
    longopt: str
    help: str = ""
    index: int = -1
    arg: StringStore = field(default_factory=StringStore)

    @classmethod
    def from_option(
        cls, option: Option, index: int, value: str | None = None
    ) -> Occurrence:
        return cls.create(option.shortopt, option.longopt, option.help, index, value)

    @classmethod
    def create(
        cls,
        shortopt: str | None,
        longopt: str,
        help: str,
        index: int,
        value: str | None = None,
    ) -> Occurrence:
        """
        Build an occurrence whose `arg` reports conversion failures with this
        option's usage line.
        """
        usage = format_usage(shortopt, longopt, help)

        def on_error(raw_value: str | None, type_name: str) -> None:
            if raw_value is None:
                raise MissingValueError(type_name, usage)
            raise MalformedValueError(raw_value, type_name, usage)

        return cls(shortopt, longopt, help, index, StringStore(value, on_error))

    def is_option(self, shortopt: str | None = None, longopt: str = "") -> bool:
        """Check whether this occurrence matches the given short or long name."""
        return bool(
            (shortopt is not None and self.shortopt == shortopt)
            or (longopt and self.longopt == longopt)
        )

    def usage(self) -> str:
        return format_usage(self.shortopt, self.longopt, self.help)
