# ArgOpts Command-Line Option Parser — MIT Licensed
"""
This module implements `Parser`, a small scanner that finds short and long options
in an argument vector and hands each one back with its tentative value.

Unlike argparse, the parser does not know how many values an option takes or
what type they are. It reports every flag it sees, in order, and attaches the
next argument (or an inline `=value`) as a `StringStore` the caller converts when
it needs to. Unknown options are reported too, with synthesized fields.

Key Features:
- Short options (`-v`) and long options (`--verbose`)
- Bundled short options (`-hvv` is the same as `-h -v -v`)
- Inline values (`-o=out.txt`, `--output=out.txt`)
- Negative numbers (`-42`, `-3.5`) are not treated as options
- Scanning stops at `--`
- Short bundles are split by Unicode character, not by byte

Public Interface:
- `add(...)`: Declare an option.
- `parse(...)`: Scan an argument vector into a list of `Occurrence`.
- `print_options()`: Plain-text option listing.
- `render_help()`: Rich-styled help output.

Example Usage:
    parser = Parser([("h", "help", "print help message"), ("v", "verbose", "print more")])
    for opt in parser.parse(sys.argv):
        if opt.is_option("h", "help"):
            parser.render_help()
        elif opt.is_option("v", "verbose"):
            verbose += 1
"""
from __future__ import annotations

import sys
from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from argopts.console import console as default_console
from argopts.console import theme
from argopts.exceptions import ArgumentDecodeError
from argopts.logger import logger
from argopts.option import Occurrence, Option, format_flags, format_usage

OptionSpec = Option | tuple[str | None, str, str] | tuple[str | None, str]


def _to_text(token: str | bytes) -> str:
    if isinstance(token, bytes):
        return token.decode("utf-8", "surrogateescape")
    return token


def _split_inline(text: str) -> tuple[str, str | None]:
    """Split `name=value` when at least one character precedes the '='."""
    position = text.find("=", 1)
    if position == -1:
        return text, None
    return text[:position], text[position + 1 :]


def _is_valid_text(token: str) -> bool:
    try:
        token.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class Parser:
    """
    Command-line option scanner.

    Options to recognise can be given on construction or added later with
    `add()`. Options that are not declared are still reported by `parse()`.

    Args:
        options (Iterable[OptionSpec] | None): Declared options, either `Option`
            instances or `(shortopt, longopt, help)` tuples.
        console (Console | None): Console used by `render_help()`.
    """

    def __init__(
        self,
        options: Iterable[OptionSpec] | None = None,
        console: Console | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self._options: list[Option] = []
        for option in options or []:
            if isinstance(option, Option):
                self._options.append(option)
            else:
                self.add(*option)

    @property
    def options(self) -> tuple[Option, ...]:
        """The declared options, in declaration order."""
        return tuple(self._options)

    def add(self, shortopt: str | None, longopt: str = "", help: str = "") -> Option:
        """
        Declare a command-line option.

        Duplicates are allowed. When two options share a short or long name the
        one declared first is matched.

        Args:
            shortopt (str | None): A single character, or None for no short name.
            longopt (str): A long name, or "" for no long name.
            help (str): A short description of the option.

        Returns:
            Option: The declared option.

        Raises:
            ValueError: If `shortopt` is not a single character.
        """
        option = Option(shortopt, longopt, help)
        self._options.append(option)
        logger.debug("Declared option %s", format_flags(shortopt, longopt))
        return option

    def print_options(self) -> str:
        """Return the declared options as text, one line per option."""
        return "".join(
            format_usage(option.shortopt, option.longopt, option.help) + "\n"
            for option in self._options
        )

    def _match_long(self, options: Sequence[Option], name: str) -> Option | None:
        return next((option for option in options if option.longopt == name), None)

    def _match_short(self, options: Sequence[Option], char: str) -> Option | None:
        return next((option for option in options if option.shortopt == char), None)

    def parse(
        self,
        argv: Sequence[str | bytes] | None = None,
        argc: int | None = None,
    ) -> list[Occurrence]:
        """
        Find options in an argument vector, as given in `sys.argv`.

        The first element is skipped since it is the program name. Each option
        is given the following argument (or its inline `=value`) as a tentative
        value, whether or not that argument looks like an option itself.

        Args:
            argv (Sequence[str | bytes] | None): The argument vector, including the
                program name. Defaults to `sys.argv`.
            argc (int | None): Number of elements of `argv` to consider. Defaults
                to all of them.

        Returns:
            list[Occurrence]: The options found, in the order they appear.

        Raises:
            ArgumentDecodeError: If a short option token is not valid UTF-8.
        """
        if argv is None:
            argv = sys.argv
        args = [_to_text(token) for token in argv]
        if argc is not None:
            args = args[: max(argc, 0)]
        options = tuple(self._options)
        found: list[Occurrence] = []

        last = len(args) - 1
        for i in range(1, len(args)):
            token = args[i]
            if not token.startswith("-") or token == "-":
                continue
            if "0" <= token[1] <= "9":
                # Negative number
                continue

            next_value = args[i + 1] if i != last else None

            if token.startswith("--"):
                name = token[2:]
                if not name:
                    break
                name, inline_value = _split_inline(name)
                value = next_value if inline_value is None else inline_value

                option = self._match_long(options, name)
                if option:
                    found.append(Occurrence.from_option(option, i, value))
                else:
                    found.append(Occurrence.create(None, name, "", i, value))
                continue

            if not _is_valid_text(token):
                raise ArgumentDecodeError(i, token)

            chars, inline_value = _split_inline(token[1:])
            value = next_value if inline_value is None else inline_value

            for char in chars:
                option = self._match_short(options, char)
                if option:
                    found.append(Occurrence.from_option(option, i, value))
                else:
                    found.append(Occurrence.create(char, "", "", i, value))

        logger.debug("Found %d options in %d arguments", len(found), len(args))
        return found

    def get_usage(self, program: str | None = None) -> str:
        """Return the usage line, e.g. `usage: prog [options]`."""
        program = program or _program_name()
        if self._options:
            return f"usage: {program} [options]"
        return f"usage: {program}"

    def render_help(
        self, program: str | None = None, console: Console | None = None
    ) -> None:
        """
        Print the usage line and the declared options using Rich output.

        Options are listed in declaration order, one `flags  help` line each.

        Args:
            program (str | None): Program name for the usage line. Defaults to
                `sys.argv[0]`.
            console (Console | None): Console to print to. Defaults to the
                parser's console.
        """
        console = console or self.console
        with console.use_theme(theme):
            console.print(f"[argopts.usage]{escape(self.get_usage(program))}[/]\n")
            if not self._options:
                return
            console.print("[bold]options:[/bold]")
            for option in self._options:
                flags = format_flags(option.shortopt, option.longopt)
                arg_line = f"  [argopts.flag]{escape(flags):<30}[/] "
                help_text = escape(option.help)
                if help_text and len(flags) > 30:
                    help_text = f"\n{'':<33}{help_text}"
                console.print(f"{arg_line}{help_text}")

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        shorts = sum(option.shortopt is not None for option in self._options)
        longs = sum(bool(option.longopt) for option in self._options)
        return f"Parser(options={len(self._options)}, short={shorts}, long={longs})"

    def __repr__(self) -> str:
        return str(self)


def _program_name() -> str:
    return sys.argv[0] if sys.argv and sys.argv[0] else "program"
