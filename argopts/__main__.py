"""
ArgOpts Command-Line Option Parser

Licensed under the MIT License. See LICENSE file for details.

Scans its own command line and prints every option found, which makes it easy to
check how a given argument vector is split up:

    python -m argopts -vx --output=out.txt --level 3 -- ignored
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argopts.config import loader
from argopts.console import console
from argopts.exceptions import ArgOptsError
from argopts.option import Occurrence
from argopts.parser import Parser
from argopts.utils import get_program_invocation, setup_logging


def get_parser() -> Parser:
    return Parser(
        [
            ("h", "help", "print help message"),
            ("v", "verbose", "print more, repeat for debug output"),
            ("c", "config", "load extra option declarations from a YAML or TOML file"),
        ]
    )


def build_table(occurrences: Sequence[Occurrence]) -> Table:
    table = Table(title="Options found", show_lines=False)
    table.add_column("index", justify="right")
    table.add_column("short", style="argopts.flag")
    table.add_column("long", style="argopts.flag")
    table.add_column("value", style="argopts.value")
    table.add_column("help")
    for opt in occurrences:
        help_text = escape(opt.help) if opt.help else "[argopts.unknown]unknown[/]"
        table.add_row(
            str(opt.index),
            escape(opt.shortopt or ""),
            escape(opt.longopt),
            escape(opt.arg.value or ""),
            help_text,
        )
    return table


def configure_logging(occurrences: Sequence[Occurrence]) -> None:
    verbose = sum(opt.is_option("v", "verbose") for opt in occurrences)
    if verbose:
        setup_logging(
            console_log_level=logging.DEBUG if verbose > 1 else logging.INFO
        )


def main(argv: Sequence[str] | None = None, output: Console | None = None) -> int:
    program = get_program_invocation() if argv is None else "argopts"
    argv = list(sys.argv if argv is None else argv)
    output = output or console
    parser = get_parser()
    parser.console = output

    try:
        occurrences = parser.parse(argv)
        configure_logging(occurrences)

        config_files = [
            opt.arg.as_str() for opt in occurrences if opt.is_option("c", "config")
        ]
        for config_file in config_files:
            loader(config_file, parser)
        if config_files:
            occurrences = parser.parse(argv)

        if any(opt.is_option("h", "help") for opt in occurrences):
            parser.render_help(program)
            return 0

        output.print(build_table(occurrences))
    except (ArgOptsError, FileNotFoundError) as error:
        output.print(f"[argopts.error]{escape(str(error))}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
