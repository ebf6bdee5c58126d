# ArgOpts Command-Line Option Parser — MIT Licensed
"""config.py
Loads declared options for a `Parser` from YAML or TOML files.

Example YAML:
    options:
      - short: h
        long: help
        help: print help message
      - short: v
        long: verbose
        help: print more

Example TOML:
    [[options]]
    short = "h"
    long = "help"
    help = "print help message"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

from argopts.exceptions import ConfigError
from argopts.logger import logger
from argopts.option import Option
from argopts.parser import Parser

EXAMPLE_CONFIG = (
    "Example:\n"
    "options:\n"
    "  - short: 'v'\n"
    "    long: 'verbose'\n"
    "    help: 'print more'"
)


class RawOption(BaseModel):
    """Raw option entry from a configuration file."""

    model_config = ConfigDict(extra="forbid")

    short: str | None = None
    long: str = ""
    help: str = ""

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character")
        return value

    @field_validator("long")
    @classmethod
    def validate_long(cls, value: str) -> str:
        if value.startswith("-"):
            raise ValueError("long must not include the leading '--'")
        return value

    @model_validator(mode="after")
    def validate_names(self) -> RawOption:
        if self.short is None and not self.long:
            raise ValueError("an option needs a short or a long name")
        return self

    def to_option(self) -> Option:
        return Option(self.short, self.long, self.help)


def convert_options(raw_options: list[dict[str, Any]]) -> list[Option]:
    options = []
    for position, entry in enumerate(raw_options):
        if not isinstance(entry, dict):
            raise ConfigError(f"Option {position} must be a mapping, got {entry!r}")
        try:
            options.append(RawOption.model_validate(entry).to_option())
        except ValidationError as error:
            raise ConfigError(f"Invalid option {position}: {error}") from error
    return options


def load_raw_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                return yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ConfigError(f"Could not parse {path}: {error}") from error
        elif suffix == ".toml":
            try:
                return toml.load(config_file)
            except toml.TomlDecodeError as error:
                raise ConfigError(f"Could not parse {path}: {error}") from error
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str, parser: Parser | None = None) -> Parser:
    """
    Load declared options from a YAML or TOML file.

    The file should contain a dictionary with an `options` list. Each entry may
    have `short`, `long` and `help` keys and needs at least one of the names.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).
        parser (Parser | None): Parser to add the options to. A new one is
            created when not given.

    Returns:
        Parser: The parser with the loaded options appended.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("options"), list
    ):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of options.\n"
            + EXAMPLE_CONFIG
        )

    options = convert_options(raw_config["options"])
    logger.debug("Loaded %d options from '%s'", len(options), path)

    parser = parser if parser is not None else Parser()
    for option in options:
        parser.add(option.shortopt, option.longopt, option.help)
    return parser
