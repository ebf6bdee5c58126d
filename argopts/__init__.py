"""
ArgOpts Command-Line Option Parser

Licensed under the MIT License. See LICENSE file for details.
"""

from .converters import ValueKind, register_converter, unregister_converter
from .exceptions import (
    ArgOptsError,
    ArgumentDecodeError,
    ConfigError,
    ConversionError,
    ErrorKind,
    MalformedValueError,
    MissingValueError,
)
from .logger import logger
from .option import Occurrence, Option
from .parser import Parser
from .store import StringStore
from .version import __version__

__all__ = [
    "Parser",
    "Option",
    "Occurrence",
    "StringStore",
    "ValueKind",
    "register_converter",
    "unregister_converter",
    "ArgOptsError",
    "ArgumentDecodeError",
    "ConfigError",
    "ConversionError",
    "ErrorKind",
    "MalformedValueError",
    "MissingValueError",
    "logger",
    "__version__",
]
