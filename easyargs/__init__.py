"""EasyArgs, a simple command line argument declaration and lookup library."""

from .argument import Argument, ArgumentBuilder, InvalidArgumentError, with_long_name, with_short_name
from .help import HelpGenerator, generate_help
from .parser import (
    ArgumentParseError,
    ArgumentParser,
    BadArgumentUseError,
    DuplicateArgumentNameError,
    ParsingNotFinishedError,
)
from .result import ArgumentParserResult, NoSuchArgumentError

__all__: list[str] = [
    "Argument",
    "ArgumentBuilder",
    "ArgumentParseError",
    "ArgumentParser",
    "ArgumentParserResult",
    "BadArgumentUseError",
    "DuplicateArgumentNameError",
    "HelpGenerator",
    "InvalidArgumentError",
    "NoSuchArgumentError",
    "ParsingNotFinishedError",
    "generate_help",
    "with_long_name",
    "with_short_name",
]
