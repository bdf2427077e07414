"""Parser module from EasyArgs."""

import sys
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from easyargs.argument import Argument
from easyargs.result import ArgumentParserResult


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ArgumentParseError(Exception):
    """
    EasyArgs Exception class for errors occurred during argument parsing.

    The parser always finishes parsing before raising. When several errors occur the first
    one is raised and the rest are stored, in order, in `suppressed`.
    """

    msg: str
    suppressed: list["ArgumentParseError"] = field(default_factory=list)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.msg)

    def add_suppressed(self, error: "ArgumentParseError") -> None:
        self.suppressed.append(error)
        self.add_note(f"{type(error).__name__}: {error.msg}")

    def errors(self) -> list["ArgumentParseError"]:
        """
        All the errors of the parse, this one first.
        """
        return [self, *self.suppressed]


@dataclass(slots=True)
class BadArgumentUseError(ArgumentParseError):
    """
    A program argument matches a declared `Argument` but doesn't comply with it.
    Example: '--port --quiet' when port needs a value.
    """


@dataclass(slots=True)
class DuplicateArgumentNameError(ArgumentParseError):
    """
    Two declared arguments share a name. The first one is kept.
    """


@dataclass(slots=True)
class ParsingNotFinishedError(ArgumentParseError):
    """
    The parse result was requested before parsing.
    """

    msg: str = (
        "Argument results requested but argument parsing not finished yet. "
        "Did you call parser.parse_from(..)?"
    )


@dataclass(slots=True)
class _ParseState:
    """
    Per call parsing data. Replaced on every parse.
    """

    args_lookup_by_name: dict[str, Argument] = field(default_factory=dict)
    result: ArgumentParserResult = field(default_factory=ArgumentParserResult)
    parsing_finished: bool = False
    parse_error: ArgumentParseError | None = None

    def store_error(self, error: ArgumentParseError) -> None:
        logger.debug("Queued %s: %s", type(error).__name__, error.msg)
        if self.parse_error is None:
            self.parse_error = error
        else:
            self.parse_error.add_suppressed(error)


class ArgumentParser:
    """
    Parses the program arguments, looking for the declared ones.

    Any other strings are left untouched and don't raise. Errors are raised once parsing
    has finished, so the valid arguments are still available through `get_result`.
    Parser objects can be reused as new after a call to `get_result`.
    """

    _state: _ParseState

    def __init__(self) -> None:
        self._state = _ParseState()

    # =============================================
    #                Parsing methods
    # =============================================
    def parse_from(
        self, program_args: Sequence[str], my_args: Iterable[Argument]
    ) -> ArgumentParserResult:
        """
        Parses a list of program arguments looking for `my_args`.

        Raises `BadArgumentUseError` if a declared argument is misused (Example: --port
        without value), the occurrence is discarded.
        Raises `DuplicateArgumentNameError` if two declared arguments share a name, the
        later one is ignored.
        """
        state: _ParseState = _ParseState()
        self._state = state

        self._populate_lookup_table(my_args)

        for i, current in enumerate(program_args):
            # Skip non declared arguments
            if not self._is_declared_name(current):
                continue

            argument: Argument = state.args_lookup_by_name[current]
            if not self._is_properly_used(argument, program_args, i):
                state.store_error(
                    BadArgumentUseError(_bad_use_message(argument, program_args, i))
                )
                continue

            if argument.needs_value:
                logger.debug("Matched %r with value %r", current, program_args[i + 1])
                state.result._add_argument_with_value(argument, program_args[i + 1])
            else:
                logger.debug("Matched %r", current)
                state.result._add_simple_argument(argument)

        state.parsing_finished = True
        if state.parse_error is not None:
            raise state.parse_error
        return state.result

    def parse(self, my_args: Iterable[Argument]) -> ArgumentParserResult:
        """
        Parses sys.argv (program name excluded) looking for `my_args`.
        """
        return self.parse_from(sys.argv[1:], my_args)

    def get_result(self) -> ArgumentParserResult:
        """
        Returns the result of the last parse, even if it raised.
        The result is returned only once, the parser is reset afterwards.
        Raises `ParsingNotFinishedError` if called before parsing.
        """
        if not self._state.parsing_finished:
            raise ParsingNotFinishedError()
        result: ArgumentParserResult = self._state.result
        self._state = _ParseState()
        return result

    def _populate_lookup_table(self, my_args: Iterable[Argument]) -> None:
        lookup: dict[str, Argument] = self._state.args_lookup_by_name
        for argument in my_args:
            duplicates: list[str] = [t for t in argument.tokens() if t in lookup]
            if duplicates:
                # The whole argument is dropped, even its non duplicated names
                for token in duplicates:
                    self._state.store_error(
                        DuplicateArgumentNameError(
                            f"Argument '{token}' has been defined more than once. "
                            f"Ignoring {argument}."
                        )
                    )
                continue
            for token in argument.tokens():
                lookup[token] = argument
            logger.debug("Registered %s", ", ".join(argument.tokens()))

    def _is_properly_used(
        self, argument: Argument, program_args: Sequence[str], index: int
    ) -> bool:
        if argument.needs_value:
            value_index: int = index + 1
            # End of arguments or next one is another argument
            if value_index >= len(program_args) or self._is_declared_name(
                program_args[value_index]
            ):
                return False
        return True

    def _is_declared_name(self, arg: str) -> bool:
        return arg in self._state.args_lookup_by_name


# Helper methods
def _bad_use_message(argument: Argument, program_args: Sequence[str], index: int) -> str:
    if index + 1 >= len(program_args):
        return f"Argument '{argument.name}' needs a value but none was supplied."
    return (
        f"Argument '{argument.name}' needs a value but was followed by "
        f"argument '{program_args[index + 1]}'."
    )
