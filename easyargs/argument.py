"""Argument module from EasyArgs."""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)

SHORT_NAME_PREFIX: str = "-"
LONG_NAME_PREFIX: str = "--"


@dataclass(slots=True)
class InvalidArgumentError(Exception):
    """
    EasyArgs Exception class for errors related to `Argument` declarations.
    """

    msg: str

    def __post_init__(self) -> None:
        Exception.__init__(self, self.msg)


@dataclass(slots=True, frozen=True)
class Argument:
    """
    A declared program argument. Supports the following properties:
     - a short name (specified with -name in the command line)
     - a long name (specified with --name in the command line)
     - whether it needs a value (Example: --port 8080)
     - a description, a brief summary of the argument's utility

    Use `with_short_name` or `with_long_name` to build one.
    """

    short_name: str = ""
    long_name: str = ""
    needs_value: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if not self.short_name and not self.long_name:
            raise InvalidArgumentError(
                "Argument needs at least one non-empty name (short or long)."
            )

    @property
    def name(self) -> str:
        """
        Canonical name of the argument: the long name if set, else the short name.
        """
        return self.long_name if self.long_name else self.short_name

    def names(self) -> tuple[str, ...]:
        """
        The non-empty names of the argument, short name first.
        """
        return tuple(n for n in (self.short_name, self.long_name) if n)

    def tokens(self) -> tuple[str, ...]:
        """
        The command line strings that invoke the argument (Example: ('-p', '--port')).
        """
        tokens: list[str] = []
        if self.short_name:
            tokens.append(SHORT_NAME_PREFIX + self.short_name)
        if self.long_name:
            tokens.append(LONG_NAME_PREFIX + self.long_name)
        return tuple(tokens)


class ArgumentBuilder:
    """
    Fluent builder for `Argument` objects.
    Obtained through `with_short_name` or `with_long_name`.
    """

    _short_name: str
    _long_name: str
    _needs_value: bool
    _description: str

    def __init__(self, *, short_name: str = "", long_name: str = "") -> None:
        if not short_name and not long_name:
            raise InvalidArgumentError("Argument name cannot be empty.")
        self._short_name = short_name
        self._long_name = long_name
        self._needs_value = False
        self._description = ""

    # ===============
    # Builder methods
    # ===============
    def short_name(self, name: str) -> "ArgumentBuilder":
        """
        Short alias of the argument (Example: 'p' for -p).
        """
        self._short_name = name
        return self

    def long_name(self, name: str) -> "ArgumentBuilder":
        """
        Long alias of the argument (Example: 'port' for --port).
        """
        self._long_name = name
        return self

    def needs_value(self, value: bool = True) -> "ArgumentBuilder":
        """
        Makes the argument require a value right after it (Example: --port 8080).
        """
        self._needs_value = value
        return self

    def description(self, text: str) -> "ArgumentBuilder":
        """
        Quick summary of the argument's effect, used in help messages.
        """
        self._description = text
        return self

    def build(self) -> Argument:
        argument: Argument = Argument(
            self._short_name, self._long_name, self._needs_value, self._description
        )
        logger.debug("Built %r", argument)
        return argument


def with_short_name(name: str) -> ArgumentBuilder:
    """
    Starts building an argument from its short name.
    Raises `InvalidArgumentError` if the name is empty.
    """
    if not name:
        raise InvalidArgumentError("Short name cannot be empty.")
    return ArgumentBuilder(short_name=name)


def with_long_name(name: str) -> ArgumentBuilder:
    """
    Starts building an argument from its long name.
    Raises `InvalidArgumentError` if the name is empty.
    """
    if not name:
        raise InvalidArgumentError("Long name cannot be empty.")
    return ArgumentBuilder(long_name=name)
