"""Parse result module from EasyArgs."""

from dataclasses import dataclass

from easyargs.argument import Argument


NO_VALUE: str = ""  # Stored for arguments that don't need a value


@dataclass(slots=True)
class NoSuchArgumentError(LookupError):
    """
    EasyArgs Exception class for values requested from absent or valueless arguments.
    """

    msg: str

    def __post_init__(self) -> None:
        LookupError.__init__(self, self.msg)


class ArgumentParserResult:
    """
    Result obtained from parsing program arguments according to some declared `Argument` objects.
    Can be queried to find whether an argument was supplied, and its value if it needs one.

    Both names of an argument point to the same entry.
    """

    _parsed_arguments: dict[str, str]  # Bare name : value

    def __init__(self) -> None:
        self._parsed_arguments = {}

    def _add_simple_argument(self, argument: Argument) -> None:
        for name in argument.names():
            self._parsed_arguments[name] = NO_VALUE

    def _add_argument_with_value(self, argument: Argument, value: str) -> None:
        for name in argument.names():
            self._parsed_arguments[name] = value

    def contains(self, argument: str | Argument) -> bool:
        """
        Returns whether the argument was supplied.
        Accepts a bare name (without - or --) or the declared `Argument`.
        """
        return _bare_name(argument) in self._parsed_arguments

    def __contains__(self, argument: object) -> bool:
        if not isinstance(argument, (str, Argument)):
            return False
        return self.contains(argument)

    def get_value(self, argument: str | Argument) -> str:
        """
        Returns the value string of an argument that needs a value.
        Raises `NoSuchArgumentError` if the argument was not supplied or doesn't support a value.
        """
        name: str = _bare_name(argument)
        value: str | None = self._parsed_arguments.get(name, None)
        if value is None:
            raise NoSuchArgumentError(f"Argument '{name}' does not exist.")
        if value == NO_VALUE:
            raise NoSuchArgumentError(
                f"Argument '{name}' exists but does not support a value."
            )
        return value

    def argument_count(self) -> int:
        """
        Number of names stored, aliases of the same argument included.
        """
        return len(self._parsed_arguments)

    def __len__(self) -> int:
        return self.argument_count()

    def names(self) -> tuple[str, ...]:
        return tuple(self._parsed_arguments)

    def __repr__(self) -> str:
        return f"ArgumentParserResult({self._parsed_arguments!r})"


def _bare_name(argument: str | Argument) -> str:
    if isinstance(argument, Argument):
        return argument.name
    return argument
