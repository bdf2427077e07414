"""Help message module from EasyArgs.

Generates a standard help message from declared arguments. Format::

    (header)
    (usage)
    (options)
    (footer)

Example::

    my_args = [
        with_long_name("port").short_name("p").needs_value().description("specify the server port").build(),
        with_long_name("debug").build(),
        with_short_name("q").description("suppress program output").build(),
        with_long_name("help").short_name("h").description("display this help message").build(),
    ]
    print(HelpGenerator(my_args).header("Simple FTP Server").build())

Produces::

    Simple FTP Server
    Usage: program [option1] [option2 <value>]..
    Where options:
        -p  --port     specify the server port
            --debug
        -q             suppress program output
        -h  --help     display this help message

Header and footer are blank by default, empty sections are left out.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from easyargs.argument import Argument, SHORT_NAME_PREFIX, LONG_NAME_PREFIX


DEFAULT_USAGE: str = "Usage: program [option1] [option2 <value>]..\nWhere options:"
TAB: str = " " * 4
NAMES_SEPARATOR: str = " " * 2


@dataclass(slots=True)
class _HelpData:
    """
    Internal help message data used by EasyArgs.
    """

    arguments: tuple[Argument, ...]
    header: str = ""
    usage: str = DEFAULT_USAGE
    footer: str = ""
    print_method: Callable[[str], None] = field(default=print)


class HelpGenerator:
    """
    Builds a help message with specific components.
    """

    data: _HelpData

    def __init__(self, args: Iterable[Argument]) -> None:
        self.data = _HelpData(tuple(args))

    # =============================================
    #                Builder methods
    # =============================================
    def header(self, text: str) -> "HelpGenerator":
        """
        Text shown before the usage line. Default: blank
        """
        self.data.header = text
        return self

    def usage(self, text: str) -> "HelpGenerator":
        """
        Usage line(s) shown before the options.
        """
        self.data.usage = text
        return self

    def footer(self, text: str) -> "HelpGenerator":
        """
        Text shown after the options. Default: blank
        """
        self.data.footer = text
        return self

    def print_method(self, method: Callable[[str], None]) -> "HelpGenerator":
        """
        Python method used by `show` to print the help message.
        Default: print()
        """
        self.data.print_method = method
        return self

    # =============================================
    #                 Info methods
    # =============================================
    def build(self) -> str:
        return generate_help(
            self.data.arguments, self.data.header, self.data.usage, self.data.footer
        )

    def show(self) -> None:
        self.data.print_method(self.build())


def generate_help(
    args: Iterable[Argument],
    header: str = "",
    usage: str = DEFAULT_USAGE,
    footer: str = "",
) -> str:
    """
    Quickly generate a help message. See `HelpGenerator` for the builder version.
    """
    options: str = _options_text(tuple(args))
    return "\n".join(s for s in (header, usage, options, footer) if s)


def _options_text(args: tuple[Argument, ...]) -> str:
    short_width: int = _max_name_length(a.short_name for a in args) + len(SHORT_NAME_PREFIX)
    long_width: int = _max_name_length(a.long_name for a in args) + len(LONG_NAME_PREFIX)

    lines: list[str] = []
    for arg in args:
        short: str = SHORT_NAME_PREFIX + arg.short_name if arg.short_name else ""
        long: str = LONG_NAME_PREFIX + arg.long_name if arg.long_name else ""
        lines.append(
            f"{TAB}{short:<{short_width}}{NAMES_SEPARATOR}{long:<{long_width}}{TAB}{arg.description}"
        )
    return "\n".join(lines)


def _max_name_length(names: Iterable[str]) -> int:
    return max((len(n) for n in names), default=0)
