"""Demonstration of EasyArgs: python -m easyargs [args...]"""

import sys
import logging
from collections.abc import Callable, Sequence

from easyargs.argument import Argument, with_long_name, with_short_name
from easyargs.help import HelpGenerator
from easyargs.parser import ArgumentParseError, ArgumentParser
from easyargs.result import ArgumentParserResult


DEMO_ARGUMENTS: list[Argument] = [
    with_long_name("port")
    .short_name("p")
    .needs_value()
    .description("specify the server port")
    .build(),
    with_long_name("debug").build(),
    with_short_name("q").description("suppress program output").build(),
    with_long_name("verbose").short_name("v").description("log parsing steps").build(),
    with_long_name("help").short_name("h").description("display this help message").build(),
]


def main(argv: Sequence[str] | None = None, out: Callable[[str], None] = print) -> int:
    program_args: Sequence[str] = sys.argv[1:] if argv is None else argv
    verbose: bool = "-v" in program_args or "--verbose" in program_args
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser: ArgumentParser = ArgumentParser()
    exit_code: int = 0
    try:
        parser.parse_from(program_args, DEMO_ARGUMENTS)
    except ArgumentParseError as e:
        for error in e.errors():
            print(error.msg, file=sys.stderr)
        exit_code = 2

    result: ArgumentParserResult = parser.get_result()
    if "help" in result:
        HelpGenerator(DEMO_ARGUMENTS).header("EasyArgs demo").print_method(out).show()
    out(repr(result))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
