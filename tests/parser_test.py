import pytest
from easyargs.argument import Argument, with_long_name, with_short_name
from easyargs.parser import (
    ArgumentParseError,
    ArgumentParser,
    BadArgumentUseError,
    DuplicateArgumentNameError,
    ParsingNotFinishedError,
)
from easyargs.result import ArgumentParserResult


PORT: Argument = with_short_name("p").long_name("port").needs_value().build()
HELP: Argument = with_long_name("help").build()
QUIET: Argument = with_short_name("q").build()


def test_random_args_with_no_declared_args():
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["hello", "world", "dontcare"], []
    )
    assert result.argument_count() == 0


def test_no_args_with_declared_args():
    my_args: list[Argument] = [
        with_long_name("foo").build(),
        with_long_name("bar").needs_value().build(),
        with_short_name("h").build(),
    ]
    result: ArgumentParserResult = ArgumentParser().parse_from([], my_args)
    assert result.argument_count() == 0


def test_no_recognized_tokens():
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["-port", "---help", "p", "port", "--q"], [PORT, HELP, QUIET]
    )
    assert result.argument_count() == 0


def test_port_and_help():
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["--port", "8080", "--help"], [PORT, HELP]
    )

    assert result.contains("p")
    assert result.contains("port")
    assert result.get_value("port") == "8080"
    assert result.get_value("p") == "8080"
    assert result.get_value(PORT) == "8080"
    assert result.contains("help")
    assert result.contains(HELP)


def test_unknown_args_are_skipped():
    v: Argument = with_long_name("v").build()
    result: ArgumentParserResult = ArgumentParser().parse_from(["-x", "--v", "ignored"], [v])

    assert result.contains("v")
    assert not result.contains("x")
    assert not result.contains("ignored")
    assert result.argument_count() == 1
    with pytest.raises(LookupError):
        result.get_value("v")


def test_missing_value_at_the_end():
    p: Argument = with_short_name("p").needs_value().build()
    parser: ArgumentParser = ArgumentParser()

    with pytest.raises(BadArgumentUseError) as exc_info:
        parser.parse_from(["-p"], [p])

    assert len(exc_info.value.errors()) == 1
    assert "'p'" in exc_info.value.msg
    assert not parser.get_result().contains("p")


def test_value_followed_by_declared_arg():
    parser: ArgumentParser = ArgumentParser()

    with pytest.raises(BadArgumentUseError, match="followed by argument '-q'"):
        parser.parse_from(["--port", "-q"], [PORT, QUIET])

    result: ArgumentParserResult = parser.get_result()
    assert not result.contains("port")
    assert not result.contains("p")
    assert result.contains("q")


def test_value_can_look_like_undeclared_arg():
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["-p", "--not-declared"], [PORT]
    )
    assert result.get_value("port") == "--not-declared"


def test_value_is_checked_again_as_a_token():
    # "-q" cannot be the value of "--port" and is still matched on its own
    parser: ArgumentParser = ArgumentParser()
    with pytest.raises(BadArgumentUseError):
        parser.parse_from(["--port", "-q", "8080"], [PORT, QUIET])
    assert parser.get_result().names() == ("q",)

    # A consumed value that isn't declared is never reported
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["-p", "help", "--help"], [PORT, HELP]
    )
    assert result.get_value("p") == "help"
    assert result.contains("help")


def test_last_occurrence_wins():
    result: ArgumentParserResult = ArgumentParser().parse_from(
        ["-p", "80", "--port", "8080"], [PORT]
    )
    assert result.get_value("p") == "8080"
    assert result.get_value("port") == "8080"


def test_all_errors_are_aggregated():
    parser: ArgumentParser = ArgumentParser()
    timeout: Argument = with_long_name("timeout").needs_value().build()

    with pytest.raises(ArgumentParseError) as exc_info:
        parser.parse_from(
            ["--port", "--timeout", "-q", "--help", "--timeout"],
            [PORT, timeout, QUIET, HELP],
        )

    error: ArgumentParseError = exc_info.value
    assert isinstance(error, BadArgumentUseError)
    assert len(error.suppressed) == 2
    assert all(isinstance(e, BadArgumentUseError) for e in error.suppressed)
    assert "'port'" in error.msg
    assert "'timeout'" in error.suppressed[0].msg
    assert "none was supplied" in error.suppressed[1].msg
    assert len(error.__notes__) == 2

    result: ArgumentParserResult = parser.get_result()
    assert set(result.names()) == {"q", "help"}


def test_duplicate_names():
    first: Argument = with_short_name("p").long_name("port").needs_value().build()
    second: Argument = with_short_name("p").long_name("print").build()
    parser: ArgumentParser = ArgumentParser()

    with pytest.raises(DuplicateArgumentNameError, match="'-p'"):
        parser.parse_from(["-p", "80", "--print"], [first, second])

    result: ArgumentParserResult = parser.get_result()
    assert result.get_value("port") == "80"
    # The second argument is ignored even through its unique name
    assert not result.contains("print")


def test_duplicates_come_before_bad_uses():
    parser: ArgumentParser = ArgumentParser()

    with pytest.raises(DuplicateArgumentNameError) as exc_info:
        parser.parse_from(
            ["--port"], [PORT, with_long_name("port").build(), with_long_name("port").build()]
        )

    error: ArgumentParseError = exc_info.value
    assert [type(e) for e in error.errors()] == [
        DuplicateArgumentNameError,
        DuplicateArgumentNameError,
        BadArgumentUseError,
    ]


def test_result_before_parsing():
    with pytest.raises(ParsingNotFinishedError):
        ArgumentParser().get_result()


def test_result_is_returned_once():
    parser: ArgumentParser = ArgumentParser()
    returned: ArgumentParserResult = parser.parse_from(["--help"], [HELP])

    assert parser.get_result() is returned
    with pytest.raises(ParsingNotFinishedError):
        parser.get_result()


def test_parser_is_reusable():
    parser: ArgumentParser = ArgumentParser()

    with pytest.raises(BadArgumentUseError):
        parser.parse_from(["--port"], [PORT])

    # Previous declarations and matches don't leak into the new parse
    result: ArgumentParserResult = parser.parse_from(["--help", "--port", "1"], [HELP])
    assert result.names() == ("help",)


def test_same_input_same_result():
    program_args: list[str] = ["-q", "--port", "8080", "x", "--help"]
    my_args: list[Argument] = [PORT, HELP, QUIET]

    first: ArgumentParserResult = ArgumentParser().parse_from(program_args, my_args)
    second: ArgumentParserResult = ArgumentParser().parse_from(program_args, my_args)
    assert repr(first) == repr(second)


def test_parse_uses_sys_argv(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("sys.argv", ["prog", "-q", "--port", "21"])

    result: ArgumentParserResult = ArgumentParser().parse([PORT, QUIET])
    assert result.contains("q")
    assert result.get_value("p") == "21"
