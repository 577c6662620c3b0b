"""Test the command-line entrypoint."""
import io
import sys

import pytest

from arithmetic_calculator.main import CliArgs, main, parse_args


def test_parse_args_without_options() -> None:
    """No arguments produce an empty CliArgs."""
    assert isinstance(parse_args([]), CliArgs)


def test_parse_args_rejects_unknown_arguments() -> None:
    """Unexpected arguments make argparse exit with status 2."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["operations.txt"])
    assert exc_info.value.code == 2


def test_main_quit(monkeypatch, capsys) -> None:
    """Typing 'quit' ends the program normally."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 + 3\nquit\n"))

    main([])

    out = capsys.readouterr().out
    assert "Result: 8" in out
    assert out.endswith("Goodbye! 👋\n")


def test_main_end_of_input_exits_with_error(monkeypatch, capsys) -> None:
    """End of input before 'quit' exits with status 1 and reports on stderr."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 + 3\n"))

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "Result: 8" in captured.out
    assert "Goodbye" not in captured.out
