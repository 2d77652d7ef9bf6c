"""Test the console entry point."""
import io
from pathlib import Path

import pytest

from arithmetic_engine.engine.calculator import Calculator
from arithmetic_engine.main import BANNER, PROMPT, evaluate_line, evaluate_lines, main, parse_args, run_shell


def test_parse_args_defaults() -> None:
    """Without arguments the interactive shell is selected."""
    args = parse_args([])
    assert args.expressions == []
    assert args.file_path is None
    assert not args.verbose


def test_parse_args_rejects_missing_file(tmp_path: Path) -> None:
    """A --file path that does not exist is rejected."""
    with pytest.raises(SystemExit):
        parse_args(["--file", str(tmp_path / "missing.txt")])


@pytest.mark.parametrize("line,expected", [
    ("2+2", "4.0"),
    ("2^10", "1024.0"),
    ("(1+2", "Error: Brackets don't match in the expression"),
])
def test_evaluate_line(line: str, expected: str) -> None:
    """evaluate_line prints the result or the error message."""
    assert evaluate_line(Calculator(), line) == expected


def test_run_shell() -> None:
    """The shell prompts for each line, skips empty lines and stops at end of input."""
    stdin = io.StringIO("2+2\n\n  10-1  \n1 2\n")
    stdout = io.StringIO()
    run_shell(Calculator(), stdin, stdout)

    output = stdout.getvalue()
    assert output.startswith(BANNER)
    assert output.count(PROMPT) == 5
    assert "4.0\n" in output
    assert "9.0\n" in output
    assert "Error: " in output


def test_evaluate_lines() -> None:
    """Every non-empty line produces one result line."""
    stdout = io.StringIO()
    evaluate_lines(Calculator(), ["2 + 3\n", "\n", "4 * (5\n"], stdout)
    assert stdout.getvalue().splitlines() == [
        "2 + 3 = 5.0",
        "4 * (5 -> ERROR: Brackets don't match in the expression",
    ]


def test_main_with_expressions(capsys: pytest.CaptureFixture) -> None:
    """Expressions given as arguments are evaluated in order."""
    main(["--", "2^10", "1 2", "-1+1"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1024.0"
    assert lines[1].startswith("Error: ")
    assert lines[2] == "0.0"


def test_main_with_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """--file evaluates every non-empty line of the file."""
    input_file = tmp_path / "operations.txt"
    input_file.write_text("3 + 4 * 2\n\n10.0+10.\n")
    main(["--file", str(input_file)])
    assert capsys.readouterr().out.splitlines() == ["3 + 4 * 2 = 11.0", "10.0+10. = 20.0"]
