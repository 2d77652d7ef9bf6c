"""
Console entry point of the arithmetic engine.

Modes:
- No argument: interactive shell reading one expression per line
- Expressions as arguments: evaluate each of them and exit
- --file: evaluate every non-empty line of a text file and exit
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from pydantic import BaseModel, Field, FilePath, ValidationError

from arithmetic_engine.common.logger import logger, set_log_level
from arithmetic_engine.engine.calculator import Calculator


BANNER = "\n".join(
    [
        "##################################",
        "###           CALC           #####",
        "##################################",
    ]
)
PROMPT = ">>> "


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions to evaluate without starting the interactive shell.
    file_path : Optional[FilePath]
        Path to a text file containing one expression per line.
    verbose : bool
        Enable debug logging.
    """

    expressions: List[str] = Field(default_factory=list)
    file_path: Optional[FilePath] = None
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; starts the interactive shell when omitted",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="file_path",
        help="Path to a text file containing one expression per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(expressions=args.expressions, file_path=args.file_path, verbose=args.verbose)
    except ValidationError as exc:
        parser.error(str(exc))


def evaluate_line(calculator: Calculator, line: str) -> str:
    """
    Evaluate one line of user input and return the text to display.

    :param Calculator calculator: Calculator to use
    :param str line: Trimmed expression

    :return: The result, or "Error: <message>"
    :rtype: str
    """
    outcome = calculator.try_evaluate(line)
    if outcome.ok:
        return str(outcome.result)
    return f"Error: {outcome.error}"


def evaluate_lines(calculator: Calculator, lines: Iterable[str], stdout: TextIO) -> None:
    """
    Evaluate every non-empty line and write one result line per expression.

    :param Calculator calculator: Calculator to use
    :param Iterable[str] lines: Raw lines, possibly empty or padded
    :param TextIO stdout: Output stream
    """
    for line in lines:
        expression = line.strip()
        if not expression:
            continue
        stdout.write(calculator.try_evaluate(expression).format_line() + "\n")


def run_shell(calculator: Calculator, stdin: TextIO, stdout: TextIO) -> None:
    """
    Read-evaluate-print loop. Stops at end of input.

    :param Calculator calculator: Calculator to use
    :param TextIO stdin: Input stream
    :param TextIO stdout: Output stream
    """
    stdout.write(BANNER + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # End of input
            stdout.write("\n")
            break
        expression = line.strip()
        if expression:
            stdout.write(evaluate_line(calculator, expression) + "\n")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the console script.
    """
    cli_args = parse_args(argv)
    if cli_args.verbose:
        set_log_level("DEBUG")

    calculator = Calculator()

    if cli_args.file_path is not None:
        logger.info(f"📄 Evaluating expressions from {cli_args.file_path}")
        with cli_args.file_path.open(encoding="utf-8") as f_in:
            evaluate_lines(calculator, f_in, sys.stdout)
        return

    if cli_args.expressions:
        for expression in cli_args.expressions:
            sys.stdout.write(evaluate_line(calculator, expression.strip()) + "\n")
        return

    logger.info("🏁 Starting interactive shell")
    try:
        run_shell(calculator, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
