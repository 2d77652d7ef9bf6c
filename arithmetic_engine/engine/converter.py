"""Convert infix arithmetic expressions to Reverse Polish Notation."""
import re
import string
from typing import List, Optional, Pattern

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_engine.common.config import DEFAULT_CONFIG, EngineConfig
from arithmetic_engine.common.errors import (
    InvalidInputError,
    NumberParseError,
    UnmatchedBracketError,
    UnrecognizedTokenError,
)
from arithmetic_engine.common.items import (
    BinaryOp,
    BinaryOperator,
    CloseBracket,
    ExpressionItem,
    Number,
    OpenBracket,
    UnaryFunction,
    UnaryOp,
    format_rpn,
)
from arithmetic_engine.common.logger import logger


WHITESPACE = frozenset(" \t")
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + ".+-*/^()") | WHITESPACE
BINARY_SYMBOLS = frozenset(op.value for op in BinaryOperator)

# Numerals: digits, then an optional decimal point with optional digits ("10." is valid, "." is not)
UNSIGNED_NUMBER: Pattern[str] = re.compile(r"\d+(?:\.\d*)?")
SIGNED_NUMBER: Pattern[str] = re.compile(r"-?\d+(?:\.\d*)?")


class ExpressionConverter(BaseModel):
    """
    Convert an infix expression into a sequence of items in Reverse Polish Notation (RPN).

    Algorithm (Shunting-yard, single left-to-right scan):
        - Numbers go straight to the output
        - Functions and operators wait on a working stack
        - An incoming operator first moves to the output every function on top of the stack
          and every operator with a priority greater than or equal to its own
        - A closing bracket moves operators to the output until the matching opening bracket
        - Whatever remains on the stack is appended to the output at the end

    A "-" directly followed by digits is part of the numeral when an operand is expected
    (start of input, after "(", after an operator or a function name), otherwise it is the
    subtraction operator.

    Because equal priorities pop, every operator is left-associative, "^" included:
    "2^3^2" is "(2^3)^2".

    Examples:
        - Infix expression: 1 + 2 * 3
        - Corresponding RPN: 1 2 3 * +
    """

    # Make the Pydantic instance immutable (read-only) so it can be shared between threads
    model_config = ConfigDict(frozen=True)

    config: EngineConfig = Field(default_factory=lambda: DEFAULT_CONFIG, description="Operator priority table")

    @staticmethod
    def _check_characters(expression: str) -> None:
        """
        Reject characters outside the expression alphabet.

        :param str expression: Raw expression

        :raises InvalidInputError: On the first non-ASCII, non-printable or disallowed character
        """
        for offset, char in enumerate(expression):
            if char in ALLOWED_CHARACTERS:
                continue
            if not char.isascii():
                raise InvalidInputError(
                    f"Input must contain only ascii characters, found {char!r} at {offset}", offset=offset
                )
            raise InvalidInputError(f"Character {char!r} at {offset} is not allowed", offset=offset)

    @staticmethod
    def _close_bracket(stack: List[ExpressionItem], output: List[ExpressionItem], offset: int) -> None:
        """
        Move items from the working stack to the output until the matching opening bracket.

        :param List[ExpressionItem] stack: Working stack
        :param List[ExpressionItem] output: Output sequence
        :param int offset: Position of the closing bracket

        :raises UnmatchedBracketError: If no opening bracket is left on the stack
        """
        while stack:
            item = stack.pop()
            if isinstance(item, OpenBracket):
                return
            output.append(item)
        raise UnmatchedBracketError(f"Closing bracket at {offset} has no matching opening bracket", offset=offset)

    def _push_binary_operator(self, symbol: str, stack: List[ExpressionItem], output: List[ExpressionItem]) -> None:
        """
        Push a binary operator after moving tighter (or equally) binding items to the output.

        Functions always bind tighter than any infix operator.

        :param str symbol: Operator symbol
        :param List[ExpressionItem] stack: Working stack
        :param List[ExpressionItem] output: Output sequence
        """
        priority = self.config.priority(symbol)
        while stack:
            top = stack[-1]
            if isinstance(top, UnaryOp) or (isinstance(top, BinaryOp) and top.priority >= priority):
                output.append(stack.pop())
            else:
                break
        stack.append(BinaryOp(operator=BinaryOperator(symbol), priority=priority))

    @staticmethod
    def _match_function(expression: str, position: int) -> Optional[UnaryFunction]:
        for function in UnaryFunction:
            if expression.startswith(function.value, position):
                return function
        return None

    @staticmethod
    def _drain(stack: List[ExpressionItem], output: List[ExpressionItem]) -> None:
        """
        Append the remaining working stack to the output, top first.

        :raises UnmatchedBracketError: If a bracket is still waiting on the stack
        """
        while stack:
            item = stack.pop()
            if isinstance(item, (OpenBracket, CloseBracket)):
                raise UnmatchedBracketError("Brackets don't match in the expression")
            output.append(item)

    def convert(self, expression: str) -> List[ExpressionItem]:
        """
        Convert an infix expression into items in Reverse Polish Notation.

        :param str expression: Arithmetic expression, e.g. "3 + 4 * 2 / (1 - 5)"

        :return: Items in postfix order, never containing brackets
        :rtype: List[ExpressionItem]
        :raises InvalidInputError: If the expression contains a disallowed character
        :raises UnrecognizedTokenError: If nothing can be read at some position
        :raises UnmatchedBracketError: If brackets do not balance
        :raises NumberParseError: If a numeral cannot be converted to a float
        """
        self._check_characters(expression)

        stack: List[ExpressionItem] = []
        output: List[ExpressionItem] = []
        expect_operand = True
        position = 0

        while position < len(expression):
            char = expression[position]

            if char in WHITESPACE:
                position += 1
                continue

            if char == "(":
                stack.append(OpenBracket())
                expect_operand = True
                position += 1
                continue

            if char == ")":
                self._close_bracket(stack, output, position)
                expect_operand = False
                position += 1
                continue

            pattern = SIGNED_NUMBER if expect_operand else UNSIGNED_NUMBER
            match = pattern.match(expression, position)
            if match:
                text = match.group()
                try:
                    value = float(text)
                except ValueError as exc:
                    raise NumberParseError(f"Failed to parse number {text!r}: {exc}", offset=position) from exc
                output.append(Number(value=value))
                expect_operand = False
                position = match.end()
                continue

            if char in BINARY_SYMBOLS:
                self._push_binary_operator(char, stack, output)
                expect_operand = True
                position += 1
                continue

            function = self._match_function(expression, position)
            if function is not None:
                stack.append(UnaryOp(function=function))
                expect_operand = True
                position += len(function.value)
                continue

            raise UnrecognizedTokenError(f"Can't process at {position}: {expression[position:]!r}", offset=position)

        self._drain(stack, output)
        logger.debug(f"🔁 Converted {expression!r} to RPN: {format_rpn(output)}")
        return output
