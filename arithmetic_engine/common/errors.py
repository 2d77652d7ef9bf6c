"""Errors raised while converting or reducing an arithmetic expression."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of an evaluation failure."""

    INVALID_INPUT = "invalid_input"
    UNRECOGNIZED_TOKEN = "unrecognized_token"
    UNMATCHED_BRACKET = "unmatched_bracket"
    NUMBER_PARSE_ERROR = "number_parse_error"
    STACK_UNDERFLOW = "stack_underflow"
    MALFORMED_EXPRESSION = "malformed_expression"
    EMPTY_EXPRESSION = "empty_expression"
    INTERNAL_ERROR = "internal_error"


class EvalError(ValueError):
    """
    Base class of every evaluation failure.

    Subclasses ValueError so that callers treating an invalid expression as a ValueError keep working.

    :param str message: Human readable description
    :param Optional[int] offset: Position in the input where the failure was detected, if known
    """

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


class InvalidInputError(EvalError):
    """Input contains a non-ASCII or disallowed character."""

    kind = ErrorKind.INVALID_INPUT


class UnrecognizedTokenError(EvalError):
    """No grammar rule matches at the current scan position."""

    kind = ErrorKind.UNRECOGNIZED_TOKEN


class UnmatchedBracketError(EvalError):
    """Opening and closing brackets do not balance."""

    kind = ErrorKind.UNMATCHED_BRACKET


class NumberParseError(EvalError):
    """A matched numeral could not be converted to a float."""

    kind = ErrorKind.NUMBER_PARSE_ERROR


class StackUnderflowError(EvalError):
    """An operator was reduced without enough operands."""

    kind = ErrorKind.STACK_UNDERFLOW


class MalformedExpressionError(EvalError):
    """More than one operand is left once the reduction is over."""

    kind = ErrorKind.MALFORMED_EXPRESSION


class EmptyExpressionError(EvalError):
    """There is nothing to evaluate."""

    kind = ErrorKind.EMPTY_EXPRESSION


class InternalError(EvalError):
    """An item reached a stage that must never see it."""

    kind = ErrorKind.INTERNAL_ERROR
