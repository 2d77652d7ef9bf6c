"""Items of an expression in Reverse Polish Notation, and the operations they stand for."""
from enum import Enum
import math
import operator
from typing import Callable, Dict, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field


# Type aliases for operation functions
UnaryFn = Callable[[float], float]
BinaryFn = Callable[[float, float], float]


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _divide(left: float, right: float) -> float:
    """
    Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    :param float left: Dividend
    :param float right: Divisor

    :return: Quotient, ``inf``/``-inf`` for a non-zero dividend over zero, ``nan`` for ``0/0``
    :rtype: float
    """
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        # Sign follows both the dividend and the signed zero divisor
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base: float, exponent: float) -> float:
    """
    Raise ``base`` to ``exponent`` with IEEE-754 semantics.

    ``math.pow`` raises where C ``pow`` returns a special value:
        - ``0 ^ negative`` gives ``inf`` (``-inf`` for ``-0`` and an odd integer exponent)
        - ``negative ^ non-integer`` gives ``nan``
        - overflow gives ``inf`` (``-inf`` for a negative base and an odd integer exponent)

    :param float base: Base
    :param float exponent: Exponent

    :return: Power as a real number
    :rtype: float
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _degrees_to_radians(angle: float) -> float:
    return angle * math.pi / 180.0


def _trigonometric(function: UnaryFn) -> UnaryFn:
    """Wrap a math trigonometric function so it takes degrees and returns ``nan`` outside its domain."""

    def apply(angle: float) -> float:
        try:
            return function(_degrees_to_radians(angle))
        except ValueError:
            # math.sin(inf) and friends raise instead of returning nan
            return math.nan

    return apply


class UnaryFunction(str, Enum):
    """Prefix functions. Arguments are angles in degrees."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"

    def apply(self, argument: float) -> float:
        return _UNARY_FUNCTIONS[self](argument)


class BinaryOperator(str, Enum):
    """Infix operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    def apply(self, left: float, right: float) -> float:
        return _BINARY_FUNCTIONS[self](left, right)


_UNARY_FUNCTIONS: Dict[UnaryFunction, UnaryFn] = {
    UnaryFunction.SIN: _trigonometric(math.sin),
    UnaryFunction.COS: _trigonometric(math.cos),
    UnaryFunction.TAN: _trigonometric(math.tan),
}

_BINARY_FUNCTIONS: Dict[BinaryOperator, BinaryFn] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: _divide,
    BinaryOperator.POW: _power,
}


class _Item(BaseModel):
    """Common base of expression items: immutable and compared by field values."""

    model_config = ConfigDict(frozen=True)

    @property
    def symbol(self) -> str:
        raise NotImplementedError


class Number(_Item):
    """Literal operand."""

    value: float = Field(..., description="Numeric value of the literal")

    @property
    def symbol(self) -> str:
        text = repr(self.value)
        # Integral values print without the trailing ".0"
        return text[:-2] if text.endswith(".0") else text


class UnaryOp(_Item):
    """Prefix function applied to a single operand."""

    function: UnaryFunction = Field(..., description="Function to apply")

    @property
    def symbol(self) -> str:
        return self.function.value

    def apply(self, argument: float) -> float:
        return self.function.apply(argument)


class BinaryOp(_Item):
    """Infix operator with its binding priority (higher binds tighter)."""

    operator: BinaryOperator = Field(..., description="Operator to apply")
    priority: int = Field(..., ge=0, description="Binding priority of the operator")

    @property
    def symbol(self) -> str:
        return self.operator.value

    def apply(self, left: float, right: float) -> float:
        return self.operator.apply(left, right)


class OpenBracket(_Item):
    """Opening bracket marker. Only lives on the converter working stack."""

    @property
    def symbol(self) -> str:
        return "("


class CloseBracket(_Item):
    """Closing bracket marker. Only lives on the converter working stack."""

    @property
    def symbol(self) -> str:
        return ")"


ExpressionItem = Union[Number, UnaryOp, BinaryOp, OpenBracket, CloseBracket]


def format_rpn(items: Iterable[ExpressionItem]) -> str:
    """
    Render a sequence of items as space separated symbols.

    Examples:
        - [Number(3), Number(4), Number(2), BinaryOp(*), BinaryOp(+)] -> "3 4 2 * +"

    :param Iterable[ExpressionItem] items: Items in postfix order

    :return: Printable representation of the sequence
    :rtype: str
    """
    return " ".join(item.symbol for item in items)
