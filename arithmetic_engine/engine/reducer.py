"""Evaluate a sequence of items in Reverse Polish Notation."""
from typing import List, Sequence

from arithmetic_engine.common.errors import (
    EmptyExpressionError,
    InternalError,
    MalformedExpressionError,
    StackUnderflowError,
)
from arithmetic_engine.common.items import BinaryOp, ExpressionItem, Number, UnaryOp, format_rpn


class RpnReducer:
    """
    Fold a Reverse Polish Notation sequence into a single number using an operand stack.

    Division by zero, overflow and out-of-domain powers follow IEEE-754 and give
    ``inf`` or ``nan`` instead of raising.

    Examples:
        - RPN: 1 2 3 * +
        - Result: 7.0
    """

    @staticmethod
    def reduce(items: Sequence[ExpressionItem]) -> float:
        """
        Evaluate items in postfix order.

        :param Sequence[ExpressionItem] items: Items produced by the converter

        :return: Computed result as float
        :rtype: float
        :raises EmptyExpressionError: If there are no items
        :raises StackUnderflowError: If an operator lacks operands
        :raises MalformedExpressionError: If more than one operand remains at the end
        :raises InternalError: If a bracket marker is found
        """
        if not items:
            raise EmptyExpressionError("Empty expression")

        stack: List[float] = []
        for item in items:
            if isinstance(item, Number):
                stack.append(item.value)
            elif isinstance(item, UnaryOp):
                if not stack:
                    raise StackUnderflowError(f"No argument for unary operation {item.symbol!r}")
                stack.append(item.apply(stack.pop()))
            elif isinstance(item, BinaryOp):
                if len(stack) < 2:
                    raise StackUnderflowError(f"Not enough operands for binary operation {item.symbol!r}")
                # Right-hand operand is on top
                right: float = stack.pop()
                left: float = stack.pop()
                stack.append(item.apply(left, right))
            else:
                raise InternalError(f"RPN must contain only numbers and operations, found {type(item).__name__}")

        if not stack:
            raise StackUnderflowError("Stack is empty")
        if len(stack) > 1:
            raise MalformedExpressionError(
                f"Invalid expression ({len(stack)} operands remaining): {format_rpn(items)}"
            )
        return stack[0]
