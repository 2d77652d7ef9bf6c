"""Public entry point of the arithmetic engine."""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from arithmetic_engine.common.config import DEFAULT_CONFIG, EngineConfig
from arithmetic_engine.common.errors import EvalError
from arithmetic_engine.common.items import ExpressionItem
from arithmetic_engine.common.logger import logger
from arithmetic_engine.common.models import OperationResult
from arithmetic_engine.engine.converter import ExpressionConverter
from arithmetic_engine.engine.reducer import RpnReducer


class Calculator(BaseModel):
    """
    Evaluate arithmetic expressions.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state kept between calls: an instance is thread safe and reusable

    Algorithm:
        1. Convert the infix expression to Reverse Polish Notation (RPN)
        2. Reduce the RPN sequence with an operand stack
    """

    model_config = ConfigDict(frozen=True)

    config: EngineConfig = Field(default_factory=lambda: DEFAULT_CONFIG, description="Operator priority table")

    _converter: ExpressionConverter = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        """Build the converter once for the lifetime of the calculator."""
        self._converter = ExpressionConverter(config=self.config)

    @property
    def converter(self) -> ExpressionConverter:
        return self._converter

    def to_rpn(self, expression: str) -> List[ExpressionItem]:
        """
        Convert an expression without evaluating it.

        :param str expression: Arithmetic expression string

        :return: Items in postfix order
        :rtype: List[ExpressionItem]
        :raises EvalError: If the expression cannot be converted
        """
        return self.converter.convert(expression)

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expression: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises EvalError: If the expression is invalid or malformed
        """
        try:
            return RpnReducer.reduce(self.to_rpn(expression))
        except EvalError as exc:
            logger.debug(f"🧮❌ Failed to evaluate {expression!r} ({exc.kind.value}): {exc}")
            raise

    def try_evaluate(self, expression: str) -> OperationResult:
        """
        Evaluate an arithmetic expression, reporting failures in the returned model instead of raising.

        :param str expression: Arithmetic expression string

        :return: Result or error description
        :rtype: OperationResult
        """
        try:
            result = self.evaluate(expression)
        except EvalError as exc:
            logger.info(f"🧮❌ Invalid arithmetic expression, could not evaluate {expression!r}: {exc}")
            return OperationResult(expression=expression, error=exc.message, error_kind=exc.kind)
        return OperationResult(expression=expression, result=result)


_DEFAULT_CALCULATOR = Calculator()


def evaluate(expression: str) -> float:
    """
    Evaluate an arithmetic expression with the default operator priorities.

    :param str expression: Arithmetic expression string, e.g. "3 + 4 * 2 / (1 - 5) * 2"

    :return: Computed result as float
    :rtype: float
    :raises EvalError: If the expression is invalid or malformed
    """
    return _DEFAULT_CALCULATOR.evaluate(expression)
