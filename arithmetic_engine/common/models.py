"""Pydantic model for the outcome of an evaluated expression."""
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from arithmetic_engine.common.errors import ErrorKind


class OperationResult(BaseModel):
    """Outcome of one evaluation: either a numeric result or an error description."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message when the evaluation failed")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Category of the failure")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be provided")
        if self.error is None and self.error_kind is not None:
            raise ValueError("'error_kind' requires 'error'")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def format_line(self) -> str:
        """
        Render the outcome as a single line of text.

        Examples:
            - "2 + 2 = 4.0"
            - "(1 + 2 -> ERROR: Brackets don't match in the expression"

        :return: Printable line without trailing newline
        :rtype: str
        """
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
