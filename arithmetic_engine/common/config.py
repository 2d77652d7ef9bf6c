"""Engine configuration: the operator priority table."""
from types import MappingProxyType
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arithmetic_engine.common.items import BinaryOperator


# Higher priority binds tighter
DEFAULT_PRIORITIES: Dict[str, int] = {
    BinaryOperator.ADD.value: 0,
    BinaryOperator.SUB.value: 0,
    BinaryOperator.MUL.value: 1,
    BinaryOperator.DIV.value: 1,
    BinaryOperator.POW.value: 2,
}


class EngineConfig(BaseModel):
    """
    Read-only configuration shared by every evaluation.

    Built once and handed to the converter. The priority table is stored as a read-only mapping,
    so a single instance can be used by concurrent evaluations without locking.
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    priorities: Mapping[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_PRIORITIES),
        validate_default=True,
        description="Binding priority of each binary operator symbol",
    )

    @field_validator("priorities")
    def priorities_must_cover_operators(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        """Ensure every supported operator has a non-negative priority and nothing else is listed."""
        supported = {op.value for op in BinaryOperator}
        unknown = set(v) - supported
        if unknown:
            raise ValueError(f"Unsupported operator symbols: {sorted(unknown)}")
        missing = supported - set(v)
        if missing:
            raise ValueError(f"Missing priority for operator symbols: {sorted(missing)}")
        negative = sorted(symbol for symbol, priority in v.items() if priority < 0)
        if negative:
            raise ValueError(f"Priorities must be non-negative: {negative}")
        return MappingProxyType(dict(v))

    def priority(self, symbol: str) -> int:
        """
        Return the priority of a binary operator symbol.

        :param str symbol: Operator symbol such as "+"

        :return: Binding priority
        :rtype: int
        :raises KeyError: If the symbol is not a binary operator
        """
        return self.priorities[symbol]


DEFAULT_CONFIG = EngineConfig()
