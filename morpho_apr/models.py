from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from morpho_apr.utils import to_float

InputField = Literal[
    "deposit_amount",
    "intrinsic_apr",
    "max_ltv",
    "ltv",
    "health_rate",
    "borrow_amount",
    "borrow_rate",
]


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class CalculatorInputs(_Record):
    """Form values for one position.

    Percent fields are whole percentages (``4.25`` for 4.25%).  Ranges are
    not enforced here; ``validate_inputs`` reports on them.
    """

    deposit_amount: float = 0.0
    intrinsic_apr: float = 0.0
    max_ltv: float = 0.0
    ltv: float = 0.0
    health_rate: float = 0.0
    borrow_amount: float = 0.0
    borrow_rate: float = 0.0

    @classmethod
    def from_form(cls, values: Mapping[str, Any]) -> "CalculatorInputs":
        """Build inputs from loose form or JSON values.

        Accepts either snake_case or camelCase keys.  Missing or unparsable
        entries become ``NaN`` so they show up as validation errors.
        """

        data = {}
        for name in cls.model_fields:
            raw = values.get(name, values.get(to_camel(name)))
            data[name] = to_float(raw)
        return cls(**data)


class CalculatorResults(_Record):
    annual_deposit_income: float = 0.0
    annual_borrow_cost: float = 0.0
    net_annual_benefit: float = 0.0
    effective_capital_invested: float = 0.0
    total_strategy_apr: float = 0.0

    @classmethod
    def zero(cls) -> "CalculatorResults":
        return cls()


class ValidationError(BaseModel):
    """A problem with one input field, shown next to that field."""

    model_config = ConfigDict(frozen=True)

    field: InputField
    message: str
