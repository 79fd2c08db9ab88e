import math

import pydantic
import pytest

from morpho_apr.models import CalculatorInputs, CalculatorResults, ValidationError
from morpho_apr.presets import DEFAULT_INPUTS
from morpho_apr.utils import format_number, to_float


def test_inputs_frozen():
    inputs = CalculatorInputs(**DEFAULT_INPUTS)
    with pytest.raises(pydantic.ValidationError):
        inputs.ltv = 50.0


def test_inputs_accept_camel_case():
    inputs = CalculatorInputs(depositAmount=10000, intrinsicApr=4.25, maxLtv=91.5)
    assert inputs.deposit_amount == 10000
    assert inputs.max_ltv == 91.5
    dumped = inputs.model_dump(by_alias=True)
    assert dumped["depositAmount"] == 10000
    assert "healthRate" in dumped


def test_inputs_accept_non_finite():
    inputs = CalculatorInputs(deposit_amount=math.nan, ltv=math.inf)
    assert math.isnan(inputs.deposit_amount)
    assert math.isinf(inputs.ltv)


def test_from_form_blank_fields_become_nan():
    inputs = CalculatorInputs.from_form(
        {"depositAmount": "10,000", "intrinsic_apr": "4.25", "ltv": "", "borrowRate": None}
    )
    assert inputs.deposit_amount == 10000
    assert inputs.intrinsic_apr == 4.25
    assert math.isnan(inputs.ltv)
    assert math.isnan(inputs.borrow_rate)
    assert math.isnan(inputs.max_ltv)


def test_results_zero():
    assert CalculatorResults.zero().model_dump() == {
        "annual_deposit_income": 0.0,
        "annual_borrow_cost": 0.0,
        "net_annual_benefit": 0.0,
        "effective_capital_invested": 0.0,
        "total_strategy_apr": 0.0,
    }


def test_validation_error_field_names():
    err = ValidationError(field="ltv", message="x")
    assert err.field == "ltv"
    with pytest.raises(pydantic.ValidationError):
        ValidationError(field="leverage", message="x")


def test_to_float():
    assert to_float(3) == 3.0
    assert to_float(" 2.5 ") == 2.5
    assert math.isnan(to_float("abc"))
    assert math.isnan(to_float(True))
    assert math.isinf(to_float("inf"))


def test_format_number():
    assert format_number(91.5) == "91.5"
    assert format_number(90.0) == "90"
    assert format_number(math.nan) == "NaN"
    assert format_number(-math.inf) == "-Infinity"
    assert format_number(-0.0) == "0"


@pytest.mark.parametrize(
    "value,text",
    [
        (0.00001, "0.00001"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "100000000000000000000"),
        (1.5e21, "1.5e+21"),
    ],
)
def test_format_number_small_and_large(value, text):
    assert format_number(value) == text
