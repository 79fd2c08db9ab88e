from __future__ import annotations

import logging
import math
from typing import List, Optional

import pandas as pd

from morpho_apr.models import CalculatorInputs, CalculatorResults, ValidationError
from morpho_apr.utils import format_number, in_range

logger = logging.getLogger(__name__)

DERIVE_MODES = ("ltv", "borrow", "manual")

SWEEP_COLUMNS = [
    "ltv",
    "borrow_amount",
    "health_rate",
    "net_annual_benefit",
    "total_strategy_apr",
]


def _valid_deposit(deposit_amount: float) -> bool:
    return math.isfinite(deposit_amount) and deposit_amount > 0


def validate_inputs(inputs: CalculatorInputs) -> List[ValidationError]:
    """Check form inputs and return field-level problems in display order.

    Later checks depend on earlier ones.  A bad deposit makes every other
    bound meaningless, so it is reported alone.  A bad LTV stops before the
    borrow amount, whose ceiling is derived from it.  The health rate is
    informational and never validated.  An empty list means the inputs are
    consistent; nothing here raises.
    """

    errors: List[ValidationError] = []

    if not _valid_deposit(inputs.deposit_amount):
        errors.append(
            ValidationError(
                field="deposit_amount",
                message="Deposit amount must be a positive number",
            )
        )
        return errors

    if not in_range(inputs.intrinsic_apr, 0, 100):
        errors.append(
            ValidationError(
                field="intrinsic_apr",
                message="Intrinsic APR must be between 0 and 100",
            )
        )

    if not in_range(inputs.max_ltv, 0, 100):
        errors.append(
            ValidationError(
                field="max_ltv",
                message="Max LTV must be between 0 and 100",
            )
        )

    # compared against max_ltv even when max_ltv itself failed above
    ltv = inputs.ltv
    if not math.isfinite(ltv) or ltv < 0 or ltv > inputs.max_ltv:
        errors.append(
            ValidationError(
                field="ltv",
                message=f"LTV must be between 0 and {format_number(inputs.max_ltv)}",
            )
        )
        logger.debug("LTV invalid, skipping borrow checks (%d errors)", len(errors))
        return errors

    max_borrow = inputs.deposit_amount * (ltv / 100)
    if not in_range(inputs.borrow_amount, 0, max_borrow):
        errors.append(
            ValidationError(
                field="borrow_amount",
                message=f"Borrow amount must be between 0 and {max_borrow:.2f}",
            )
        )

    if not in_range(inputs.borrow_rate, 0, 100):
        errors.append(
            ValidationError(
                field="borrow_rate",
                message="Borrow rate must be between 0 and 100",
            )
        )

    return errors


def calculate_results(inputs: CalculatorInputs) -> CalculatorResults:
    """Annual income, borrow cost and blended APR for a leveraged deposit.

    Safe to call on inputs that fail validation.  Without a usable deposit
    every figure is zero.  When the borrow consumes the whole deposit there
    is no capital at risk, and the strategy APR is reported as the intrinsic
    APR rather than dividing by zero or a negative amount.  Values are not
    rounded; formatting belongs to the caller.
    """

    if not _valid_deposit(inputs.deposit_amount):
        logger.debug("No usable deposit (%r), returning zero results", inputs.deposit_amount)
        return CalculatorResults.zero()

    annual_deposit_income = inputs.deposit_amount * (inputs.intrinsic_apr / 100)
    annual_borrow_cost = inputs.borrow_amount * (inputs.borrow_rate / 100)
    net_annual_benefit = annual_deposit_income - annual_borrow_cost
    effective_capital_invested = inputs.deposit_amount - inputs.borrow_amount

    if effective_capital_invested > 0:
        total_strategy_apr = net_annual_benefit / effective_capital_invested * 100
    else:
        total_strategy_apr = inputs.intrinsic_apr

    return CalculatorResults(
        annual_deposit_income=annual_deposit_income,
        annual_borrow_cost=annual_borrow_cost,
        net_annual_benefit=net_annual_benefit,
        effective_capital_invested=effective_capital_invested,
        total_strategy_apr=total_strategy_apr,
    )


# ---------------------------------------------------------------------------
# Linked fields.  The form keeps LTV and borrow amount in step; one side
# always drives the other so edits never bounce back and forth.
# ---------------------------------------------------------------------------


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def borrow_from_ltv(deposit_amount: float, ltv: float) -> Optional[float]:
    """Borrow amount implied by an LTV percentage."""
    return _finite_or_none(deposit_amount * ltv / 100)


def ltv_from_borrow(deposit_amount: float, borrow_amount: float) -> Optional[float]:
    """LTV percentage implied by a borrow amount."""
    if deposit_amount == 0:
        return None
    return _finite_or_none(borrow_amount / deposit_amount * 100)


def health_rate(
    deposit_amount: float, borrow_amount: float, max_ltv: float
) -> Optional[float]:
    """Borrowing power at max LTV divided by the amount borrowed.

    Below 1.0 the position is past the protocol's LTV ceiling.  ``None``
    when nothing is borrowed.
    """

    if borrow_amount == 0:
        return None
    return _finite_or_none(deposit_amount * (max_ltv / 100) / borrow_amount)


def derive_inputs(inputs: CalculatorInputs, mode: str = "ltv") -> CalculatorInputs:
    """Return ``inputs`` with the linked fields recomputed.

    ``mode`` picks the driving field: ``"ltv"`` sets the borrow amount from
    the LTV, ``"borrow"`` sets the LTV from the borrow amount and
    ``"manual"`` leaves both alone.  The health rate is refreshed in every
    mode and is infinite when nothing is borrowed.  A derivation that comes
    out non-finite keeps the old value.
    """

    if mode not in DERIVE_MODES:
        raise ValueError(f"Unknown derive mode: {mode}")

    updates = {}
    if mode == "ltv":
        borrow = borrow_from_ltv(inputs.deposit_amount, inputs.ltv)
        if borrow is not None:
            updates["borrow_amount"] = borrow
    elif mode == "borrow":
        ltv = ltv_from_borrow(inputs.deposit_amount, inputs.borrow_amount)
        if ltv is not None:
            updates["ltv"] = ltv

    borrow_amount = updates.get("borrow_amount", inputs.borrow_amount)
    if borrow_amount == 0:
        updates["health_rate"] = math.inf
    else:
        hr = health_rate(inputs.deposit_amount, borrow_amount, inputs.max_ltv)
        if hr is not None:
            updates["health_rate"] = hr

    return inputs.model_copy(update=updates)


def ltv_sweep(inputs: CalculatorInputs, steps: int = 10) -> pd.DataFrame:
    """What-if table of strategy results from 0% LTV up to max LTV.

    Each row re-derives the borrow amount from its LTV and keeps the other
    inputs fixed.  Rows with nothing borrowed have an infinite health rate.
    """

    if (
        steps < 1
        or not _valid_deposit(inputs.deposit_amount)
        or not in_range(inputs.max_ltv, 0, 100)
        or inputs.max_ltv == 0
    ):
        return pd.DataFrame(columns=SWEEP_COLUMNS)

    rows = []
    for i in range(steps + 1):
        point = derive_inputs(
            inputs.model_copy(update={"ltv": inputs.max_ltv * i / steps}), "ltv"
        )
        res = calculate_results(point)
        rows.append(
            {
                "ltv": point.ltv,
                "borrow_amount": point.borrow_amount,
                "health_rate": point.health_rate,
                "net_annual_benefit": res.net_annual_benefit,
                "total_strategy_apr": res.total_strategy_apr,
            }
        )
    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)
