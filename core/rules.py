from __future__ import annotations
import math
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from morpho_apr.calculators import health_rate
from morpho_apr.models import CalculatorInputs, CalculatorResults
from morpho_apr.presets import HEALTH_RATE_CRITICAL, HEALTH_RATE_WARN


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_rules(inputs: CalculatorInputs, results: CalculatorResults) -> List[RuleResult]:
    res: List[RuleResult] = []

    # From the position itself, not the stored health_rate field
    hr = health_rate(inputs.deposit_amount, inputs.borrow_amount, inputs.max_ltv)
    if hr is not None and hr < HEALTH_RATE_CRITICAL:
        res.append(
            RuleResult(
                code="HEALTH_RATE_CRITICAL",
                severity="critical",
                message="Health rate below 1.0; position is past the liquidation threshold.",
                context={"health_rate": hr},
            )
        )
    elif hr is not None and hr < HEALTH_RATE_WARN:
        res.append(
            RuleResult(
                code="HEALTH_RATE_LOW",
                severity="warn",
                message="Health rate is close to liquidation.",
                context={"health_rate": hr, "limit": HEALTH_RATE_WARN},
            )
        )

    if inputs.borrow_amount > 0 and inputs.borrow_rate > inputs.intrinsic_apr:
        res.append(
            RuleResult(
                code="NEGATIVE_CARRY",
                severity="warn",
                message="Borrow rate exceeds intrinsic APR; leverage lowers the strategy return.",
                context={
                    "borrow_rate": inputs.borrow_rate,
                    "intrinsic_apr": inputs.intrinsic_apr,
                },
            )
        )

    if results.net_annual_benefit < 0:
        res.append(
            RuleResult(
                code="NEGATIVE_NET_BENEFIT",
                severity="warn",
                message="Borrow cost exceeds deposit income.",
                context={"net_annual_benefit": results.net_annual_benefit},
            )
        )

    deposit = inputs.deposit_amount
    if math.isfinite(deposit) and deposit > 0 and results.effective_capital_invested <= 0:
        res.append(
            RuleResult(
                code="NO_EFFECTIVE_CAPITAL",
                severity="info",
                message="Borrow covers the whole deposit; strategy APR shown as intrinsic APR.",
            )
        )

    return res


def has_blocking(res: List[RuleResult]) -> bool:
    return any(r.severity == "critical" for r in res)
