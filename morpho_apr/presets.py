DISCLAIMER = (
    "This calculator estimates annual figures from the rates entered. "
    "Deposit and borrow rates on lending protocols are variable and change with utilization; "
    "results ignore compounding, fees, price movement of the collateral and liquidation risk. "
    "Estimates only, not financial advice."
)

DEFAULT_INPUTS = {
    "deposit_amount": 10000.0,
    "intrinsic_apr": 4.25,
    "max_ltv": 91.5,
    "ltv": 45.0,
    "health_rate": 2.03,
    "borrow_amount": 4500.0,
    "borrow_rate": 5.0,
}

FIELD_ORDER = (
    "deposit_amount",
    "intrinsic_apr",
    "max_ltv",
    "ltv",
    "health_rate",
    "borrow_amount",
    "borrow_rate",
)

# Health rate bands used by the strategy warnings
HEALTH_RATE_CRITICAL = 1.0
HEALTH_RATE_WARN = 1.25
