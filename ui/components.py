"""Display formatting for result figures."""
import math


def format_currency(value: float) -> str:
    """US dollars with thousands separators, e.g. ``-$1,234.50``."""
    if not math.isfinite(value):
        return "n/a"
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_percentage(value: float) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{value:.2f}%"


def format_ratio(value: float) -> str:
    """Health rate to two decimals; ``∞`` with nothing borrowed."""
    if math.isinf(value) and value > 0:
        return "∞"
    if not math.isfinite(value):
        return "n/a"
    return f"{value:.2f}"
