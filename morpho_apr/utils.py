"""Assorted numeric helpers."""
from __future__ import annotations

import math
from decimal import Decimal


def to_float(value) -> float:
    """Coerce a raw form value to ``float``.

    Blank cells, ``None`` and text that does not parse come back as ``NaN``,
    the same thing a browser's ``parseFloat`` hands the form when a field is
    cleared.  Downstream validation then reports the field instead of the
    conversion blowing up.
    """

    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip().replace(",", ""))
    except ValueError:
        return math.nan


def in_range(value: float, low: float, high: float) -> bool:
    """True when ``value`` is finite and within ``[low, high]``."""
    return math.isfinite(value) and low <= value <= high


def format_number(value: float) -> str:
    """Render a bound the way it reads in the form: ``90`` not ``90.0``.

    Plain decimals from 1e-6 up to 1e21, shortest exponent form outside,
    e.g. ``0.00001`` and ``1e-7``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(text), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    mantissa, _, exponent = text.partition("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
