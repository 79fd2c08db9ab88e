"""Core calculation utilities.

This module also exposes the package version for runtime display."""

from morpho_apr.calculators import (
    DERIVE_MODES,
    calculate_results,
    derive_inputs,
    ltv_sweep,
    validate_inputs,
)
from morpho_apr.models import CalculatorInputs, CalculatorResults, ValidationError

__all__ = [
    "__version__",
    "CalculatorInputs",
    "CalculatorResults",
    "ValidationError",
    "DERIVE_MODES",
    "calculate_results",
    "derive_inputs",
    "ltv_sweep",
    "validate_inputs",
]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
