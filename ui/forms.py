import streamlit as st

from core.i18n import t
from core.state import current_language, widget_key
from morpho_apr.calculators import derive_inputs
from morpho_apr.models import CalculatorInputs
from morpho_apr.presets import DEFAULT_INPUTS, FIELD_ORDER

# Widget step per field; percent fields move in basis points
STEPS = {
    "deposit_amount": 100.0,
    "intrinsic_apr": 0.01,
    "max_ltv": 0.01,
    "ltv": 0.01,
    "borrow_amount": 100.0,
    "borrow_rate": 0.01,
}

# Field each mode fills in from the other one
DERIVED_FIELD = {"ltv": "borrow_amount", "borrow": "ltv"}


def _number(container, field, value, lang, disabled=False):
    # Derived fields stay unkeyed so they always show the passed value
    return container.number_input(
        t(field, lang),
        value=float(value),
        step=STEPS[field],
        format="%.2f",
        disabled=disabled,
        help=t("derived_caption", lang) if disabled else None,
        key=None if disabled else widget_key(field),
    )


def render_calculator_form() -> CalculatorInputs:
    """Input column of the calculator.

    One of LTV and borrow amount is read-only, depending on
    ``st.session_state["derive_mode"]``, and is filled in from the other.
    The derived inputs are stored back in ``st.session_state["calc_inputs"]``
    and returned.
    """
    lang = current_language()
    mode = st.session_state.get("derive_mode", "ltv")
    values = dict(DEFAULT_INPUTS)
    values.update(st.session_state.get("calc_inputs", {}))

    st.subheader(t("input_parameters", lang))
    derived = DERIVED_FIELD.get(mode)
    # Health rate is shown with the results
    slots = {field: st.empty() for field in FIELD_ORDER if field in STEPS}
    for field, slot in slots.items():
        if field != derived:
            values[field] = _number(slot, field, values[field], lang)

    inputs = derive_inputs(CalculatorInputs(**values), mode)
    if derived is not None:
        _number(slots[derived], derived, getattr(inputs, derived), lang, disabled=True)

    st.session_state["calc_inputs"] = inputs.model_dump()
    return inputs
