import streamlit as st

from core.i18n import t
from core.rules import evaluate_rules, has_blocking
from core.state import current_language
from morpho_apr.calculators import calculate_results, ltv_sweep, validate_inputs
from morpho_apr.models import CalculatorInputs, CalculatorResults
from ui.components import format_currency, format_percentage, format_ratio

CURRENCY_FIELDS = (
    "annual_deposit_income",
    "annual_borrow_cost",
    "net_annual_benefit",
    "effective_capital_invested",
)


def render_results(inputs: CalculatorInputs) -> CalculatorResults:
    """Render validation errors, result metrics and strategy warnings."""
    lang = current_language()
    st.subheader(t("results", lang))

    for err in validate_inputs(inputs):
        st.error(f"{t(err.field, lang)}: {err.message}")

    results = calculate_results(inputs)
    rule_results = evaluate_rules(inputs, results)
    blocking = has_blocking(rule_results)
    st.metric(
        t("health_rate", lang),
        format_ratio(inputs.health_rate),
        delta="CHECK" if blocking else "PASS",
    )
    for field in CURRENCY_FIELDS:
        st.metric(t(field, lang), format_currency(getattr(results, field)))
    st.metric(t("total_strategy_apr", lang), format_percentage(results.total_strategy_apr))

    for r in rule_results:
        if r.severity == "critical":
            st.error(f"[{r.code}] {r.message}")
        elif r.severity == "warn":
            st.warning(f"[{r.code}] {r.message}")
        else:
            st.info(f"[{r.code}] {r.message}")

    sweep = ltv_sweep(inputs)
    if not sweep.empty:
        st.caption(t("ltv_sweep", lang))
        st.line_chart(sweep.set_index("ltv")[["total_strategy_apr"]])
    return results
