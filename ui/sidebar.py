import streamlit as st

from core.i18n import LANGUAGES, language_name, t
from core.state import current_language, reset_inputs
from morpho_apr.calculators import DERIVE_MODES


def render_settings_sidebar():
    """Sidebar with the linked-field mode, language and a reset button."""
    lang = current_language()
    st.sidebar.header(t("settings", lang))
    st.sidebar.radio(
        t("derive_mode", lang),
        list(DERIVE_MODES),
        format_func=lambda m: t(f"mode_{m}", lang),
        key="derive_mode",
    )
    st.session_state.setdefault("ui_prefs", {})
    st.session_state["ui_prefs"]["language"] = st.sidebar.selectbox(
        t("language", lang),
        list(LANGUAGES),
        format_func=language_name,
        key="ui_lang",
        index=list(LANGUAGES).index(lang) if lang in LANGUAGES else 0,
    )
    if st.sidebar.button(t("reset", lang), key="reset_inputs"):
        reset_inputs()
