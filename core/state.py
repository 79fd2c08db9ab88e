from typing import Optional

import streamlit as st

from core.config import Settings
from morpho_apr.presets import DEFAULT_INPUTS


def widget_key(field: str) -> str:
    return f"input_{field}"


def init_state(settings: Optional[Settings] = None) -> None:
    """Seed ``st.session_state`` with defaults for keys not already set."""
    settings = settings or Settings()
    st.session_state.setdefault("calc_inputs", dict(DEFAULT_INPUTS))
    st.session_state.setdefault("derive_mode", settings.derive_mode)
    st.session_state.setdefault("ui_prefs", {})
    st.session_state["ui_prefs"].setdefault("language", settings.language)


def reset_inputs() -> None:
    """Put the form back to its default values.

    Must run before the form renders; the input widgets then start over from
    the defaults.
    """
    st.session_state["calc_inputs"] = dict(DEFAULT_INPUTS)
    for field in DEFAULT_INPUTS:
        key = widget_key(field)
        if key in st.session_state:
            del st.session_state[key]


def current_language() -> str:
    return st.session_state.get("ui_prefs", {}).get("language", "en")
