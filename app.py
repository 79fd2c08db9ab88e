import streamlit as st

from core.config import load_settings
from core.logging_setup import configure_logging
from core.state import init_state
from ui.dashboard import render_results
from ui.forms import render_calculator_form
from ui.sidebar import render_settings_sidebar
from ui.topbar import render_topbar


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    st.set_page_config(page_title="Morpho APR Calculator", layout="wide")
    init_state(settings)

    # Sidebar first so a reset lands before the form reads its state
    render_settings_sidebar()
    render_topbar()
    left, right = st.columns(2)
    with left:
        inputs = render_calculator_form()
    with right:
        render_results(inputs)


if __name__ == "__main__":
    main()
