import streamlit as st

from core.i18n import t
from core.state import current_language
from core.version import __version__
from morpho_apr.presets import DISCLAIMER


def render_topbar():
    """Title, version and disclaimer."""
    lang = current_language()
    st.title(t("title", lang))
    st.caption(f"v{__version__} • {DISCLAIMER}")
