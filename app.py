"""Main Application Entry Point.

Run with ``streamlit run app.py``.
"""

import os
import sys

import streamlit as st

# Add project root to path when running from a checkout
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from immocashflow.core.logging import configure_logging
from immocashflow.ui.pages.main import render_main_page


def main() -> None:
    """Main application entry point."""
    st.set_page_config(
        page_title="ImmoCashFlow",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()

    render_main_page()


if __name__ == "__main__":
    main()
