"""
Streamlit app entrypoint - navigation for the Doctor Finder directory.

This module configures logging from the app secrets, checks the
configuration once per process and hands control to Streamlit's
multipage navigation:
- Search: list search by name, specialty and city
- Map: doctors within a radius of the user's location
- Doctor Profile: details and reviews of the selected doctor
"""

from __future__ import annotations

import logging

import streamlit as st

st.set_page_config(page_title="Doctor Finder", page_icon=":hospital:", layout="wide")

from src.utils.config import configure_logging, validate_configuration  # noqa: E402 - after set_page_config

logger = logging.getLogger(__name__)

_nav_items = [
    ("pages/1_🔎_Search.py", "Search", "🔎"),
    ("pages/2_🗺️_Map.py", "Map", "🗺️"),
    ("pages/3_🩺_Doctor_Profile.py", "Doctor Profile", "🩺"),
]

__all__ = ["report_configuration_issues"]


def report_configuration_issues() -> dict:
    """Log configuration problems; returns them for callers that want to show them."""
    issues = validate_configuration()
    for component, issue in issues.items():
        logger.warning(f"Configuration issue ({component}): {issue}")
    return issues


def _build_and_run_app():
    """Build navigation and run the selected page.

    Kept in a function so pages importing this module do not render twice.
    """
    configure_logging()
    report_configuration_issues()

    nav_pages = [st.Page(path, title=title, icon=icon) for path, title, icon in _nav_items]
    pg = st.navigation(nav_pages)
    pg.run()


if __name__ == "__main__":
    _build_and_run_app()
