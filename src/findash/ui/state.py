"""Session-state helpers for the Streamlit UI.

No ORM, no DB: only reads/writes ``st.session_state``.
"""
import streamlit as st
from typing import Optional

from findash.config import settings

CHART_RANGES = {"Last 3 months": 90, "Last 30 days": 30, "Last 7 days": 7}


def init_session() -> None:
    """Initialize session state variables."""
    if "api_url" not in st.session_state:
        st.session_state["api_url"] = settings.API_BASE_URL
    if "chart_range" not in st.session_state:
        st.session_state["chart_range"] = "Last 3 months"


def get_api_url() -> str:
    return st.session_state.get("api_url", settings.API_BASE_URL)


def get_user_name() -> Optional[str]:
    """Display name for the greeting, if the host app or config supplies one."""
    return st.session_state.get("user_name") or settings.DASHBOARD_USER_NAME or None


def get_chart_days() -> int:
    return CHART_RANGES.get(st.session_state.get("chart_range", ""), 90)
