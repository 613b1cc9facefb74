"""Dashboard page. Run with ``streamlit run src/findash/ui/app.py``."""
import streamlit as st

from findash.config import settings
from findash.logging import setup_logging
from findash.ui.components import (
    render_chart, render_header, render_headline_cards,
    render_overview_cards, render_quick_actions, render_transactions,
)
from findash.ui.loader import fetch_chart, fetch_dashboard
from findash.ui.state import (
    get_api_url, get_chart_days, get_user_name, init_session,
)
from findash.ui.validation import run_all_checks
from findash.ui.view import LOADING_TEXT, build_view

st.set_page_config(page_title="Dashboard | Finance Dashboard", layout="wide")
setup_logging()
init_session()

with st.spinner(LOADING_TEXT):
    state = fetch_dashboard(get_api_url())

view = build_view(state, user_name=get_user_name(), currency=settings.CURRENCY_SYMBOL)

render_header(view)
render_headline_cards(view.headline_cards)
render_chart(fetch_chart(get_api_url(), get_chart_days()))
render_quick_actions(view)
render_transactions(view)
render_overview_cards(view.overview_cards)

# --- Sidebar: backend selection (after the page; loading shows only the spinner) ---
st.sidebar.text_input("API URL", key="api_url")
if st.sidebar.button("Check connection"):
    problems = run_all_checks(get_api_url())
    if problems:
        for problem in problems:
            st.sidebar.error(problem)
    else:
        st.sidebar.success("Backend reachable.")
