"""Streamlit widgets that draw a ``DashboardView``. No data fetching here."""
from __future__ import annotations

import streamlit as st

from findash.api.schemas.dashboard import ChartSeries
from findash.ui.state import CHART_RANGES
from findash.ui.view import DashboardView, SummaryCard, chart_frame


def _md(text: str) -> str:
    # A bare "$" starts LaTeX in Streamlit markdown.
    return text.replace("$", "\\$")


def render_header(view: DashboardView) -> None:
    st.title("Dashboard")
    st.caption(view.greeting)


def render_headline_cards(cards: tuple[SummaryCard, ...]) -> None:
    for col, card in zip(st.columns(len(cards)), cards):
        col.metric(f"{card.icon} {card.title}", card.value)


def render_chart(series: ChartSeries | None) -> None:
    with st.container(border=True):
        head, selector = st.columns([3, 2])
        head.subheader("Income vs. Expenses")
        selector.radio(
            "Range", list(CHART_RANGES), key="chart_range",
            horizontal=True, label_visibility="collapsed",
        )
        frame = chart_frame(series)
        if frame.empty:
            st.caption("No chart data available.")
            return
        st.area_chart(
            frame, x="date", y=["income", "expenses"], color=["#16a34a", "#dc2626"],
        )


def render_quick_actions(view: DashboardView) -> None:
    for col, action in zip(st.columns(len(view.quick_actions)), view.quick_actions):
        with col.container(border=True):
            st.markdown(f"**[{action.icon} {action.title}]({action.href})**")
            st.caption(action.description)


def render_transactions(view: DashboardView) -> None:
    with st.container(border=True):
        head, link = st.columns([4, 1])
        head.subheader("Recent Transactions")
        link.markdown(f"[View all :material/arrow_forward:]({view.view_all_href})")
        st.caption("Your most recent income and expense transactions")

        if view.empty_state is not None:
            st.info(view.empty_state.message)
            st.markdown(
                f"[:material/add: {view.empty_state.action_label}]({view.empty_state.href})"
            )
            return

        for row in view.transactions:
            left, right = st.columns([4, 1])
            left.markdown(f"**{_md(row.description)}**")
            left.caption(_md(row.subtitle))
            right.markdown(f":{row.color}[**{_md(row.amount)}**]")


def render_overview_cards(cards: tuple[SummaryCard, ...]) -> None:
    for col, card in zip(st.columns(len(cards)), cards):
        with col.container(border=True):
            st.subheader(f"{card.icon} {card.title}")
            st.caption(card.description)
            st.markdown(f"## {_md(card.value)}")
