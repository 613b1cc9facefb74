"""Dashboard view state and the pure view-model builder.

``build_view`` is a function of ``(loading, summary, recent_transactions)``
plus presentation options; it performs no I/O and keeps no state of its own.
"""
from __future__ import annotations
from dataclasses import dataclass

import pandas as pd

from findash.api.schemas.dashboard import ChartSeries, DashboardSummary
from findash.api.schemas.transactions import RecentTransaction, TransactionTypeDTO
from findash.ui.formatting import format_currency, format_date, signed_amount
from findash.ui.quick_actions import QUICK_ACTIONS, TRANSACTIONS_HREF, QuickAction

LOADING_TEXT = "Loading dashboard..."
INCOME_COLOR = "green"
EXPENSE_COLOR = "red"

# (summary attribute, title, icon, description)
_HEADLINE_CARDS = (
    ("total_income", "Total Income", ":material/account_balance_wallet:", ""),
    ("total_expenses", "Total Expenses", ":material/account_balance_wallet:", ""),
    ("net_worth", "Net Worth", ":material/domain:", ""),
    ("profit_loss", "Profit/Loss", ":material/trending_up:", ""),
)
_OVERVIEW_CARDS = (
    ("total_assets", "Assets Overview", ":material/domain:", "Total value of company assets"),
    ("total_investments", "Investments", ":material/trending_up:", "Current value of investment portfolio"),
)


@dataclass(frozen=True)
class DashboardState:
    loading: bool = True
    summary: DashboardSummary | None = None
    recent_transactions: tuple[RecentTransaction, ...] = ()


@dataclass(frozen=True)
class SummaryCard:
    key: str
    title: str
    value: str
    icon: str
    description: str = ""


@dataclass(frozen=True)
class TransactionRow:
    key: int
    description: str
    subtitle: str
    amount: str
    color: str


@dataclass(frozen=True)
class EmptyState:
    message: str = "No transactions yet"
    action_label: str = "Add your first transaction"
    href: str = TRANSACTIONS_HREF


@dataclass(frozen=True)
class DashboardView:
    loading: bool
    loading_text: str = LOADING_TEXT
    greeting: str = ""
    headline_cards: tuple[SummaryCard, ...] = ()
    overview_cards: tuple[SummaryCard, ...] = ()
    quick_actions: tuple[QuickAction, ...] = ()
    transactions: tuple[TransactionRow, ...] = ()
    empty_state: EmptyState | None = None
    view_all_href: str = TRANSACTIONS_HREF


def _cards(summary: DashboardSummary | None, specs, currency: str) -> tuple[SummaryCard, ...]:
    return tuple(
        SummaryCard(
            key=attr,
            title=title,
            value=format_currency(getattr(summary, attr) if summary is not None else None, currency),
            icon=icon,
            description=description,
        )
        for attr, title, icon, description in specs
    )


def transaction_row(txn: RecentTransaction, currency: str = "$") -> TransactionRow:
    is_income = txn.type == TransactionTypeDTO.INCOME
    return TransactionRow(
        key=txn.id,
        description=txn.description,
        subtitle=f"{txn.category.name} • {format_date(txn.date)}",
        amount=signed_amount(txn.type.value, txn.amount, currency),
        color=INCOME_COLOR if is_income else EXPENSE_COLOR,
    )


def build_view(
    state: DashboardState,
    *,
    user_name: str | None = None,
    currency: str = "$",
) -> DashboardView:
    if state.loading:
        return DashboardView(loading=True)

    rows = tuple(transaction_row(t, currency) for t in state.recent_transactions)
    return DashboardView(
        loading=False,
        greeting=f"Welcome back, {user_name or 'User'}",
        headline_cards=_cards(state.summary, _HEADLINE_CARDS, currency),
        overview_cards=_cards(state.summary, _OVERVIEW_CARDS, currency),
        quick_actions=QUICK_ACTIONS,
        transactions=rows,
        empty_state=None if rows else EmptyState(),
    )


def chart_frame(series: ChartSeries | None) -> pd.DataFrame:
    """Frame for the income/expense area chart; empty when the series is absent."""
    if series is None or not series.points:
        return pd.DataFrame(columns=["date", "income", "expenses"])
    return pd.DataFrame(
        [
            {"date": pd.Timestamp(p.date), "income": p.income, "expenses": p.expenses}
            for p in series.points
        ]
    )
