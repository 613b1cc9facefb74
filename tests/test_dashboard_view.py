"""Tests for the pure view-model builder."""
from datetime import date

from findash.api.schemas.dashboard import ChartPoint, ChartSeries, DashboardSummary
from findash.api.schemas.transactions import RecentTransaction
from findash.ui.quick_actions import QUICK_ACTIONS
from findash.ui.view import (
    EXPENSE_COLOR, INCOME_COLOR, LOADING_TEXT,
    DashboardState, DashboardView, build_view, chart_frame,
)

SUMMARY = DashboardSummary.model_validate({
    "totalIncome": 1000, "totalExpenses": 400, "netWorth": 5000,
    "profitLoss": 600, "totalAssets": 3000, "totalInvestments": 2000,
})


def _txn(id_: int, type_: str, amount: float, description: str = "Item") -> RecentTransaction:
    return RecentTransaction.model_validate({
        "id": id_, "type": type_, "amount": amount, "description": description,
        "date": "2024-03-01", "category": {"name": "Services"},
    })


def _values(view: DashboardView) -> dict[str, str]:
    return {c.title: c.value for c in view.headline_cards + view.overview_cards}


def test_loading_renders_only_the_indicator():
    view = build_view(DashboardState(loading=True, summary=SUMMARY, recent_transactions=(_txn(1, "income", 5),)))
    assert view.loading
    assert view.loading_text == LOADING_TEXT
    assert view.headline_cards == ()
    assert view.overview_cards == ()
    assert view.quick_actions == ()
    assert view.transactions == ()
    assert view.empty_state is None


def test_absent_summary_renders_zero_on_every_card():
    view = build_view(DashboardState(loading=False))
    values = _values(view)
    assert len(values) == 6
    assert set(values.values()) == {"$0"}


def test_summary_cards_are_formatted():
    view = build_view(DashboardState(loading=False, summary=SUMMARY))
    assert _values(view) == {
        "Total Income": "$1,000",
        "Total Expenses": "$400",
        "Net Worth": "$5,000",
        "Profit/Loss": "$600",
        "Assets Overview": "$3,000",
        "Investments": "$2,000",
    }


def test_empty_transactions_render_call_to_action():
    view = build_view(DashboardState(loading=False, summary=SUMMARY))
    assert view.transactions == ()
    assert view.empty_state is not None
    assert view.empty_state.message == "No transactions yet"
    assert view.empty_state.action_label == "Add your first transaction"
    assert view.empty_state.href == "/dashboard/transactions"


def test_row_sign_and_color_follow_type():
    state = DashboardState(
        loading=False,
        recent_transactions=(_txn(1, "income", 250), _txn(2, "expense", 40)),
    )
    view = build_view(state)
    assert view.empty_state is None
    income, expense = view.transactions
    assert (income.amount, income.color) == ("+$250", INCOME_COLOR)
    assert (expense.amount, expense.color) == ("-$40", EXPENSE_COLOR)


def test_rows_keep_backend_order():
    state = DashboardState(
        loading=False,
        recent_transactions=(_txn(3, "income", 1), _txn(1, "income", 1), _txn(2, "income", 1)),
    )
    assert [r.key for r in build_view(state).transactions] == [3, 1, 2]


def test_quick_actions_do_not_depend_on_fetch_outcome():
    empty = build_view(DashboardState(loading=False))
    full = build_view(DashboardState(loading=False, summary=SUMMARY, recent_transactions=(_txn(1, "income", 5),)))
    assert empty.quick_actions == full.quick_actions == QUICK_ACTIONS
    assert [a.title for a in QUICK_ACTIONS] == [
        "Add Transaction", "View Assets", "Track Investments", "Manage Documents",
    ]


def test_scenario_consulting_row():
    state = DashboardState(
        loading=False, summary=SUMMARY,
        recent_transactions=(_txn(1, "income", 250, "Consulting"),),
    )
    view = build_view(state)
    values = _values(view)
    assert values["Total Income"] == "$1,000"
    assert values["Profit/Loss"] == "$600"
    (row,) = view.transactions
    assert row.description == "Consulting"
    assert row.subtitle == "Services • Mar 01, 2024"
    assert row.amount == "+$250"
    assert row.color == "green"


def test_greeting_falls_back_to_user():
    assert build_view(DashboardState(loading=False)).greeting == "Welcome back, User"
    assert build_view(DashboardState(loading=False), user_name="Ada").greeting == "Welcome back, Ada"


def test_currency_symbol_is_configurable():
    view = build_view(DashboardState(loading=False, summary=SUMMARY), currency="€")
    assert _values(view)["Total Income"] == "€1,000"


def test_same_state_builds_same_view():
    state = DashboardState(loading=False, summary=SUMMARY, recent_transactions=(_txn(1, "expense", 9),))
    assert build_view(state) == build_view(state)


def test_chart_frame():
    assert chart_frame(None).empty
    series = ChartSeries(days=2, points=[
        ChartPoint(date=date(2024, 3, 1), income=10, expenses=0),
        ChartPoint(date=date(2024, 3, 2), income=0, expenses=5),
    ])
    frame = chart_frame(series)
    assert list(frame.columns) == ["date", "income", "expenses"]
    assert frame["expenses"].tolist() == [0, 5]


def test_huge_summary_value_renders():
    summary = SUMMARY.model_copy(update={"total_income": 1e30})
    view = build_view(DashboardState(loading=False, summary=summary))
    assert _values(view)["Total Income"] == "$1,000,000,000,000,000,000,000,000,000,000"
