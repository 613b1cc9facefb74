"""Dashboard use-case service: the six headline metrics and the chart series."""
from __future__ import annotations
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from findash.infra.db.uow import UnitOfWork
from findash.infra.db.repositories.transaction_repository import TransactionRepository
from findash.infra.db.repositories.holdings_repository import HoldingsRepository
from findash.models.finance import TransactionType
from findash.api.schemas.dashboard import ChartPoint, ChartSeries, DashboardSummary


class DashboardService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_summary(self) -> DashboardSummary:
        txn_repo = TransactionRepository(self._uow.session)
        holdings_repo = HoldingsRepository(self._uow.session)

        income = txn_repo.total_by_type(TransactionType.INCOME)
        expenses = txn_repo.total_by_type(TransactionType.EXPENSE)
        assets = holdings_repo.total_assets()
        investments = holdings_repo.total_investments()

        return DashboardSummary(
            total_income=float(income),
            total_expenses=float(expenses),
            net_worth=float(assets + investments),
            profit_loss=float(income - expenses),
            total_assets=float(assets),
            total_investments=float(investments),
        )

    def get_chart(self, days: int, today: date | None = None) -> ChartSeries:
        """Daily income/expense totals for the trailing *days* ending *today*.

        Every day in the window gets a point, zero-filled when nothing was booked.
        """
        end = today or date.today()
        start = end - timedelta(days=days - 1)

        income: dict[date, Decimal] = defaultdict(Decimal)
        expenses: dict[date, Decimal] = defaultdict(Decimal)
        repo = TransactionRepository(self._uow.session)
        for txn in repo.list_since(datetime.combine(start, time.min)):
            day = txn.date.date()
            if day > end:
                continue
            bucket = income if txn.type == TransactionType.INCOME else expenses
            bucket[day] += Decimal(str(txn.amount))

        points = [
            ChartPoint(
                date=start + timedelta(days=offset),
                income=float(income[start + timedelta(days=offset)]),
                expenses=float(expenses[start + timedelta(days=offset)]),
            )
            for offset in range(days)
        ]
        return ChartSeries(days=days, points=points)
