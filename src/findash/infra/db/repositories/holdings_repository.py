"""Repository for assets and investments (balance-sheet side of the dashboard)."""
from __future__ import annotations
from decimal import Decimal
from sqlalchemy import func
from sqlmodel import Session, select
from findash.models.finance import Asset, Investment


def _as_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


class HoldingsRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    # --- Asset ---

    def list_assets(self) -> list[Asset]:
        return list(self._s.exec(select(Asset).order_by(Asset.id)).all())

    def total_assets(self) -> Decimal:
        return _as_decimal(self._s.exec(select(func.sum(Asset.value))).one())

    def create_asset(self, name: str, value: Decimal) -> Asset:
        asset = Asset(name=name, value=value)
        self._s.add(asset)
        self._s.flush()
        return asset

    # --- Investment ---

    def list_investments(self) -> list[Investment]:
        return list(self._s.exec(select(Investment).order_by(Investment.id)).all())

    def total_investments(self) -> Decimal:
        return _as_decimal(self._s.exec(select(func.sum(Investment.current_value))).one())

    def create_investment(
        self, name: str, amount_invested: Decimal, current_value: Decimal,
    ) -> Investment:
        investment = Investment(
            name=name, amount_invested=amount_invested, current_value=current_value,
        )
        self._s.add(investment)
        self._s.flush()
        return investment
