"""Assets and investments use-case service."""
from __future__ import annotations
from findash.infra.db.uow import UnitOfWork
from findash.infra.db.repositories.holdings_repository import HoldingsRepository
from findash.api.schemas.holdings import (
    AssetCreate, AssetRead, InvestmentCreate, InvestmentRead,
)


class HoldingsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_assets(self) -> list[AssetRead]:
        repo = HoldingsRepository(self._uow.session)
        return [
            AssetRead(id=a.id, name=a.name, value=float(a.value))
            for a in repo.list_assets()
        ]

    def create_asset(self, payload: AssetCreate) -> AssetRead:
        asset = HoldingsRepository(self._uow.session).create_asset(payload.name, payload.value)
        self._uow.commit()
        return AssetRead(id=asset.id, name=asset.name, value=float(asset.value))

    def list_investments(self) -> list[InvestmentRead]:
        repo = HoldingsRepository(self._uow.session)
        return [
            InvestmentRead(
                id=i.id, name=i.name,
                amount_invested=float(i.amount_invested),
                current_value=float(i.current_value),
            )
            for i in repo.list_investments()
        ]

    def create_investment(self, payload: InvestmentCreate) -> InvestmentRead:
        investment = HoldingsRepository(self._uow.session).create_investment(
            payload.name, payload.amount_invested, payload.current_value,
        )
        self._uow.commit()
        return InvestmentRead(
            id=investment.id, name=investment.name,
            amount_invested=float(investment.amount_invested),
            current_value=float(investment.current_value),
        )
