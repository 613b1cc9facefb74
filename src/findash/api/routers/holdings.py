"""Assets and investments routers."""
from fastapi import APIRouter, Depends
from findash.api.deps import get_uow
from findash.api.schemas.holdings import (
    AssetCreate, AssetRead, InvestmentCreate, InvestmentRead,
)
from findash.infra.db.uow import UnitOfWork
from findash.services.holdings_service import HoldingsService

router = APIRouter(prefix="/api", tags=["holdings"])


@router.get("/assets", response_model=list[AssetRead])
def list_assets(uow: UnitOfWork = Depends(get_uow)) -> list[AssetRead]:
    return HoldingsService(uow).list_assets()


@router.post("/assets", response_model=AssetRead, status_code=201)
def create_asset(payload: AssetCreate, uow: UnitOfWork = Depends(get_uow)) -> AssetRead:
    return HoldingsService(uow).create_asset(payload)


@router.get("/investments", response_model=list[InvestmentRead])
def list_investments(uow: UnitOfWork = Depends(get_uow)) -> list[InvestmentRead]:
    return HoldingsService(uow).list_investments()


@router.post("/investments", response_model=InvestmentRead, status_code=201)
def create_investment(
    payload: InvestmentCreate, uow: UnitOfWork = Depends(get_uow),
) -> InvestmentRead:
    return HoldingsService(uow).create_investment(payload)
