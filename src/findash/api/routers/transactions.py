"""Transactions and categories routers."""
from fastapi import APIRouter, Depends, Query
from findash.api.deps import get_uow
from findash.api.schemas.transactions import (
    CategoryCreate, CategoryRead, RecentTransaction, TransactionCreate,
)
from findash.infra.db.uow import UnitOfWork
from findash.services.transactions_service import TransactionsService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])
categories_router = APIRouter(prefix="/api/categories", tags=["transactions"])


@router.get("", response_model=list[RecentTransaction])
def list_transactions(
    limit: int = Query(50, ge=1, le=100),
    uow: UnitOfWork = Depends(get_uow),
) -> list[RecentTransaction]:
    return TransactionsService(uow).list_recent(limit)


@router.post("", response_model=RecentTransaction, status_code=201)
def create_transaction(
    payload: TransactionCreate, uow: UnitOfWork = Depends(get_uow),
) -> RecentTransaction:
    return TransactionsService(uow).create_transaction(payload)


@categories_router.get("", response_model=list[CategoryRead])
def list_categories(uow: UnitOfWork = Depends(get_uow)) -> list[CategoryRead]:
    return TransactionsService(uow).list_categories()


@categories_router.post("", response_model=CategoryRead, status_code=201)
def create_category(payload: CategoryCreate, uow: UnitOfWork = Depends(get_uow)) -> CategoryRead:
    return TransactionsService(uow).create_category(payload)
