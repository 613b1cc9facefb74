"""Transactions use-case service. Owns ORM→DTO mapping; routers never see ORM objects."""
from __future__ import annotations
from findash.domain.exceptions import ConflictError, NotFoundError
from findash.infra.db.uow import UnitOfWork
from findash.infra.db.repositories.category_repository import CategoryRepository
from findash.infra.db.repositories.transaction_repository import TransactionRepository
from findash.models.finance import Transaction, TransactionType
from findash.api.schemas.transactions import (
    CategoryCreate, CategoryRead, CategoryRef, RecentTransaction, TransactionCreate,
)


def _to_recent(txn: Transaction) -> RecentTransaction:
    return RecentTransaction(
        id=txn.id,
        type=txn.type.value,
        amount=float(txn.amount),
        description=txn.description,
        date=txn.date,
        category=CategoryRef(name=txn.category.name if txn.category else ""),
    )


class TransactionsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_recent(self, limit: int) -> list[RecentTransaction]:
        repo = TransactionRepository(self._uow.session)
        return [_to_recent(t) for t in repo.list_recent(limit)]

    def create_transaction(self, payload: TransactionCreate) -> RecentTransaction:
        category = CategoryRepository(self._uow.session).get_by_id(payload.category_id)
        if category is None:
            raise NotFoundError(f"Category {payload.category_id} not found")

        txn = TransactionRepository(self._uow.session).create(
            type_=TransactionType(payload.type.value),
            amount=payload.amount,
            description=payload.description,
            date=payload.date,
            category_id=category.id,
        )
        self._uow.commit()
        return _to_recent(txn)

    # --- Categories ---

    def list_categories(self) -> list[CategoryRead]:
        repo = CategoryRepository(self._uow.session)
        return [CategoryRead.model_validate(c) for c in repo.list_all()]

    def create_category(self, payload: CategoryCreate) -> CategoryRead:
        repo = CategoryRepository(self._uow.session)
        if repo.get_by_name(payload.name) is not None:
            raise ConflictError(f"Category '{payload.name}' already exists")
        category = repo.create(payload.name)
        self._uow.commit()
        return CategoryRead.model_validate(category)
