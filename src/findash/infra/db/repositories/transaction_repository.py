"""Repository for Transaction records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
from findash.models.finance import Transaction, TransactionType


class TransactionRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, transaction_id: int) -> Transaction | None:
        return self._s.get(Transaction, transaction_id)

    def list_recent(self, limit: int) -> list[Transaction]:
        """Most-recent-first by transaction date, newest insert breaking ties."""
        stmt = (
            select(Transaction)
            .options(selectinload(Transaction.category))
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(limit)
        )
        return list(self._s.exec(stmt).all())

    def list_since(self, start: datetime) -> list[Transaction]:
        stmt = select(Transaction).where(Transaction.date >= start).order_by(Transaction.date)
        return list(self._s.exec(stmt).all())

    def total_by_type(self, type_: TransactionType) -> Decimal:
        result = self._s.exec(
            select(func.sum(Transaction.amount)).where(Transaction.type == type_)
        ).one()
        return Decimal(str(result)) if result is not None else Decimal("0")

    def create(
        self,
        *,
        type_: TransactionType,
        amount: Decimal,
        description: str,
        date: datetime,
        category_id: int,
    ) -> Transaction:
        txn = Transaction(
            type=type_, amount=amount, description=description,
            date=date, category_id=category_id,
        )
        self._s.add(txn)
        self._s.flush()  # get generated PK without committing
        return txn

    def count(self) -> int:
        return self._s.exec(select(func.count()).select_from(Transaction)).one()
