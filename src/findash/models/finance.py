from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Category(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=_utcnow)

    transactions: List["Transaction"] = Relationship(back_populates="category")


class Transaction(SQLModel, table=True):
    """A single ledger line. ``amount`` is never negative; ``type`` carries the sign."""

    id: Optional[int] = Field(default=None, primary_key=True)
    type: TransactionType = Field(index=True)
    amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    description: str
    date: datetime = Field(index=True)
    category_id: int = Field(foreign_key="category.id", index=True)
    created_at: datetime = Field(default_factory=_utcnow)

    category: Optional[Category] = Relationship(back_populates="transactions")


class Asset(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    value: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    created_at: datetime = Field(default_factory=_utcnow)


class Investment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    amount_invested: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    current_value: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    created_at: datetime = Field(default_factory=_utcnow)
