"""Transaction and category DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class TransactionTypeDTO(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class CategoryRef(BaseModel):
    name: str


class CategoryCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v.strip()


class CategoryRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str


class RecentTransaction(BaseModel):
    """One row of the recent-transactions list. ``amount`` is unsigned."""

    id: int
    type: TransactionTypeDTO
    amount: float
    description: str
    date: datetime
    category: CategoryRef


class TransactionCreate(BaseModel):
    type: TransactionTypeDTO
    amount: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    description: str
    date: datetime
    category_id: int

    @field_validator("description")
    @classmethod
    def description_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be empty")
        return v
