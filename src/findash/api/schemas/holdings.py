"""Asset and investment DTOs."""
from __future__ import annotations
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator


class _NamedCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v


class AssetCreate(_NamedCreate):
    value: Decimal = Field(ge=0, max_digits=14, decimal_places=2)


class AssetRead(BaseModel):
    id: int
    name: str
    value: float


class InvestmentCreate(_NamedCreate):
    amount_invested: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    current_value: Decimal = Field(ge=0, max_digits=14, decimal_places=2)


class InvestmentRead(BaseModel):
    id: int
    name: str
    amount_invested: float
    current_value: float
