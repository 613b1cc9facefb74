"""Dashboard DTOs: pure Pydantic, zero ORM imports.

JSON keys are camelCase; Python attributes stay snake_case.
"""
from __future__ import annotations
import datetime as dt
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardSummary(CamelModel):
    total_income: float
    total_expenses: float
    net_worth: float
    profit_loss: float
    total_assets: float
    total_investments: float


class ChartPoint(CamelModel):
    date: dt.date
    income: float
    expenses: float


class ChartSeries(CamelModel):
    days: int
    points: list[ChartPoint]
