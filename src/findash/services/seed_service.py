"""Demo data for a fresh database: categories, a few months of transactions, holdings.

Deterministic for a given ``seed`` so screenshots and tests are reproducible.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from findash.domain.exceptions import ConflictError
from findash.infra.db.uow import UnitOfWork
from findash.infra.db.repositories.category_repository import CategoryRepository
from findash.infra.db.repositories.holdings_repository import HoldingsRepository
from findash.infra.db.repositories.transaction_repository import TransactionRepository
from findash.models.finance import TransactionType


@dataclass(frozen=True)
class _Template:
    category: str
    type: TransactionType
    description: str
    amount_min: int
    amount_max: int
    per_month: int


_TEMPLATES = (
    _Template("Services", TransactionType.INCOME, "Consulting", 800, 2500, 3),
    _Template("Sales", TransactionType.INCOME, "Product sale", 50, 400, 6),
    _Template("Rent", TransactionType.EXPENSE, "Office rent", 1200, 1200, 1),
    _Template("Software", TransactionType.EXPENSE, "SaaS subscription", 20, 120, 3),
    _Template("Travel", TransactionType.EXPENSE, "Client visit", 80, 600, 1),
    _Template("Supplies", TransactionType.EXPENSE, "Office supplies", 15, 90, 2),
)

_ASSETS = (("Company car", Decimal("18500.00")), ("Office equipment", Decimal("6200.00")))
_INVESTMENTS = (
    ("Index fund", Decimal("10000.00"), Decimal("11840.50")),
    ("Bond ladder", Decimal("5000.00"), Decimal("5125.00")),
)


@dataclass(frozen=True)
class SeedReport:
    categories: int
    transactions: int
    assets: int
    investments: int


class SeedService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def seed_demo(self, days: int = 90, seed: int = 42, today: date | None = None) -> SeedReport:
        txn_repo = TransactionRepository(self._uow.session)
        if txn_repo.count() > 0:
            raise ConflictError("Database already contains transactions; refusing to seed.")

        rng = random.Random(seed)
        end = today or date.today()
        cat_repo = CategoryRepository(self._uow.session)
        categories = {}
        for name in sorted({t.category for t in _TEMPLATES}):
            categories[name] = cat_repo.get_by_name(name) or cat_repo.create(name)

        created = 0
        months = max(1, round(days / 30))
        for template in _TEMPLATES:
            for _ in range(template.per_month * months):
                day = end - timedelta(days=rng.randrange(days))
                txn_repo.create(
                    type_=template.type,
                    amount=Decimal(rng.randint(template.amount_min, template.amount_max)),
                    description=template.description,
                    date=datetime.combine(day, time(hour=rng.randrange(8, 18))),
                    category_id=categories[template.category].id,
                )
                created += 1

        holdings = HoldingsRepository(self._uow.session)
        for name, value in _ASSETS:
            holdings.create_asset(name, value)
        for name, invested, current in _INVESTMENTS:
            holdings.create_investment(name, invested, current)

        self._uow.commit()
        return SeedReport(
            categories=len(categories),
            transactions=created,
            assets=len(_ASSETS),
            investments=len(_INVESTMENTS),
        )
