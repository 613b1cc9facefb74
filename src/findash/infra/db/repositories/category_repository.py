"""Repository for Category records."""
from __future__ import annotations
from sqlmodel import Session, select
from findash.models.finance import Category


class CategoryRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, category_id: int) -> Category | None:
        return self._s.get(Category, category_id)

    def get_by_name(self, name: str) -> Category | None:
        return self._s.exec(select(Category).where(Category.name == name)).first()

    def list_all(self) -> list[Category]:
        return list(self._s.exec(select(Category).order_by(Category.name)).all())

    def create(self, name: str) -> Category:
        category = Category(name=name)
        self._s.add(category)
        self._s.flush()
        return category
