"""Shared test fixtures.

  use_test_engine: redirects the UoW + infra layer to a temp-file SQLite DB.
  client: FastAPI TestClient wired to the test engine.
"""
import pytest
from sqlmodel import SQLModel, create_engine


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch every engine reference to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_findash.db"
    test_engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False},
    )

    import findash.models  # noqa: F401  register all ORM mappers
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("findash.db.engine", test_engine)
    monkeypatch.setattr("findash.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("findash.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from findash.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_category(client):
    def _make(name: str = "Services") -> int:
        resp = client.post("/api/categories", json={"name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]
    return _make


@pytest.fixture
def make_transaction(client, make_category):
    def _make(
        type_: str = "income",
        amount: float = 100,
        description: str = "Consulting",
        date: str = "2024-03-01T00:00:00",
        category_id: int | None = None,
    ) -> dict:
        if category_id is None:
            existing = client.get("/api/categories").json()
            category_id = existing[0]["id"] if existing else make_category()
        resp = client.post("/api/transactions", json={
            "type": type_, "amount": amount, "description": description,
            "date": date, "category_id": category_id,
        })
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
