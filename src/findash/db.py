"""Engine singleton and schema creation."""
from __future__ import annotations
from pathlib import Path
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine
from findash.config import settings
from findash.logging import logger


def _make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine(settings.database_url)


def ensure_sqlite_dir(target: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    database = target.url.database
    if target.dialect.name == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def init_db(target: Engine | None = None) -> None:
    """Create all tables on *target* (defaults to the configured engine)."""
    import findash.models  # noqa: F401  register all ORM mappers

    target = target or engine
    ensure_sqlite_dir(target)
    SQLModel.metadata.create_all(target)
    logger.info("Database schema ready at %s", target.url)
