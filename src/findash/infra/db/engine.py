"""Re-export the singleton engine from findash.db and register SQLite pragmas."""
from sqlalchemy import event
from findash.db import engine          # singleton; created once at findash.db import
import findash.models  # noqa: F401   # registers all ORM table mappers


def _set_wal_mode(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA journal_mode=WAL")
    cur.execute("PRAGMA synchronous=NORMAL")
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


if engine.dialect.name == "sqlite":
    event.listen(engine, "connect", _set_wal_mode)

__all__ = ["engine"]
