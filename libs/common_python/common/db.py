"""Shared database helpers.

Both the API service and the seed job talk to Postgres through a pooled
SQLAlchemy engine built here. Connections are checked out per statement (or per
request-scoped session in the API) and returned to the pool afterwards.

- `build_engine` turns `DatabaseSettings` into an engine with bounded connect and
  statement timeouts.
- `query` runs one parameterized statement and returns its rows.

Parameters are always bound through `sqlalchemy.text` named binds, never
formatted into the SQL string.
"""

from typing import Any, Mapping

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, RowMapping

from .settings import DatabaseSettings


def _connect_args(settings: DatabaseSettings) -> dict:
    """Driver-specific connect arguments.

    Only Postgres gets the timeouts; other dialects (SQLite in tests) are
    passed through untouched.
    """
    if not settings.url.startswith("postgresql"):
        return {}
    return {
        "connect_timeout": settings.db_connect_timeout,
        "options": f"-c statement_timeout={settings.db_statement_timeout_ms}",
    }


def build_engine(settings: DatabaseSettings) -> Engine:
    """Create the pooled SQLAlchemy engine.

    `pool_pre_ping=True` discards stale pooled connections before use. Pool
    sizing is left at SQLAlchemy's defaults.

    Args:
        settings: Validated database settings.

    Returns:
        sqlalchemy.engine.Engine: Engine owning the connection pool.
    """
    return create_engine(
        settings.url,
        pool_pre_ping=True,
        connect_args=_connect_args(settings),
    )


def query(engine: Engine, statement: str, params: Mapping[str, Any] | None = None) -> list[RowMapping]:
    """Execute one parameterized statement and return all rows.

    The statement runs in its own transaction, committed on success. Any
    `SQLAlchemyError` propagates to the caller; nothing is retried.

    Args:
        engine: Engine whose pool provides the connection.
        statement: SQL with `:name` bind parameters.
        params: Values for the bind parameters.

    Returns:
        list[RowMapping]: Result rows (empty for statements without results).
    """
    with engine.begin() as conn:
        result = conn.execute(text(statement), dict(params or {}))
        if not result.returns_rows:
            return []
        return list(result.mappings().all())
