"""Database session helpers for the API service.

The engine (and its connection pool) is created once per process by the app
lifespan in `main.py` and stored on `app.state`. This module provides the
FastAPI dependency (`get_db`) that route handlers use to obtain a session bound
to that engine.

Design goals:
- the pool is an explicit resource owned by the app, not a module global
- short-lived, request-scoped DB sessions
- sessions always closed so connections go back to the pool
"""

from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def bind_engine(app, engine: Engine) -> None:
    """Attach `engine` and a session factory for it to `app.state`."""
    app.state.engine = engine
    app.state.session_factory = sessionmaker(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a request-scoped SQLAlchemy session.

    Route handlers declare `db: Session = Depends(get_db)` to receive a session
    bound to the engine attached to the running app.

    Yields:
        sqlalchemy.orm.Session: An open session for the duration of the request.

    Notes:
        The session is read-only in practice (the service exposes no writes), so
        there is no commit here. It is always closed in `finally`, which returns
        its connection to the pool.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
