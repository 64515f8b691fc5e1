"""User lookup routes.

Responsibilities:
- `GET /users/{user_id}`: return one row of the `users` table plus the
  identifier of the host that served it.

The path value is bound into the query as-is. Postgres performs the integer
coercion, so a non-numeric id fails in the database and is reported as a 500
like any other backend failure.
"""

import logging
import socket

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from ..db import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}")
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Fetch a single user record.

    Args:
        user_id: Raw path segment, expected to be a numeric `users.id`.
        db: SQLAlchemy session (injected).

    Returns:
        dict: All columns of the matching row plus `server_id` (this host's name).
        A 404 `{"error": "User not found"}` when no row matches, or a 500
        `{"error": "Internal Server Error"}` on any failure while querying.
    """
    try:
        row = db.execute(
            text("SELECT * FROM users WHERE id = :user_id"),
            {"user_id": user_id},
        ).mappings().first()
    except Exception:
        logger.exception("User lookup failed for id=%r", user_id)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    if not row:
        return JSONResponse(status_code=404, content={"error": "User not found"})

    return {**row, "server_id": socket.gethostname()}
