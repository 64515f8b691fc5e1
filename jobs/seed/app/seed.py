"""Seed job for the `users` table.

Ensures the table exists, then inserts one fixed demonstration row.

Notes:
- `CREATE TABLE IF NOT EXISTS` never alters an existing table, so schema
  changes are not applied by re-running the job.
- The insert is unconditional: every run appends another copy of the
  demonstration row under a new id.
- The DDL and the insert run in separate transactions, so a failed insert
  still leaves the table in place.
"""

import logging

from sqlalchemy.engine import Engine

from common.db import build_engine, query
from common.settings import get_settings

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id SERIAL PRIMARY KEY,
    first_name VARCHAR(50) NOT NULL,
    last_name VARCHAR(50) NOT NULL,
    address_street VARCHAR(100),
    address_city VARCHAR(50),
    address_state VARCHAR(50),
    address_zip VARCHAR(20),
    phone_number TEXT[]
)
"""

INSERT_USER_SQL = """
INSERT INTO users
  (first_name, last_name, address_street, address_city, address_state, address_zip, phone_number)
VALUES
  (:first_name, :last_name, :address_street, :address_city, :address_state, :address_zip, :phone_number)
RETURNING *
"""

SEED_USER = {
    "first_name": "John",
    "last_name": "Doe",
    "address_street": "21 2nd Street",
    "address_city": "New York",
    "address_state": "NY",
    "address_zip": "10021",
    "phone_number": ["212 555-1234", "646 555-4567"],
}


def run(engine: Engine | None = None) -> dict | None:
    """Create the table if needed and insert the demonstration row.

    The engine is disposed before returning, whether or not the job succeeded.

    Args:
        engine: Optional pre-built engine; built from settings when omitted.

    Returns:
        dict | None: The inserted row, or None if the job failed
        (the error is logged).
    """
    if engine is None:
        engine = build_engine(get_settings())

    try:
        query(engine, CREATE_TABLE_SQL)
        logger.info('Table "users" is ready')

        rows = query(engine, INSERT_USER_SQL, SEED_USER)
        seeded = dict(rows[0])
        logger.info("Data seeded successfully: %s", seeded)
        return seeded
    except Exception:
        logger.exception("Error initializing database")
        return None
    finally:
        engine.dispose()
