"""Fixtures for the API service tests.

The app is built with an injected engine pointing at a file-backed SQLite
database, so the routes, session dependency and connection pool run for real
without a Postgres server.
"""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
import pytest

from services.api.app.main import create_app

USERS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "address_street": "21 2nd Street",
        "address_city": "New York",
        "address_state": "NY",
        "address_zip": "10021",
        "phone_number": "{212 555-1234,646 555-4567}",
    },
    {
        "first_name": "Jane",
        "last_name": "Roe",
        "address_street": None,
        "address_city": None,
        "address_state": None,
        "address_zip": None,
        "phone_number": None,
    },
]


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'users.db'}",
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(text("""
            CREATE TABLE users (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              first_name VARCHAR(50) NOT NULL,
              last_name VARCHAR(50) NOT NULL,
              address_street VARCHAR(100),
              address_city VARCHAR(50),
              address_state VARCHAR(50),
              address_zip VARCHAR(20),
              phone_number TEXT
            )
        """))
        conn.execute(
            text("""
                INSERT INTO users
                  (first_name, last_name, address_street, address_city, address_state, address_zip, phone_number)
                VALUES
                  (:first_name, :last_name, :address_street, :address_city, :address_state, :address_zip, :phone_number)
            """),
            USERS,
        )
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def users():
    return USERS
