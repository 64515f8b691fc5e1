"""Shared database configuration.

Every component (API service, seed job) reads its database connection settings
through `DatabaseSettings`, a Pydantic Settings model populated once from the
environment and an optional `.env` file.

Environment variables:
- `POSTGRES_USER`, `POSTGRES_PASSWORD`, `POSTGRES_DB`
- `DB_HOST` (default `localhost`), `DB_PORT` (default `5432`)
- `DATABASE_URL` (optional; a full SQLAlchemy URL that takes precedence over
  the individual pieces)
- `DB_CONNECT_TIMEOUT` / `DB_STATEMENT_TIMEOUT_MS` (bounds on every round trip)

Required values are validated when the settings object is built, so a missing
credential stops the process at startup instead of surfacing on the first query.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DatabaseSettings(BaseSettings):
    """Connection settings for the `users` database."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    postgres_user: str | None = None
    postgres_password: str | None = None
    postgres_db: str | None = None
    db_host: str = "localhost"
    db_port: int = 5432
    database_url: str | None = None

    db_connect_timeout: int = 10
    db_statement_timeout_ms: int = 30000

    @model_validator(mode="after")
    def _require_credentials(self):
        if self.database_url:
            return self
        missing = [
            name.upper()
            for name in ("postgres_user", "postgres_password", "postgres_db")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"missing database settings: {', '.join(missing)}")
        return self

    @property
    def url(self) -> str:
        """Return the SQLAlchemy connection URL.

        `DATABASE_URL` wins when set. Otherwise the URL is assembled from the
        individual pieces with `URL.create`, which escapes the password.
        """
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.db_host,
            port=self.db_port,
            database=self.postgres_db,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> DatabaseSettings:
    """Return the process-wide settings, loading them on first use."""
    return DatabaseSettings()
