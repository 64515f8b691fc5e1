"""FastAPI application factory / entrypoint.

This service exposes a single read endpoint over the `users` table:
- `GET /users/{user_id}`

Operational notes:
- CORS is open to any origin.
- The connection pool is built at startup from `common.settings` (fail fast on
  missing credentials) and disposed on shutdown. Tests inject their own engine
  through `create_app(engine=...)`.
- The HTTP port is fixed at 3000.
"""

from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
import uvicorn

from common.db import build_engine
from common.logging import configure_logging
from common.settings import get_settings

from .db import bind_engine
from .routes import router

logger = logging.getLogger(__name__)

PORT = 3000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the engine for the lifetime of the app.

    Builds the engine from settings unless one was injected, and disposes the
    pool on shutdown either way.
    """
    if getattr(app.state, "engine", None) is None:
        bind_engine(app, build_engine(get_settings()))
    logger.info("Connection pool ready")
    try:
        yield
    finally:
        app.state.engine.dispose()
        logger.info("Connection pool disposed")


def create_app(engine: Engine | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        engine: Optional pre-built engine. When omitted, one is created from the
            environment at startup.

    Returns:
        FastAPI: The configured application.
    """
    app = FastAPI(title="Users API", version="0.1.0", lifespan=lifespan)

    # Any origin, no credentials.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if engine is not None:
        bind_engine(app, engine)

    app.include_router(router)
    return app


def run() -> None:
    """Serve the API on the fixed port."""
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    logger.info("Server running on port %d", PORT)
    uvicorn.run(create_app(), host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
