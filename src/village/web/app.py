"""FastAPI application for village administration records.

Exposes CRUD endpoints for residents, finance transactions, budgets,
events, assets and public services, plus the finance and asset summaries.

Run with::

    uvicorn village.web.app:create_app --factory --port 2022
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from village import __version__
from village.core.config import Settings
from village.core.logging_config import setup_logging
from village.db.engine import DatabaseManager
from village.repositories.postgres import (
    PostgresAssetRepository,
    PostgresBudgetRepository,
    PostgresEventRepository,
    PostgresFinanceRepository,
    PostgresPublicServiceRepository,
    PostgresResidentRepository,
)
from village.web.records_router import RECORD_ROUTERS
from village.web.records_router import router as records_router

logger = logging.getLogger(__name__)


def build_repositories(db: DatabaseManager) -> dict[str, Any]:
    """Create one repository per entity, keyed the way the routers look them up."""
    return {
        "residents": PostgresResidentRepository(db),
        "finance": PostgresFinanceRepository(db),
        "budgets": PostgresBudgetRepository(db),
        "events": PostgresEventRepository(db),
        "assets": PostgresAssetRepository(db),
        "services": PostgresPublicServiceRepository(db),
    }


# --- Application factory ---


def create_app(
    settings: Settings | None = None,
    db: DatabaseManager | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with their own database.

    Args:
        settings: Application settings. Defaults to Settings().
        db: Optional pre-built DatabaseManager. Defaults to one built
            from ``settings.db``.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    setup_logging(settings.log_level)

    if db is None:
        db = DatabaseManager.from_config(settings.db)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.db.create_schema:
            await db.create_all()
        yield
        await db.close()

    app = FastAPI(
        title="Village Administration",
        description="Record keeping for village residents, finance, budgets, events, assets and services",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.db_manager = db
    app.state.repositories = build_repositories(db)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(
            "Storage failure on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"detail": "Storage error"})

    app.include_router(records_router)
    for router in RECORD_ROUTERS:
        app.include_router(router)

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


def main() -> None:
    """Run the API with uvicorn using settings from the environment."""
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.api.host, port=settings.api.port)


if __name__ == "__main__":
    main()
