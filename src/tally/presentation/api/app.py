"""FastAPI application factory for the report chart API.

Routes::

    GET /api/v1/charts/report/net-worth
    GET /api/v1/charts/report/in-out
    GET /api/v1/charts/report/in-out-summarized
    GET /health
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tally.presentation.api.dependencies import create_tables, get_engine
from tally.presentation.api.exception_handlers import setup_exception_handlers
from tally.presentation.api.routers import charts_router
from tally_config.logging_config import configure_logging
from tally_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"
CHARTS_PREFIX = "/charts/report"

OPENAPI_TAGS = [
    {
        "name": "Report charts",
        "description": (
            "Chart.js data for the report pages: weekly net worth, income vs. "
            "expenses per month (per year beyond twelve months) and their sum "
            "and average. `start` is inclusive, `end` exclusive. Amounts are "
            "decimal strings rounded to cents; expenses are negative."
        ),
    },
    {"name": "Health", "description": "Liveness check."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    logger.info("Tally API %s starting", API_VERSION)
    try:
        await create_tables()
    except OSError as e:
        logger.critical("Database unreachable: %s", e)
        raise SystemExit(1) from None

    yield

    await get_engine().dispose()
    logger.info("Tally API stopped, database pool closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter(prefix=API_V1_PREFIX)
    v1_router.include_router(
        charts_router,
        prefix=CHARTS_PREFIX,
        tags=["Report charts"],
    )
    return v1_router


def create_app(
    settings: Settings | None = None,
    *,
    init_database: bool = True,
) -> FastAPI:
    """Build the API.

    Parameters
    ----------
    settings
        Settings to build the app from; defaults to ``get_settings()``.
    init_database
        Run the lifespan hook that creates missing tables. Tests that
        override the database dependencies turn this off.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, sys.stdout)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan if init_database else None,
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)
    app.include_router(create_v1_router())

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app
