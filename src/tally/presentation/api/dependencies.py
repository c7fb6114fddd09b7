"""FastAPI dependencies: database engine and sessions, report cache, ports.

The engine, session maker and cache store are process singletons. Each
request gets its own session and a ``SQLAlchemyReportFactory`` bound to it.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tally.application.factories import ReportPortFactory
from tally.application.ports.reporting import CacheStorePort
from tally.infrastructure.cache import InMemoryCacheStore, NullCacheStore
from tally.infrastructure.persistence.sqlalchemy import SQLAlchemyReportFactory
from tally.infrastructure.persistence.sqlalchemy.models import Base
from tally.presentation.api.chart_generator import ReportChartGenerator
from tally_config.settings import get_settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """Configured database URL; creates the parent folder of a SQLite file."""
    url = get_settings().database_url
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (
        None,
        "",
        ":memory:",
    ):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return url


# --- Database ---------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return create_async_engine(get_database_url(), echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; reports only read, so nothing is committed."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """Create the ledger tables that do not exist yet."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Ledger tables are in place")


# --- Reports ----------------------------------------------------------------


@lru_cache(maxsize=1)
def get_cache_store() -> CacheStorePort:
    """Shared report cache, or a no-op store when REPORT_CACHE_ENABLED=false."""
    settings = get_settings()
    if not settings.report_cache_enabled:
        logger.info("Report cache disabled")
        return NullCacheStore()
    logger.info(
        "Report cache enabled (ttl=%ss)",
        settings.report_cache_ttl_seconds or "none",
    )
    return InMemoryCacheStore(ttl_seconds=settings.report_cache_ttl_seconds)


def get_report_factory(
    session: DBSession,
    cache_store: Annotated[CacheStorePort, Depends(get_cache_store)],
) -> ReportPortFactory:
    return SQLAlchemyReportFactory(session=session, cache_store=cache_store)


# Routers hand this to ``<Query>.from_factory``
ReportFactory = Annotated[ReportPortFactory, Depends(get_report_factory)]


def get_chart_generator() -> ReportChartGenerator:
    return ReportChartGenerator(currency=get_settings().report_currency)
