"""SQLAlchemy factory for report ports."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tally.application.ports.reporting import CacheStorePort
from tally.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyBalanceAdapter,
    SqlAlchemyReportQueryAdapter,
)

logger = logging.getLogger(__name__)


class SQLAlchemyReportFactory:
    """SQLAlchemy implementation of the ReportPortFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        cache_store: CacheStorePort,
    ):
        self._session = session
        self._cache_store = cache_store

        # Cached instances (created on demand)
        self._balance_adapter: SqlAlchemyBalanceAdapter | None = None
        self._report_query_adapter: SqlAlchemyReportQueryAdapter | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def balance_port(self) -> SqlAlchemyBalanceAdapter:
        if self._balance_adapter is None:
            self._balance_adapter = SqlAlchemyBalanceAdapter(self._session)
        return self._balance_adapter

    def report_query_port(self) -> SqlAlchemyReportQueryAdapter:
        if self._report_query_adapter is None:
            self._report_query_adapter = SqlAlchemyReportQueryAdapter(self._session)
        return self._report_query_adapter

    def cache_store(self) -> CacheStorePort:
        return self._cache_store
