"""Report port factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from tally.application.ports.reporting import (
    BalancePort,
    CacheStorePort,
    ReportQueryPort,
)


class ReportPortFactory(Protocol):
    """Protocol for handing report queries their collaborators."""

    def balance_port(self) -> BalancePort:
        """Get balance port."""
        ...

    def report_query_port(self) -> ReportQueryPort:
        """Get per-month earned/spent query port."""
        ...

    def cache_store(self) -> CacheStorePort:
        """Get the report cache store."""
        ...
