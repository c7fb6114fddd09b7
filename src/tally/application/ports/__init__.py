"""Application ports (interfaces implemented by infrastructure)."""

from tally.application.ports.reporting import (
    BalancePort,
    CacheStorePort,
    RawAmount,
    ReportQueryPort,
)

__all__ = [
    "BalancePort",
    "CacheStorePort",
    "RawAmount",
    "ReportQueryPort",
]
