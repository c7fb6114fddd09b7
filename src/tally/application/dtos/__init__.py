"""Application DTOs."""

from tally.application.dtos.reporting import (
    InOutResult,
    NetWorthResult,
    NetWorthSnapshot,
    ReportEntry,
    SummarizedReport,
)

__all__ = [
    "InOutResult",
    "NetWorthResult",
    "NetWorthSnapshot",
    "ReportEntry",
    "SummarizedReport",
]
