"""Reporting DTOs - data transfer objects for report charts."""

from tally.application.dtos.reporting.report_dto import (
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
