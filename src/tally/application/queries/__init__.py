"""Application queries (read side)."""

from tally.application.queries.reporting import (
    NetWorthQuery,
    YearInOutQuery,
    YearInOutSummarizedQuery,
)

__all__ = [
    "NetWorthQuery",
    "YearInOutQuery",
    "YearInOutSummarizedQuery",
]
