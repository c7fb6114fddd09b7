"""Report chart queries."""

from tally.application.queries.reporting.net_worth_query import NetWorthQuery
from tally.application.queries.reporting.year_in_out_query import YearInOutQuery
from tally.application.queries.reporting.year_in_out_summarized_query import (
    YearInOutSummarizedQuery,
)

__all__ = [
    "NetWorthQuery",
    "YearInOutQuery",
    "YearInOutSummarizedQuery",
]
