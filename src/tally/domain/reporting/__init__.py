"""Reporting domain: date ranges, buckets and per-period aggregation."""

from tally.domain.reporting.exceptions import (
    InvalidDateRangeError,
    InvalidPeriodLabelError,
    PeriodStepError,
    ReportDataError,
)
from tally.domain.reporting.value_objects import (
    AccountSet,
    DateRange,
    Granularity,
    Period,
    ReportType,
)

__all__ = [
    "AccountSet",
    "DateRange",
    "Granularity",
    "InvalidDateRangeError",
    "InvalidPeriodLabelError",
    "Period",
    "PeriodStepError",
    "ReportDataError",
    "ReportType",
]
