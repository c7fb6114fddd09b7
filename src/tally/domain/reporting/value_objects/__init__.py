"""Reporting value objects."""

from tally.domain.reporting.value_objects.account_set import AccountSet
from tally.domain.reporting.value_objects.date_range import DateRange
from tally.domain.reporting.value_objects.period import Granularity, Period
from tally.domain.reporting.value_objects.report_type import ReportType

__all__ = [
    "AccountSet",
    "DateRange",
    "Granularity",
    "Period",
    "ReportType",
]
