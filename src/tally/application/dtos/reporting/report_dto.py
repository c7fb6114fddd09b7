"""Report DTOs - read models handed from the assembler to the chart layer.

All result types are frozen and hold tuples: a result may be stored in the
report cache and served to many callers.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from tally.domain.reporting.value_objects import Granularity


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Summed balance of the selected accounts on one sample date."""

    date: date
    net_worth: Decimal


@dataclass(frozen=True)
class NetWorthResult:
    snapshots: tuple[NetWorthSnapshot, ...] = ()


@dataclass(frozen=True)
class ReportEntry:
    """Income and expense for a single bucket (expense is zero or negative)."""

    period: date
    period_label: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class InOutResult:
    """Income vs. expense per month or per year, in chronological order."""

    granularity: Granularity
    entries: tuple[ReportEntry, ...] = ()


@dataclass(frozen=True)
class SummarizedReport:
    """Totals over all buckets of a range.

    ``period_count`` is the number of buckets summed, so callers can derive
    per-month or per-year averages.
    """

    granularity: Granularity
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    period_count: int = 0
