"""Slice a date range into weekly, monthly or yearly buckets."""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta
from typing import Callable

from tally.domain.reporting.exceptions import PeriodStepError
from tally.domain.reporting.value_objects import DateRange, Granularity, Period

# Net worth is sampled, not accounted per period
NET_WORTH_STEP_DAYS = 7

# Ranges spanning more than this many whole months are reported per year
MONTHLY_REPORT_LIMIT = 12


def add_months(value: date, months: int) -> date:
    """Return ``value`` moved by ``months`` calendar months.

    The day is clamped to the length of the target month (Jan 31 + 1 month
    is the last day of February).
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, monthrange(year, month)[1])
    return date(year, month, day)


def add_years(value: date, years: int) -> date:
    return add_months(value, years * 12)


def add_weeks(value: date, weeks: int) -> date:
    return value + timedelta(days=NET_WORTH_STEP_DAYS * weeks)


def diff_in_months(start: date, end: date) -> int:
    """Whole calendar months between two dates, in either order."""
    if end < start:
        start, end = end, start
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def select_granularity(date_range: DateRange) -> Granularity:
    if diff_in_months(date_range.start, date_range.end) > MONTHLY_REPORT_LIMIT:
        return Granularity.YEAR
    return Granularity.MONTH


def _periods(
    date_range: DateRange,
    granularity: Granularity,
    step: Callable[[date, int], date],
) -> list[Period]:
    # Every bucket is computed from the range start, so clamped month ends
    # (Jan 31 -> Feb 29) do not drift into later buckets.
    periods: list[Period] = []
    cursor = date_range.start
    steps = 0
    while cursor < date_range.end:
        periods.append(Period(start=cursor, granularity=granularity))
        steps += 1
        try:
            next_cursor = step(date_range.start, steps)
        except (OverflowError, ValueError):
            # Stepping past date.max; no later bucket can exist
            break
        if next_cursor <= cursor:
            raise PeriodStepError(cursor, next_cursor)
        cursor = next_cursor
    return periods


def weekly_periods(date_range: DateRange) -> list[Period]:
    return _periods(date_range, Granularity.WEEK, add_weeks)


def monthly_periods(date_range: DateRange) -> list[Period]:
    return _periods(date_range, Granularity.MONTH, add_months)


def yearly_periods(date_range: DateRange) -> list[Period]:
    return _periods(date_range, Granularity.YEAR, add_years)


_BUCKETERS: dict[Granularity, Callable[[DateRange], list[Period]]] = {
    Granularity.WEEK: weekly_periods,
    Granularity.MONTH: monthly_periods,
    Granularity.YEAR: yearly_periods,
}


def periods_for(date_range: DateRange, granularity: Granularity) -> list[Period]:
    """Return the chronologically ordered buckets covering ``date_range``.

    Empty when the range starts on or after its end.
    """
    return _BUCKETERS[granularity](date_range)
