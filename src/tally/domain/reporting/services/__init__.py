"""Reporting domain services (bucketing and per-period lookups)."""

from tally.domain.reporting.services.aggregate_lookup import (
    PeriodAmounts,
    amount_for_month,
    amount_for_period,
    amount_for_year,
    expense_for,
    income_for,
    normalize_period_amounts,
)
from tally.domain.reporting.services.period_bucketer import (
    MONTHLY_REPORT_LIMIT,
    NET_WORTH_STEP_DAYS,
    add_months,
    add_weeks,
    add_years,
    diff_in_months,
    monthly_periods,
    periods_for,
    select_granularity,
    weekly_periods,
    yearly_periods,
)

__all__ = [
    "MONTHLY_REPORT_LIMIT",
    "NET_WORTH_STEP_DAYS",
    "PeriodAmounts",
    "add_months",
    "add_weeks",
    "add_years",
    "amount_for_month",
    "amount_for_period",
    "amount_for_year",
    "diff_in_months",
    "expense_for",
    "income_for",
    "monthly_periods",
    "normalize_period_amounts",
    "periods_for",
    "select_granularity",
    "weekly_periods",
    "yearly_periods",
]
