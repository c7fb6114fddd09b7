"""Resolve per-bucket amounts from raw per-period figures.

The query layer hands out figures keyed by month ("2024-03") or, for some
sources, by year ("2024"). Monthly buckets look their label up directly;
yearly buckets roll up every label that starts with the year.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Mapping

from tally.domain.reporting.exceptions import InvalidPeriodLabelError
from tally.domain.reporting.value_objects import Granularity, Period
from tally.domain.shared.decimal_math import (
    ZERO,
    AmountLike,
    add,
    negate_expense,
    to_decimal,
)

_LABEL_PATTERN = re.compile(r"[0-9]{4}(-(0[1-9]|1[0-2]))?")

PeriodAmounts = dict[str, Decimal]


def normalize_period_amounts(raw: Mapping[str, AmountLike]) -> PeriodAmounts:
    """Validate labels and parse amounts of a raw per-period mapping.

    Raises
    ------
    InvalidPeriodLabelError
        If a key is not a 'YYYY-MM' or 'YYYY' string.
    InvalidAmountError
        If a value is not a well-formed decimal.
    """
    amounts: PeriodAmounts = {}
    for label, amount in raw.items():
        if not isinstance(label, str) or not _LABEL_PATTERN.fullmatch(label):
            raise InvalidPeriodLabelError(label)
        amounts[label] = to_decimal(amount)
    return amounts


def amount_for_month(amounts: PeriodAmounts, label: str) -> Decimal:
    return amounts.get(label, ZERO)


def amount_for_year(amounts: PeriodAmounts, year: int) -> Decimal:
    prefix = f"{year:04d}"
    total = ZERO
    for label, amount in amounts.items():
        if label[:4] == prefix:
            total = add(total, amount)
    return total


def amount_for_period(amounts: PeriodAmounts, period: Period) -> Decimal:
    if period.granularity is Granularity.MONTH:
        return amount_for_month(amounts, period.label)
    if period.granularity is Granularity.YEAR:
        return amount_for_year(amounts, period.year)
    msg = f"No per-period figures exist for {period.granularity.value} buckets"
    raise ValueError(msg)


def income_for(earned: PeriodAmounts, period: Period) -> Decimal:
    return amount_for_period(earned, period)


def expense_for(spent: PeriodAmounts, period: Period) -> Decimal:
    """Spending in ``period``, always reported as zero or less."""
    return negate_expense(amount_for_period(spent, period))
