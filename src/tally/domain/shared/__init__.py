"""Exceptions, exact decimal helpers and clock helpers used by every layer."""

from tally.domain.shared.decimal_math import (
    add,
    multiply,
    negate_expense,
    sum_amounts,
    to_decimal,
)
from tally.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    InvalidAmountError,
    ValidationError,
)
from tally.domain.shared.time import today_utc, utc_now

__all__ = [
    "ErrorCode",
    "DomainException",
    "ValidationError",
    "InvalidAmountError",
    # Decimal arithmetic
    "add",
    "multiply",
    "negate_expense",
    "sum_amounts",
    "to_decimal",
    "today_utc",
    "utc_now",
]
