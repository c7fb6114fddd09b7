"""Exact decimal arithmetic for monetary amounts.

Amounts arrive as ``Decimal``, ``int`` or decimal strings (the query layer and
balance lookups hand out strings). Floats are rejected outright: a float has
already lost precision by the time it reaches us.

Addition and multiplication run in an unbounded-precision context, so results
are exact. Rounding only happens where a caller quantizes explicitly (e.g. the
chart payloads).
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation
from typing import Iterable, Union

from tally.domain.shared.exceptions import InvalidAmountError

AmountLike = Union[Decimal, int, str]

ZERO = Decimal("0")

_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def to_decimal(value: AmountLike) -> Decimal:
    """Parse ``value`` into a finite ``Decimal``.

    Raises
    ------
    InvalidAmountError
        For floats, booleans, non-finite values and malformed strings.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidAmountError(value)
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(value) from None

    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


def add(a: AmountLike, b: AmountLike) -> Decimal:
    return _EXACT.add(to_decimal(a), to_decimal(b))


def multiply(a: AmountLike, b: AmountLike) -> Decimal:
    return _EXACT.multiply(to_decimal(a), to_decimal(b))


def sum_amounts(values: Iterable[AmountLike]) -> Decimal:
    """Sum ``values`` exactly, starting from zero."""
    total = ZERO
    for value in values:
        total = add(total, value)
    return total


def negate_expense(amount: AmountLike) -> Decimal:
    """Return the amount as an expense: never positive.

    The raw figures may report spending as positive or negative numbers;
    reports always show expenses below zero.
    """
    value = to_decimal(amount).copy_abs()
    if value.is_zero():
        # no "-0" in the output
        return value
    return value.copy_negate()
