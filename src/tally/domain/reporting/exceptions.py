"""Reporting domain exceptions."""

from datetime import date
from typing import Any

from tally.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)


class InvalidPeriodLabelError(ValidationError):
    """Raised when raw report figures are keyed by an unexpected label.

    Yearly rollups match labels by their four-digit year prefix, so a label
    in any other shape would silently drop out of the totals.
    """

    default_code = ErrorCode.INVALID_FORMAT

    def __init__(self, label: Any) -> None:
        super().__init__(
            message=f"Invalid period label {label!r}, expected 'YYYY-MM' or 'YYYY'",
            details={"label": repr(label)},
        )


class InvalidDateRangeError(ValidationError):
    """Raised when a caller asks for a report that ends before it starts."""

    default_code = ErrorCode.INVALID_DATE

    def __init__(self, start: date, end: date) -> None:
        super().__init__(
            message=f"Report end date {end} is before start date {start}",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )


class PeriodStepError(DomainException):
    """Raised when a bucketing step fails to move the cursor forward."""

    def __init__(self, cursor: date, next_cursor: date) -> None:
        super().__init__(
            message="Period bucketing did not advance",
            details={
                "cursor": cursor.isoformat(),
                "next_cursor": next_cursor.isoformat(),
            },
        )


class ReportDataError(DomainException):
    """Raised when a data source hands back figures that fail validation.

    The caller's request was fine, so this maps to an internal error; the
    original validation error is chained as ``__cause__``.
    """

    def __init__(self, source: str, cause: ValidationError) -> None:
        super().__init__(
            message=f"Invalid figures from {source}: {cause.message}",
            details={"source": source, "cause": cause.code.value, **cause.details},
        )
