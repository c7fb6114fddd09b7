"""Date range value object for report queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from tally.domain.reporting.exceptions import InvalidDateRangeError


@dataclass(frozen=True)
class DateRange:
    """Half-open calendar range ``[start, end)`` covered by a report.

    A range whose start is on or after its end is valid and simply empty;
    use ``validated`` where a reversed range is a client error.
    """

    start: date
    end: date

    @classmethod
    def validated(cls, start: date, end: date) -> DateRange:
        if end < start:
            raise InvalidDateRangeError(start, end)
        return cls(start=start, end=end)

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
