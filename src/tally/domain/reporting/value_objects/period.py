"""Period (bucket) value objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Granularity(str, Enum):
    """Bucket size used to slice a report's date range."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Period:
    """A single bucket, identified by the date it starts on."""

    start: date
    granularity: Granularity

    @property
    def year(self) -> int:
        return self.start.year

    @property
    def label(self) -> str:
        """Key used by the raw per-period figures ('YYYY-MM' or 'YYYY')."""
        if self.granularity is Granularity.MONTH:
            return f"{self.start.year:04d}-{self.start.month:02d}"
        if self.granularity is Granularity.YEAR:
            return f"{self.start.year:04d}"
        return self.start.isoformat()
