"""Reporting ports (collaborators of the report assembler).

The balance and query ports are read-side contracts implemented by the
persistence layer; the cache store is any key/value store that can hold
assembled report results.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Protocol, Sequence, Union

from tally.domain.reporting.value_objects import AccountSet

RawAmount = Union[Decimal, int, str]


class BalancePort(Protocol):
    """Account balances as of a given day."""

    async def balances_by_id(
        self,
        account_ids: Sequence[int],
        as_of: date,
    ) -> Mapping[int, RawAmount]:
        """Balance per account id at the end of ``as_of``."""
        ...


class ReportQueryPort(Protocol):
    """Per-month earned and spent figures for a set of accounts."""

    async def spent_per_month(
        self,
        accounts: AccountSet,
        start: date,
        end: date,
    ) -> Mapping[str, RawAmount]:
        """Money leaving ``accounts`` per 'YYYY-MM' label within ``[start, end)``."""
        ...

    async def earned_per_month(
        self,
        accounts: AccountSet,
        start: date,
        end: date,
    ) -> Mapping[str, RawAmount]:
        """Money entering ``accounts`` per 'YYYY-MM' label within ``[start, end)``."""
        ...


class CacheStorePort(Protocol):
    """Key/value store for assembled reports."""

    def has(self, key: str) -> bool:
        ...

    def get(self, key: str) -> Any:
        """Return the stored value; only valid after ``has(key)`` is true."""
        ...

    def store(self, key: str, value: Any) -> None:
        ...
