"""SQLAlchemy implementation of ReportQueryPort.

Like the balance adapter, this fetches only the matching transaction rows and
groups them by month in Python, which keeps the adapter portable across
SQLite/Postgres (no strftime/to_char).
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.reporting.value_objects import AccountSet
from tally.domain.shared.decimal_math import ZERO, add
from tally.infrastructure.persistence.sqlalchemy.models.ledger import (
    TransactionModel,
)


def _get_month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


class SqlAlchemyReportQueryAdapter:
    """Per-month money flows across the boundary of an account set.

    Transfers between two accounts of the same set are neither earned nor
    spent. All figures are positive; callers decide on the sign.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def earned_per_month(
        self,
        accounts: AccountSet,
        start: date,
        end: date,
    ) -> dict[str, Decimal]:
        ids = accounts.to_list()
        return await self._sum_per_month(
            TransactionModel.destination_account_id.in_(ids),
            TransactionModel.source_account_id.not_in(ids),
            start=start,
            end=end,
            empty=not ids,
        )

    async def spent_per_month(
        self,
        accounts: AccountSet,
        start: date,
        end: date,
    ) -> dict[str, Decimal]:
        ids = accounts.to_list()
        return await self._sum_per_month(
            TransactionModel.source_account_id.in_(ids),
            TransactionModel.destination_account_id.not_in(ids),
            start=start,
            end=end,
            empty=not ids,
        )

    async def _sum_per_month(
        self,
        *conditions: ColumnElement[bool],
        start: date,
        end: date,
        empty: bool,
    ) -> dict[str, Decimal]:
        if empty or start >= end:
            return {}

        stmt = select(TransactionModel.date, TransactionModel.amount).where(
            *conditions,
            TransactionModel.date >= start,
            TransactionModel.date < end,
        )
        rows = (await self._session.execute(stmt)).all()

        per_month: dict[str, Decimal] = defaultdict(lambda: ZERO)
        for txn_date, amount in rows:
            month_key = _get_month_key(txn_date)
            per_month[month_key] = add(per_month[month_key], Decimal(amount))
        return dict(per_month)
