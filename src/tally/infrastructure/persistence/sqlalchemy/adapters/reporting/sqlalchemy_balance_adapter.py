"""SQLAlchemy implementation of BalancePort."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.shared.decimal_math import ZERO, add
from tally.infrastructure.persistence.sqlalchemy.models.ledger import (
    TransactionModel,
)


class SqlAlchemyBalanceAdapter:
    """Account balances computed from the transaction ledger.

    A balance is everything that flowed into the account minus everything
    that flowed out of it, up to and including the given day. Amounts are
    summed in Python with exact decimals rather than with SQL ``SUM``, which
    SQLite evaluates in floating point.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def balances_by_id(
        self,
        account_ids: Sequence[int],
        as_of: date,
    ) -> dict[int, Decimal]:
        ids = list(account_ids)
        balances: dict[int, Decimal] = {account_id: ZERO for account_id in ids}
        if not ids:
            return balances

        inflows = select(
            TransactionModel.destination_account_id,
            TransactionModel.amount,
        ).where(
            TransactionModel.destination_account_id.in_(ids),
            TransactionModel.date <= as_of,
        )
        for account_id, amount in (await self._session.execute(inflows)).all():
            balances[account_id] = add(balances[account_id], Decimal(amount))

        outflows = select(
            TransactionModel.source_account_id,
            TransactionModel.amount,
        ).where(
            TransactionModel.source_account_id.in_(ids),
            TransactionModel.date <= as_of,
        )
        for account_id, amount in (await self._session.execute(outflows)).all():
            outflow = Decimal(amount).copy_negate()
            balances[account_id] = add(balances[account_id], outflow)

        return balances
