"""SQLAlchemy model for ledger transactions."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from tally.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin):
    """Database model for a transfer of money between two accounts.

    The amount is stored positive; direction comes from the source and
    destination accounts.
    """

    __tablename__ = "ledger_transactions"

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_ledger_transaction_positive_amount"),
        CheckConstraint(
            "source_account_id <> destination_account_id",
            name="ck_ledger_transaction_distinct_accounts",
        ),
        Index("ix_ledger_transactions_source_date", "source_account_id", "date"),
        Index(
            "ix_ledger_transactions_destination_date",
            "destination_account_id",
            "date",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    source_account_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ledger_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    destination_account_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ledger_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, date={self.date}, "
            f"{self.source_account_id}->{self.destination_account_id}, "
            f"amount={self.amount})>"
        )
