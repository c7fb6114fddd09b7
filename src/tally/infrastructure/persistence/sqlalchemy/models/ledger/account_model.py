"""SQLAlchemy model for ledger accounts."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tally.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin):
    """Database model for ledger accounts.

    ``account_type`` is informational ("asset", "liability", "expense",
    "revenue"); reports only care which accounts a caller selects.
    """

    __tablename__ = "ledger_accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    account_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    def __repr__(self) -> str:
        return (
            f"<AccountModel(id={self.id}, name={self.name!r}, "
            f"type={self.account_type!r})>"
        )
