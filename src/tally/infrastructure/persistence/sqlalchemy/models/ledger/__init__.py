"""Ledger SQLAlchemy models."""

from tally.infrastructure.persistence.sqlalchemy.models.ledger.account_model import (
    AccountModel,
)
from tally.infrastructure.persistence.sqlalchemy.models.ledger.transaction_model import (  # NOQA: E501
    TransactionModel,
)

__all__ = [
    "AccountModel",
    "TransactionModel",
]
