"""SQLAlchemy models for persistence layer."""

from tally.infrastructure.persistence.sqlalchemy.models.base import Base
from tally.infrastructure.persistence.sqlalchemy.models.ledger import (
    AccountModel,
    TransactionModel,
)

__all__ = [
    "Base",
    "AccountModel",
    "TransactionModel",
]
