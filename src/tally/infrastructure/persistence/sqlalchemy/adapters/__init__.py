"""SQLAlchemy adapters implementing application ports."""

from tally.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyBalanceAdapter,
    SqlAlchemyReportQueryAdapter,
)

__all__ = ["SqlAlchemyBalanceAdapter", "SqlAlchemyReportQueryAdapter"]
