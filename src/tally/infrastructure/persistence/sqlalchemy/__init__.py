"""SQLAlchemy persistence: ledger models and report adapters."""

from tally.infrastructure.persistence.sqlalchemy.factory import SQLAlchemyReportFactory

__all__ = ["SQLAlchemyReportFactory"]
