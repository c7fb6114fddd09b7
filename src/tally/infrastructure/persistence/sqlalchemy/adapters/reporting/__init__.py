"""SQLAlchemy reporting adapters (read side).

These are infrastructure implementations of application-layer reporting ports.
"""

from tally.infrastructure.persistence.sqlalchemy.adapters.reporting.sqlalchemy_balance_adapter import (  # NOQA: E501
    SqlAlchemyBalanceAdapter,
)
from tally.infrastructure.persistence.sqlalchemy.adapters.reporting.sqlalchemy_report_query_adapter import (  # NOQA: E501
    SqlAlchemyReportQueryAdapter,
)

__all__ = ["SqlAlchemyBalanceAdapter", "SqlAlchemyReportQueryAdapter"]
