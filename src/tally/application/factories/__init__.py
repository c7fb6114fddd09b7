"""Application factories."""

from tally.application.factories.report_port_factory import ReportPortFactory

__all__ = ["ReportPortFactory"]
