"""Application services."""

from tally.application.services.cache_properties import CacheProperties
from tally.application.services.cached_report import cached_report
from tally.application.services.report_assembler import ReportAssembler

__all__ = [
    "CacheProperties",
    "ReportAssembler",
    "cached_report",
]
