"""Reporting ports.

These ports are report-like: the assembler asks for exactly the raw figures
a chart needs and does the bucketing itself.
"""

from tally.application.ports.reporting.report_ports import (
    BalancePort,
    CacheStorePort,
    RawAmount,
    ReportQueryPort,
)

__all__ = [
    "BalancePort",
    "CacheStorePort",
    "RawAmount",
    "ReportQueryPort",
]
