"""Summarized income vs. expense query (total and period count)."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterable

from tally.application.dtos.reporting import SummarizedReport
from tally.application.ports.reporting import (
    BalancePort,
    CacheStorePort,
    ReportQueryPort,
)
from tally.application.services import CacheProperties, ReportAssembler, cached_report
from tally.domain.reporting.value_objects import AccountSet, DateRange, ReportType

if TYPE_CHECKING:
    from tally.application.factories import ReportPortFactory


class YearInOutSummarizedQuery:
    """Return total income, total expenses and the number of buckets summed."""

    OPERATION = "yearInOutSummarized"

    def __init__(
        self,
        balance_port: BalancePort,
        report_query_port: ReportQueryPort,
        cache_store: CacheStorePort,
    ):
        self._assembler = ReportAssembler(balance_port, report_query_port)
        self._cache = cache_store

    @classmethod
    def from_factory(cls, factory: ReportPortFactory) -> YearInOutSummarizedQuery:
        return cls(
            balance_port=factory.balance_port(),
            report_query_port=factory.report_query_port(),
            cache_store=factory.cache_store(),
        )

    async def execute(
        self,
        accounts: AccountSet | Iterable[int],
        start: date,
        end: date,
        report_type: ReportType = ReportType.DEFAULT,
    ) -> SummarizedReport:
        account_set = (
            accounts if isinstance(accounts, AccountSet) else AccountSet.of(accounts)
        )
        date_range = DateRange(start=start, end=end)

        properties = CacheProperties(self.OPERATION)
        properties.add_property("start", start)
        properties.add_property("end", end)
        properties.add_property("report_type", report_type)
        properties.add_property("accounts", account_set)

        return await cached_report(
            self._cache,
            properties,
            lambda: self._assembler.year_in_out_summarized(account_set, date_range),
        )
