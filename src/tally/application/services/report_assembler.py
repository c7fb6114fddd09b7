"""Assemble net worth and income/expense reports from raw figures."""

from __future__ import annotations

import logging
from typing import Mapping

from tally.application.dtos.reporting import (
    InOutResult,
    NetWorthResult,
    NetWorthSnapshot,
    ReportEntry,
    SummarizedReport,
)
from tally.application.ports.reporting import (
    BalancePort,
    RawAmount,
    ReportQueryPort,
)
from tally.domain.reporting.exceptions import ReportDataError
from tally.domain.reporting.services import (
    PeriodAmounts,
    expense_for,
    income_for,
    normalize_period_amounts,
    periods_for,
    select_granularity,
    weekly_periods,
)
from tally.domain.reporting.value_objects import AccountSet, DateRange
from tally.domain.shared.decimal_math import ZERO, add, sum_amounts
from tally.domain.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _normalized(source: str, raw: Mapping[str, RawAmount]) -> PeriodAmounts:
    try:
        return normalize_period_amounts(raw)
    except ValidationError as e:
        raise ReportDataError(source, e) from e


class ReportAssembler:
    """Buckets a date range and resolves income, expense or balances per bucket.

    Ranges of more than twelve whole months are reported per year, shorter
    ones per month. Net worth is always sampled weekly.
    """

    def __init__(
        self,
        balance_port: BalancePort,
        report_query_port: ReportQueryPort,
    ):
        self._balances = balance_port
        self._queries = report_query_port

    async def net_worth(
        self,
        accounts: AccountSet,
        date_range: DateRange,
    ) -> NetWorthResult:
        account_ids = accounts.to_list()
        snapshots: list[NetWorthSnapshot] = []
        for period in weekly_periods(date_range):
            balances = await self._balances.balances_by_id(account_ids, period.start)
            try:
                net_worth = sum_amounts(balances.values())
            except ValidationError as e:
                raise ReportDataError("balances_by_id", e) from e
            snapshots.append(NetWorthSnapshot(date=period.start, net_worth=net_worth))

        logger.debug(
            "Net worth for %d accounts over %s: %d samples",
            len(accounts),
            date_range,
            len(snapshots),
        )
        return NetWorthResult(snapshots=tuple(snapshots))

    async def year_in_out(
        self,
        accounts: AccountSet,
        date_range: DateRange,
    ) -> InOutResult:
        earned, spent = await self._fetch_figures(accounts, date_range)
        granularity = select_granularity(date_range)

        entries = tuple(
            ReportEntry(
                period=period.start,
                period_label=period.label,
                income=income_for(earned, period),
                expense=expense_for(spent, period),
            )
            for period in periods_for(date_range, granularity)
        )
        return InOutResult(granularity=granularity, entries=entries)

    async def year_in_out_summarized(
        self,
        accounts: AccountSet,
        date_range: DateRange,
    ) -> SummarizedReport:
        earned, spent = await self._fetch_figures(accounts, date_range)
        granularity = select_granularity(date_range)

        income = ZERO
        expense = ZERO
        count = 0
        for period in periods_for(date_range, granularity):
            income = add(income, income_for(earned, period))
            expense = add(expense, expense_for(spent, period))
            count += 1

        return SummarizedReport(
            granularity=granularity,
            total_income=income,
            total_expense=expense,
            period_count=count,
        )

    async def _fetch_figures(
        self,
        accounts: AccountSet,
        date_range: DateRange,
    ) -> tuple[PeriodAmounts, PeriodAmounts]:
        spent = await self._queries.spent_per_month(
            accounts,
            date_range.start,
            date_range.end,
        )
        earned = await self._queries.earned_per_month(
            accounts,
            date_range.start,
            date_range.end,
        )
        return (
            _normalized("earned_per_month", earned),
            _normalized("spent_per_month", spent),
        )

