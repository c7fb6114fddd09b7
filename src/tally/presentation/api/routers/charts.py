"""Report chart router.

Chart data for the report pages: net worth over time and income versus
expenses, either per bucket or summarized. Results are cached per
(operation, start, end, report type, accounts).
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tally.application.queries import (
    NetWorthQuery,
    YearInOutQuery,
    YearInOutSummarizedQuery,
)
from tally.domain.reporting.value_objects import AccountSet, DateRange, ReportType
from tally.presentation.api.chart_generator import ReportChartGenerator
from tally.presentation.api.dependencies import ReportFactory, get_chart_generator
from tally.presentation.api.schemas.charts import ChartResponse

logger = logging.getLogger(__name__)

router = APIRouter()

StartParam = Annotated[date, Query(description="First day of the report (inclusive)")]
EndParam = Annotated[date, Query(description="End of the report (exclusive)")]
AccountsParam = Annotated[
    list[int],
    Query(description="Account ids to report on (repeat the parameter)"),
]
ReportTypeParam = Annotated[
    ReportType,
    Query(description="Report page the chart is shown on"),
]

ChartGenerator = Annotated[ReportChartGenerator, Depends(get_chart_generator)]


def _report_scope(start: date, end: date, accounts: list[int]) -> AccountSet:
    DateRange.validated(start, end)
    return AccountSet.of(accounts)


@router.get(
    "/net-worth",
    summary="Get net worth over time",
    responses={200: {"description": "Weekly net worth of the selected accounts"}},
)
async def get_net_worth(
    factory: ReportFactory,
    generator: ChartGenerator,
    start: StartParam,
    end: EndParam,
    accounts: AccountsParam = [],  # NOQA: B006
    report_type: ReportTypeParam = ReportType.DEFAULT,
) -> ChartResponse:
    """
    Get the summed balance of the selected accounts, sampled every 7 days.

    Used on the multi-year and year report pages, where weekly samples give
    enough granularity.
    """
    account_set = _report_scope(start, end, accounts)
    result = await NetWorthQuery.from_factory(factory).execute(
        account_set,
        start,
        end,
        report_type,
    )
    return generator.net_worth(result)


@router.get(
    "/in-out",
    summary="Get income and expenses per period",
    responses={
        200: {"description": "Income and expenses per month, or per year"},
    },
)
async def get_in_out(
    factory: ReportFactory,
    generator: ChartGenerator,
    start: StartParam,
    end: EndParam,
    accounts: AccountsParam = [],  # NOQA: B006
    report_type: ReportTypeParam = ReportType.DEFAULT,
) -> ChartResponse:
    """
    Get income and expenses of the selected accounts per period.

    Ranges of up to twelve months are split per month, longer ranges per
    year. Expenses are reported as negative values.
    """
    account_set = _report_scope(start, end, accounts)
    result = await YearInOutQuery.from_factory(factory).execute(
        account_set,
        start,
        end,
        report_type,
    )
    return generator.year_in_out(result)


@router.get(
    "/in-out-summarized",
    summary="Get total and average income and expenses",
    responses={200: {"description": "Sum and per-period average"}},
)
async def get_in_out_summarized(
    factory: ReportFactory,
    generator: ChartGenerator,
    start: StartParam,
    end: EndParam,
    accounts: AccountsParam = [],  # NOQA: B006
    report_type: ReportTypeParam = ReportType.DEFAULT,
) -> ChartResponse:
    """
    Get total income and expenses plus the average per month (or per year
    for ranges longer than twelve months).
    """
    account_set = _report_scope(start, end, accounts)
    report = await YearInOutSummarizedQuery.from_factory(factory).execute(
        account_set,
        start,
        end,
        report_type,
    )
    logger.debug(
        "Summarized %d %s periods for %d accounts",
        report.period_count,
        report.granularity.value,
        len(account_set),
    )
    return generator.year_in_out_summarized(report)
