"""Shape assembled reports into chart payloads."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from tally.application.dtos.reporting import (
    InOutResult,
    NetWorthResult,
    SummarizedReport,
)
from tally.domain.reporting.value_objects import Granularity
from tally.presentation.api.schemas.charts import ChartDatasetResponse, ChartResponse

_CENT = Decimal("0.01")

INCOME_LABEL = "Income"
EXPENSES_LABEL = "Expenses"
NET_WORTH_LABEL = "Net worth"


def _round(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _average(total: Decimal, count: int) -> Decimal:
    if count == 0:
        return _round(Decimal("0"))
    return _round(total / count)


class ReportChartGenerator:
    """Chart.js-style payloads for the report pages.

    Every payload is tagged with the reporting currency so the frontend can
    format the axis.
    """

    def __init__(self, currency: str):
        self.currency = currency

    def net_worth(self, result: NetWorthResult) -> ChartResponse:
        dataset = ChartDatasetResponse(label=NET_WORTH_LABEL)
        labels: list[str] = []
        for snapshot in result.snapshots:
            labels.append(f"{snapshot.date.day} {snapshot.date:%b %Y}")
            dataset.data.append(_round(snapshot.net_worth))
        return self._chart(labels, [dataset])

    def year_in_out(self, result: InOutResult) -> ChartResponse:
        label_format = "%Y" if result.granularity is Granularity.YEAR else "%b %Y"
        income = ChartDatasetResponse(label=INCOME_LABEL)
        expenses = ChartDatasetResponse(label=EXPENSES_LABEL)
        labels: list[str] = []
        for entry in result.entries:
            labels.append(entry.period.strftime(label_format))
            income.data.append(_round(entry.income))
            expenses.data.append(_round(entry.expense))
        return self._chart(labels, [income, expenses])

    def year_in_out_summarized(self, report: SummarizedReport) -> ChartResponse:
        if report.granularity is Granularity.YEAR:
            labels = ["Sum of years", "Average of years"]
        else:
            labels = ["Sum of year", "Average of year"]

        income = ChartDatasetResponse(
            label=INCOME_LABEL,
            data=[
                _round(report.total_income),
                _average(report.total_income, report.period_count),
            ],
        )
        expenses = ChartDatasetResponse(
            label=EXPENSES_LABEL,
            data=[
                _round(report.total_expense),
                _average(report.total_expense, report.period_count),
            ],
        )
        return self._chart(labels, [income, expenses])

    def _chart(
        self,
        labels: list[str],
        datasets: list[ChartDatasetResponse],
    ) -> ChartResponse:
        return ChartResponse(
            count=len(datasets),
            currency=self.currency,
            labels=labels,
            datasets=datasets,
        )
