"""Tests for ReportChartGenerator."""

from datetime import date
from decimal import Decimal

from tally.application.dtos.reporting import (
    InOutResult,
    NetWorthResult,
    NetWorthSnapshot,
    ReportEntry,
    SummarizedReport,
)
from tally.domain.reporting.value_objects import Granularity
from tally.presentation.api.chart_generator import ReportChartGenerator

generator = ReportChartGenerator(currency="EUR")


class TestNetWorthChart:
    def test_one_label_and_value_per_sample(self):
        result = NetWorthResult(
            snapshots=(
                NetWorthSnapshot(date(2020, 1, 1), Decimal("300")),
                NetWorthSnapshot(date(2020, 1, 8), Decimal("312.345")),
            ),
        )

        chart = generator.net_worth(result)

        assert chart.count == 1
        assert chart.currency == "EUR"
        assert chart.labels == ["1 Jan 2020", "8 Jan 2020"]
        assert chart.datasets[0].label == "Net worth"
        assert chart.datasets[0].data == [Decimal("300.00"), Decimal("312.35")]

    def test_empty_result(self):
        chart = generator.net_worth(NetWorthResult())

        assert chart.labels == []
        assert chart.datasets[0].data == []


class TestInOutChart:
    def test_monthly_labels(self):
        result = InOutResult(
            granularity=Granularity.MONTH,
            entries=(
                ReportEntry(date(2020, 1, 1), "2020-01", Decimal("100"), Decimal("-30")),
                ReportEntry(date(2020, 2, 1), "2020-02", Decimal("50"), Decimal("0")),
            ),
        )

        chart = generator.year_in_out(result)

        assert chart.count == 2
        assert chart.labels == ["Jan 2020", "Feb 2020"]
        income, expenses = chart.datasets
        assert income.label == "Income"
        assert income.data == [Decimal("100.00"), Decimal("50.00")]
        assert expenses.label == "Expenses"
        assert expenses.data == [Decimal("-30.00"), Decimal("0.00")]

    def test_yearly_labels(self):
        result = InOutResult(
            granularity=Granularity.YEAR,
            entries=(
                ReportEntry(date(2019, 1, 1), "2019", Decimal("1"), Decimal("-1")),
                ReportEntry(date(2020, 1, 1), "2020", Decimal("2"), Decimal("-2")),
            ),
        )

        assert generator.year_in_out(result).labels == ["2019", "2020"]


class TestSummarizedChart:
    def test_sum_and_average_per_month(self):
        report = SummarizedReport(
            granularity=Granularity.MONTH,
            total_income=Decimal("150"),
            total_expense=Decimal("-30"),
            period_count=3,
        )

        chart = generator.year_in_out_summarized(report)

        assert chart.labels == ["Sum of year", "Average of year"]
        income, expenses = chart.datasets
        assert income.data == [Decimal("150.00"), Decimal("50.00")]
        assert expenses.data == [Decimal("-30.00"), Decimal("-10.00")]

    def test_yearly_labels(self):
        report = SummarizedReport(
            granularity=Granularity.YEAR,
            total_income=Decimal("100"),
            period_count=3,
        )

        chart = generator.year_in_out_summarized(report)

        assert chart.labels == ["Sum of years", "Average of years"]
        assert chart.datasets[0].data[1] == Decimal("33.33")

    def test_zero_periods_average_to_zero(self):
        chart = generator.year_in_out_summarized(
            SummarizedReport(granularity=Granularity.MONTH),
        )

        assert chart.datasets[0].data == [Decimal("0.00"), Decimal("0.00")]
