"""Tests for ReportAssembler."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from tally.application.services import ReportAssembler
from tally.domain.reporting.exceptions import (
    InvalidPeriodLabelError,
    ReportDataError,
)
from tally.domain.shared.exceptions import InvalidAmountError
from tally.domain.reporting.value_objects import AccountSet, DateRange, Granularity


def _assembler(spent=None, earned=None, balances=None):
    balance_port = Mock()
    balance_port.balances_by_id = AsyncMock(return_value=balances or {})
    query_port = Mock()
    query_port.spent_per_month = AsyncMock(return_value=spent or {})
    query_port.earned_per_month = AsyncMock(return_value=earned or {})
    return ReportAssembler(balance_port, query_port), balance_port, query_port


ACCOUNTS = AccountSet.of([1, 2])


class TestNetWorth:
    @pytest.mark.asyncio
    async def test_sums_balances_per_weekly_sample(self):
        assembler, balance_port, _ = _assembler(
            balances={1: Decimal("100"), 2: "200"},
        )
        date_range = DateRange(date(2020, 1, 1), date(2020, 1, 15))

        result = await assembler.net_worth(ACCOUNTS, date_range)

        assert [s.date for s in result.snapshots] == [
            date(2020, 1, 1),
            date(2020, 1, 8),
        ]
        assert all(s.net_worth == Decimal("300") for s in result.snapshots)
        balance_port.balances_by_id.assert_any_await([1, 2], date(2020, 1, 8))

    @pytest.mark.asyncio
    async def test_empty_range_queries_nothing(self):
        assembler, balance_port, _ = _assembler()

        result = await assembler.net_worth(
            ACCOUNTS,
            DateRange(date(2020, 1, 1), date(2020, 1, 1)),
        )

        assert result.snapshots == ()
        balance_port.balances_by_id.assert_not_awaited()


class TestYearInOut:
    @pytest.mark.asyncio
    async def test_monthly_buckets_for_short_ranges(self):
        assembler, _, query_port = _assembler(
            spent={"2020-01": "30"},
            earned={"2020-01": "100", "2020-02": "50"},
        )
        date_range = DateRange(date(2020, 1, 1), date(2020, 4, 1))

        result = await assembler.year_in_out(ACCOUNTS, date_range)

        assert result.granularity is Granularity.MONTH
        assert [(e.period_label, e.income, e.expense) for e in result.entries] == [
            ("2020-01", Decimal("100"), Decimal("-30")),
            ("2020-02", Decimal("50"), Decimal("0")),
            ("2020-03", Decimal("0"), Decimal("0")),
        ]
        query_port.spent_per_month.assert_awaited_once_with(
            ACCOUNTS,
            date(2020, 1, 1),
            date(2020, 4, 1),
        )

    @pytest.mark.asyncio
    async def test_yearly_buckets_roll_up_months(self):
        assembler, _, _ = _assembler(
            spent={"2019-03": "-10", "2019-11": "-5", "2020-06": "-7.50"},
            earned={"2019-01": "1000", "2020-12": "20.25"},
        )
        date_range = DateRange(date(2019, 1, 1), date(2021, 1, 1))

        result = await assembler.year_in_out(ACCOUNTS, date_range)

        assert result.granularity is Granularity.YEAR
        assert [(e.period_label, e.income, e.expense) for e in result.entries] == [
            ("2019", Decimal("1000"), Decimal("-15")),
            ("2020", Decimal("20.25"), Decimal("-7.50")),
        ]

    @pytest.mark.asyncio
    async def test_empty_range_has_no_entries(self):
        assembler, _, _ = _assembler(earned={"2020-01": "1"})

        result = await assembler.year_in_out(
            ACCOUNTS,
            DateRange(date(2020, 2, 1), date(2020, 1, 1)),
        )

        assert result.entries == ()


class TestYearInOutSummarized:
    @pytest.mark.asyncio
    async def test_totals_and_bucket_count(self):
        assembler, _, _ = _assembler(
            spent={"2020-01": "30"},
            earned={"2020-01": "100", "2020-02": "50"},
        )
        date_range = DateRange(date(2020, 1, 1), date(2020, 4, 1))

        summary = await assembler.year_in_out_summarized(ACCOUNTS, date_range)

        assert summary.granularity is Granularity.MONTH
        assert summary.total_income == Decimal("150")
        assert summary.total_expense == Decimal("-30")
        assert summary.period_count == 3

    @pytest.mark.asyncio
    async def test_figures_outside_the_range_are_ignored(self):
        assembler, _, _ = _assembler(earned={"2019-12": "5", "2020-01": "1"})
        date_range = DateRange(date(2020, 1, 1), date(2020, 2, 1))

        summary = await assembler.year_in_out_summarized(ACCOUNTS, date_range)

        assert summary.total_income == Decimal("1")
        assert summary.period_count == 1

    @pytest.mark.asyncio
    async def test_empty_range_sums_to_zero(self):
        assembler, _, _ = _assembler()

        summary = await assembler.year_in_out_summarized(
            ACCOUNTS,
            DateRange(date(2020, 1, 1), date(2020, 1, 1)),
        )

        assert summary.total_income == 0
        assert summary.total_expense == 0
        assert summary.period_count == 0


class TestCollaboratorFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["spent_per_month", "earned_per_month"])
    async def test_query_port_errors_propagate_unchanged(self, method):
        assembler, _, query_port = _assembler()
        error = RuntimeError("ledger unavailable")
        getattr(query_port, method).side_effect = error
        date_range = DateRange(date(2020, 1, 1), date(2020, 4, 1))

        with pytest.raises(RuntimeError) as exc_info:
            await assembler.year_in_out(ACCOUNTS, date_range)
        assert exc_info.value is error

        with pytest.raises(RuntimeError) as exc_info:
            await assembler.year_in_out_summarized(ACCOUNTS, date_range)
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_balance_port_errors_propagate_unchanged(self):
        assembler, balance_port, _ = _assembler()
        error = RuntimeError("ledger unavailable")
        balance_port.balances_by_id.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            await assembler.net_worth(
                ACCOUNTS,
                DateRange(date(2020, 1, 1), date(2020, 2, 1)),
            )

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_empty_range_still_fetches_figures_once(self):
        assembler, _, query_port = _assembler()
        date_range = DateRange(date(2020, 1, 1), date(2020, 1, 1))

        await assembler.year_in_out(ACCOUNTS, date_range)

        query_port.spent_per_month.assert_awaited_once_with(
            ACCOUNTS,
            date(2020, 1, 1),
            date(2020, 1, 1),
        )
        query_port.earned_per_month.assert_awaited_once_with(
            ACCOUNTS,
            date(2020, 1, 1),
            date(2020, 1, 1),
        )


class TestInvalidSourceData:
    @pytest.mark.asyncio
    async def test_bad_label_from_query_port_is_a_data_error(self):
        assembler, _, _ = _assembler(earned={"Jan 2020": "1"})

        with pytest.raises(ReportDataError) as exc_info:
            await assembler.year_in_out(
                ACCOUNTS,
                DateRange(date(2020, 1, 1), date(2020, 2, 1)),
            )

        assert isinstance(exc_info.value.__cause__, InvalidPeriodLabelError)
        assert exc_info.value.details["source"] == "earned_per_month"

    @pytest.mark.asyncio
    async def test_float_balance_is_a_data_error(self):
        assembler, _, _ = _assembler(balances={1: 0.1})

        with pytest.raises(ReportDataError) as exc_info:
            await assembler.net_worth(
                ACCOUNTS,
                DateRange(date(2020, 1, 1), date(2020, 1, 2)),
            )

        assert isinstance(exc_info.value.__cause__, InvalidAmountError)


class TestEndOfCalendar:
    @pytest.mark.asyncio
    async def test_ranges_ending_at_date_max(self):
        assembler, _, _ = _assembler(earned={"9999-12": "5"})

        in_out = await assembler.year_in_out(
            ACCOUNTS,
            DateRange(date(9999, 12, 1), date(9999, 12, 31)),
        )
        net_worth = await assembler.net_worth(
            ACCOUNTS,
            DateRange(date(9999, 12, 28), date(9999, 12, 31)),
        )

        assert [(e.period_label, e.income) for e in in_out.entries] == [
            ("9999-12", Decimal("5")),
        ]
        assert [s.date for s in net_worth.snapshots] == [date(9999, 12, 28)]
