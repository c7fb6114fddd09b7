"""Tests for reporting value objects."""

from datetime import date

import pytest

from tally.domain.reporting.exceptions import InvalidDateRangeError
from tally.domain.reporting.value_objects import (
    AccountSet,
    DateRange,
    Granularity,
    Period,
)


class TestAccountSet:
    def test_order_and_duplicates_do_not_matter(self):
        assert AccountSet.of([3, 1, 2, 1]) == AccountSet.of([1, 2, 3])
        assert AccountSet.of([3, 1, 2]).to_list() == [1, 2, 3]

    def test_membership_and_length(self):
        accounts = AccountSet.of([5, 7])

        assert 5 in accounts
        assert 6 not in accounts
        assert len(accounts) == 2

    def test_rejects_non_integer_ids(self):
        with pytest.raises(TypeError):
            AccountSet.of(["1"])


class TestDateRange:
    def test_empty_when_start_not_before_end(self):
        assert DateRange(date(2020, 1, 1), date(2020, 1, 1)).is_empty
        assert DateRange(date(2020, 2, 1), date(2020, 1, 1)).is_empty
        assert not DateRange(date(2020, 1, 1), date(2020, 1, 2)).is_empty

    def test_validated_rejects_reversed_ranges(self):
        with pytest.raises(InvalidDateRangeError):
            DateRange.validated(date(2020, 2, 1), date(2020, 1, 1))

    def test_validated_allows_empty_ranges(self):
        date_range = DateRange.validated(date(2020, 1, 1), date(2020, 1, 1))

        assert date_range.is_empty


class TestPeriod:
    def test_labels(self):
        start = date(2020, 3, 9)

        assert Period(start, Granularity.MONTH).label == "2020-03"
        assert Period(start, Granularity.YEAR).label == "2020"
        assert Period(start, Granularity.WEEK).label == "2020-03-09"
