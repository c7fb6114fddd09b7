"""Fixtures for report chart API tests.

The report factory dependency is overridden with in-memory ports so the
endpoints run without a database.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from tally.infrastructure.cache import InMemoryCacheStore
from tally.presentation.api.app import create_app
from tally.presentation.api.dependencies import get_report_factory


class FakeBalancePort:
    def __init__(self, balances):
        self.balances = balances
        self.calls = 0

    async def balances_by_id(self, account_ids, as_of):
        self.calls += 1
        return {i: self.balances.get(i, Decimal("0")) for i in account_ids}


class FakeReportQueryPort:
    def __init__(self, earned, spent):
        self.earned = earned
        self.spent = spent
        self.calls = 0

    async def spent_per_month(self, accounts, start, end):
        self.calls += 1
        return self.spent

    async def earned_per_month(self, accounts, start, end):
        return self.earned


class FakeReportFactory:
    def __init__(self, balance_port, report_query_port, cache_store):
        self._balance_port = balance_port
        self._report_query_port = report_query_port
        self._cache_store = cache_store

    def balance_port(self):
        return self._balance_port

    def report_query_port(self):
        return self._report_query_port

    def cache_store(self):
        return self._cache_store


@pytest.fixture
def balance_port():
    return FakeBalancePort({1: Decimal("100"), 2: Decimal("200")})


@pytest.fixture
def report_query_port():
    return FakeReportQueryPort(
        earned={"2020-01": Decimal("100"), "2020-02": Decimal("50")},
        spent={"2020-01": Decimal("30")},
    )


@pytest.fixture
def cache_store():
    return InMemoryCacheStore()


@pytest.fixture
def client(balance_port, report_query_port, cache_store):
    app = create_app(init_database=False)
    factory = FakeReportFactory(balance_port, report_query_port, cache_store)
    app.dependency_overrides[get_report_factory] = lambda: factory
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
