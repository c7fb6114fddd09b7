"""Tests for the API error responses."""

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tally.domain.reporting.exceptions import (
    InvalidPeriodLabelError,
    PeriodStepError,
    ReportDataError,
)
from tally.domain.shared.exceptions import ErrorCode
from tally.presentation.api.exception_handlers import (
    INTERNAL_ERROR_MESSAGE,
    setup_exception_handlers,
    status_for,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (ErrorCode.INVALID_DATE, 400),
        (ErrorCode.INVALID_FORMAT, 400),
        (ErrorCode.INTERNAL_ERROR, 500),
    ],
)
def test_status_for(code, expected):
    assert status_for(code) == expected


@pytest.fixture
def client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/label")
    async def bad_label():
        raise InvalidPeriodLabelError("Jan 2020")

    @app.get("/upstream")
    async def upstream():
        raise ReportDataError("earned_per_month", InvalidPeriodLabelError("Jan"))

    @app.get("/step")
    async def step():
        raise PeriodStepError(date(2020, 1, 1), date(2020, 1, 1))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


def test_validation_errors_keep_their_message(client):
    response = client.get("/label")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FORMAT"
    assert "Jan 2020" in response.json()["detail"]


@pytest.mark.parametrize("path", ["/step", "/upstream", "/boom"])
def test_internal_errors_hide_their_message(client, path):
    response = client.get(path)

    assert response.status_code == 500
    assert response.json() == {
        "detail": INTERNAL_ERROR_MESSAGE,
        "code": "INTERNAL_ERROR",
    }
