"""Translate exceptions into JSON error responses.

Every error leaves the API in the same shape::

    {"detail": "Report end date 2020-01-01 is before start date 2020-04-01",
     "code": "INVALID_DATE"}

Internal failures never leak their message; clients only see the code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tally.domain.shared.exceptions import DomainException, ErrorCode

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(code: ErrorCode) -> int:
    return STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _error_response(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
    )


async def handle_domain_exception(
    request: Request,
    exc: DomainException,
) -> JSONResponse:
    """Map a domain exception to its status code.

    Caller errors are logged at warning level with their details; anything
    mapped to 500 is logged with a traceback and answered generically.
    """
    status_code = status_for(exc.code)
    where = f"{request.method} {request.url.path}"

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Internal error on %s: %r", where, exc, exc_info=exc)
        return _error_response(status_code, INTERNAL_ERROR_MESSAGE, exc.code)

    logger.warning(
        "Rejected %s: %s (code=%s, details=%s)",
        where,
        exc.message,
        exc.code.value,
        exc.details,
    )
    return _error_response(status_code, exc.message, exc.code)


async def handle_unexpected_exception(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_MESSAGE,
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on ``app``."""
    app.add_exception_handler(DomainException, handle_domain_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
