"""Error codes and the base exceptions raised by tally's domain.

Every error a caller can trigger carries a stable ``ErrorCode`` so the API
and the CLI can translate it without inspecting exception classes.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients."""

    # Bad input (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of tally's exception hierarchy.

    Attributes
    ----------
    message
        Text that is safe to show to a user.
    code
        Stable ``ErrorCode``; subclasses provide a default.
    details
        Extra context for logs. Never sent to API clients.
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """A caller supplied input the reports cannot work with."""

    default_code = ErrorCode.VALIDATION_ERROR


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is not a well-formed decimal."""

    default_code = ErrorCode.INVALID_AMOUNT

    def __init__(self, value: Any) -> None:
        super().__init__(
            message=f"Invalid decimal amount: {value!r}",
            details={"value": repr(value), "type": type(value).__name__},
        )
