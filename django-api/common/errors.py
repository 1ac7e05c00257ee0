"""Domain error codes shared by every app.

Each app raises subclasses of DomainError from its own domain/errors.py.
Handlers never build error responses by hand; common.exceptions maps codes
to HTTP statuses.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_NOT_CONFIGURED = "STORE_NOT_CONFIGURED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_DATE = "INVALID_DATE"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    GUEST_LIMIT_REACHED = "GUEST_LIMIT_REACHED"
    CHECK_IN_IN_PROGRESS = "CHECK_IN_IN_PROGRESS"
    DUPLICATE_SIGNUP = "DUPLICATE_SIGNUP"
    EMPTY_CART = "EMPTY_CART"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    CLIP_NOT_FOUND = "CLIP_NOT_FOUND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StoreNotConfiguredError(DomainError):
    """Raised when a feature's backing store is not configured."""

    def __init__(self, feature: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_NOT_CONFIGURED,
            message=f"The {feature} feature is not available right now",
        )
        self.feature = feature


class ValidationFailedError(DomainError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs a signed-in identity."""

    def __init__(self, message: str = "Please sign in to continue") -> None:
        super().__init__(code=ErrorCode.NOT_AUTHENTICATED, message=message)
