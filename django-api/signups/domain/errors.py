"""Domain errors for signups."""

from common.errors import DomainError, ErrorCode


class InvalidDateError(DomainError):
    """Raised when a game date is missing or not YYYY-MM-DD."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_DATE, message="Invalid or missing date")


class GuestLimitReachedError(DomainError):
    """Raised when an anonymous visitor already registered a guest for the date."""

    def __init__(self, sign_in_url: str) -> None:
        super().__init__(
            code=ErrorCode.GUEST_LIMIT_REACHED,
            message=(
                "You have already signed up one guest for this date. "
                "Create an account to add more."
            ),
        )
        self.redirect = sign_in_url


class CheckInInProgressError(DomainError):
    """Raised when the same visitor already has a write running for the date."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CHECK_IN_IN_PROGRESS,
            message="A sign-up for this date is already in progress",
        )


class DuplicateSignupError(DomainError):
    """Raised by a store when a member is already signed up for the date."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SIGNUP,
            message="You are already checked in for this date",
        )


class SignupStoreError(DomainError):
    """Raised when the signup store cannot complete a read or write."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Failed to sign up. Please try again.",
        )
