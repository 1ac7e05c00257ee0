"""Domain errors for clips."""

from common.errors import DomainError, ErrorCode


class ClipNotFoundError(DomainError):
    """Raised when a clip is not found."""

    def __init__(self, clip_id: str) -> None:
        super().__init__(code=ErrorCode.CLIP_NOT_FOUND, message="Clip not found")
        self.clip_id = clip_id


class ClipStoreError(DomainError):
    """Raised when the clip store cannot complete a read or write."""

    def __init__(self, message: str = "Failed to update clips. Please try again.") -> None:
        super().__init__(code=ErrorCode.STORE_UNAVAILABLE, message=message)
