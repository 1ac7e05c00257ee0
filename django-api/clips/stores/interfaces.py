"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import date

from clips.domain import Clip, ClipTag, LikeResult, NewClip


class ClipStore(ABC):
    """Interface for clip persistence operations."""

    @abstractmethod
    def add(self, clip: NewClip) -> str:
        """Persist a new clip with zeroed counters and return its ID."""
        ...

    @abstractmethod
    def get_clip(self, clip_id: str) -> Clip | None:
        """Return a clip by ID, or None if not found."""
        ...

    @abstractmethod
    def list_clips(self, tags: Collection[ClipTag] | None = None) -> list[Clip]:
        """Return clips newest first, keeping only those sharing a tag with tags."""
        ...

    @abstractmethod
    def list_by_date(self, day: date) -> list[Clip]:
        """Return clips filmed on day, newest first."""
        ...

    @abstractmethod
    def list_by_author(self, author_id: str) -> list[Clip]:
        """Return an author's clips, newest first."""
        ...

    @abstractmethod
    def toggle_like(self, clip_id: str, identity_id: str) -> LikeResult:
        """Like the clip for identity_id, or unlike it if already liked.

        Raises:
            ClipNotFoundError: If the clip does not exist.
            ClipStoreError: If the write fails.
        """
        ...
