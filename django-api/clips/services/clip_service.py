"""Clip service - upload validation and lookups.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Iterable
from datetime import date

from clips.domain import Clip, ClipTag, NewClip
from clips.domain.youtube import extract_youtube_id
from clips.stores.interfaces import ClipStore
from common.auth import AuthContext
from common.errors import NotAuthenticatedError, ValidationFailedError

logger = logging.getLogger(__name__)

AUTHOR_FALLBACK_NAME = "Anonymous"


def parse_tags(values: Iterable[str]) -> frozenset[ClipTag]:
    """Map tag strings to ClipTag.

    Raises:
        ValidationFailedError: If a value is not a known tag.
    """
    try:
        return frozenset(ClipTag(value) for value in values)
    except ValueError:
        raise ValidationFailedError("Unknown clip tag", field="tags")


class ClipService:
    """Service for uploading and reading clips."""

    def __init__(self, store: ClipStore, default_avatar: str) -> None:
        self._store = store
        self._default_avatar = default_avatar

    def upload(
        self,
        auth: AuthContext,
        title: str,
        youtube_url: str,
        description: str = "",
        tags: frozenset[ClipTag] = frozenset(),
        game_date: date | None = None,
    ) -> Clip:
        """Validate and store a new clip.

        Raises:
            NotAuthenticatedError: If nobody is signed in.
            ValidationFailedError: If the URL is not YouTube or the title is blank.
        """
        identity = auth.identity
        if identity is None:
            raise NotAuthenticatedError("Please sign in to upload clips")
        video_id = extract_youtube_id(youtube_url)
        if video_id is None:
            raise ValidationFailedError("Please enter a valid YouTube URL", field="youtube_url")
        if not title.strip():
            raise ValidationFailedError("Please enter a title", field="title")

        clip_id = self._store.add(
            NewClip(
                author_id=identity.id,
                author_name=identity.display_name or AUTHOR_FALLBACK_NAME,
                author_avatar=identity.photo_url or self._default_avatar,
                title=title.strip(),
                description=description,
                video_url=youtube_url,
                video_id=video_id,
                tags=tags,
                game_date=game_date,
            )
        )
        logger.info("clip %s uploaded by %s", clip_id, identity.id)
        return self._store.get_clip(clip_id)

    def clips_by_author(self, author_id: str) -> list[Clip]:
        return self._store.list_by_author(author_id)
