"""Django ORM implementation of the ClipStore."""

import logging
import uuid
from collections.abc import Collection
from datetime import date

from django.db import DatabaseError

from clips import models
from clips.domain import Clip, ClipTag, LikeResult, NewClip
from clips.domain.errors import ClipNotFoundError, ClipStoreError
from clips.stores.interfaces import ClipStore

logger = logging.getLogger(__name__)


def _tags(values: list) -> frozenset[ClipTag]:
    known = {tag.value: tag for tag in ClipTag}
    return frozenset(known[value] for value in values if value in known)


def to_domain(row: models.Clip) -> Clip:
    return Clip(
        id=str(row.id),
        author_id=row.author_id,
        author_name=row.author_name,
        author_avatar=row.author_avatar,
        title=row.title,
        description=row.description,
        video_url=row.video_url,
        video_id=row.video_id,
        tags=_tags(row.tags or []),
        like_count=row.like_count,
        liked_by=frozenset(row.liked_by or []),
        comment_count=row.comment_count,
        created_at=row.created_at,
        game_date=row.game_date,
    )


class DjangoClipStore(ClipStore):
    """Clip store backed by the clips table."""

    def add(self, clip: NewClip) -> str:
        try:
            row = models.Clip.objects.create(
                author_id=clip.author_id,
                author_name=clip.author_name,
                author_avatar=clip.author_avatar,
                title=clip.title,
                description=clip.description,
                video_url=clip.video_url,
                video_id=clip.video_id,
                tags=sorted(tag.value for tag in clip.tags),
                game_date=clip.game_date,
            )
        except DatabaseError as exc:
            logger.exception("clip insert failed")
            raise ClipStoreError("Failed to upload clip. Please try again.") from exc
        return str(row.id)

    def get_clip(self, clip_id: str) -> Clip | None:
        row = self._row(clip_id)
        return to_domain(row) if row is not None else None

    def list_clips(self, tags: Collection[ClipTag] | None = None) -> list[Clip]:
        clips = self._fetch(models.Clip.objects.order_by("-created_at"))
        if tags:
            wanted = frozenset(tags)
            clips = [clip for clip in clips if clip.tags & wanted]
        return clips

    def list_by_date(self, day: date) -> list[Clip]:
        return self._fetch(models.Clip.objects.filter(game_date=day).order_by("-created_at"))

    def list_by_author(self, author_id: str) -> list[Clip]:
        return self._fetch(models.Clip.objects.filter(author_id=author_id).order_by("-created_at"))

    def toggle_like(self, clip_id: str, identity_id: str) -> LikeResult:
        # Read-modify-write without a lock: two concurrent toggles by the
        # same identity can both read the old list.
        row = self._row(clip_id)
        if row is None:
            raise ClipNotFoundError(clip_id)
        liked_by = list(row.liked_by or [])
        if identity_id in liked_by:
            liked_by.remove(identity_id)
            liked = False
        else:
            liked_by.append(identity_id)
            liked = True
        row.liked_by = liked_by
        row.like_count = len(liked_by)
        try:
            row.save(update_fields=["liked_by", "like_count"])
        except DatabaseError as exc:
            raise ClipStoreError() from exc
        return LikeResult(liked=liked, new_count=row.like_count)

    def _row(self, clip_id: str) -> models.Clip | None:
        try:
            pk = uuid.UUID(str(clip_id))
        except ValueError:
            return None
        try:
            return models.Clip.objects.filter(pk=pk).first()
        except DatabaseError as exc:
            raise ClipStoreError() from exc

    def _fetch(self, rows) -> list[Clip]:
        try:
            return [to_domain(row) for row in rows]
        except DatabaseError as exc:
            raise ClipStoreError("Failed to load clips") from exc
