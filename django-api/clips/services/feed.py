"""Clip feed controller.

Keeps a local copy of the feed for one viewer. Like toggles are applied
optimistically and marked pending; if the store refuses, the local copy is
thrown away and refetched instead of being patched back by hand.
"""

import logging
from collections.abc import Collection
from dataclasses import replace
from datetime import date

from clips.domain import ClipTag, FeedEntry, SortOrder
from clips.domain.errors import ClipNotFoundError
from clips.stores.interfaces import ClipStore
from common.errors import DomainError, NotAuthenticatedError

logger = logging.getLogger(__name__)


class ClipFeed:
    def __init__(self, store: ClipStore, viewer_id: str | None = None) -> None:
        self._store = store
        self._viewer_id = viewer_id
        self._entries: list[FeedEntry] = []

    @property
    def entries(self) -> list[FeedEntry]:
        return list(self._entries)

    def load(self) -> list[FeedEntry]:
        """Replace the local copy with the store's authoritative list."""
        self._entries = [
            FeedEntry(clip=clip, is_liked=self._viewer_id is not None and self._viewer_id in clip.liked_by)
            for clip in self._store.list_clips()
        ]
        return self.entries

    def invalidate(self) -> None:
        self._entries = []

    def visible(
        self,
        tags: Collection[ClipTag] = (),
        sort: SortOrder = SortOrder.NEWEST,
        game_date: date | None = None,
    ) -> list[FeedEntry]:
        """Filter by date and tags, then sort. Ties keep their loaded order."""
        entries = self._entries
        if game_date is not None:
            entries = [entry for entry in entries if entry.clip.game_date == game_date]
        if tags:
            wanted = frozenset(tags)
            entries = [entry for entry in entries if entry.clip.tags & wanted]
        if sort is SortOrder.POPULAR:
            return sorted(entries, key=lambda entry: entry.clip.like_count, reverse=True)
        return sorted(entries, key=lambda entry: entry.clip.created_at, reverse=True)

    def toggle_like(self, clip_id: str) -> FeedEntry:
        """Flip the viewer's like on a clip.

        Raises:
            NotAuthenticatedError: If the feed has no viewer.
            ClipNotFoundError: If the clip no longer exists.
            ClipStoreError: If the store write fails.
        """
        if self._viewer_id is None:
            raise NotAuthenticatedError("Please sign in to like clips")
        index = self._index_of(clip_id)
        if index is None:
            raise ClipNotFoundError(clip_id)

        optimistic = self._entries[index].flipped()
        self._entries[index] = optimistic
        try:
            result = self._store.toggle_like(clip_id, self._viewer_id)
        except DomainError:
            logger.warning("like toggle on %s failed; reloading feed", clip_id)
            self.invalidate()
            self.load()
            raise

        clip = self._store.get_clip(clip_id) or replace(optimistic.clip, like_count=result.new_count)
        settled = FeedEntry(clip=clip, is_liked=result.liked, pending=False)
        self._entries[index] = settled
        return settled

    def _index_of(self, clip_id: str) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.clip.id == clip_id:
                return index
        return None
