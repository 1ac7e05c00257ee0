"""Tests for the clip feed controller (optimistic likes, filters, sorting).

Run with: pytest tests/test_clip_feed.py -v
"""

from datetime import date

import pytest

from clips.domain import ClipTag, SortOrder
from clips.domain.errors import ClipNotFoundError, ClipStoreError
from clips.services.feed import ClipFeed
from common.errors import NotAuthenticatedError
from tests.fakes import InMemoryClipStore, new_clip

GAME_DAY = date(2025, 6, 13)


@pytest.fixture
def clip_store() -> InMemoryClipStore:
    return InMemoryClipStore()


@pytest.fixture
def clip_ids(clip_store) -> list[str]:
    """Three clips, oldest first."""
    return [
        clip_store.add(new_clip("Flank", frozenset({ClipTag.SPEEDSOFT}), GAME_DAY)),
        clip_store.add(new_clip("Ambush", frozenset({ClipTag.MILSIM, ClipTag.FUNNY}))),
        clip_store.add(new_clip("Reload drill", frozenset({ClipTag.TUTORIAL}), GAME_DAY)),
    ]


@pytest.fixture
def feed(clip_store, clip_ids) -> ClipFeed:
    feed = ClipFeed(clip_store, viewer_id="u-bob")
    feed.load()
    return feed


def titles(entries) -> list[str]:
    return [entry.clip.title for entry in entries]


class TestVisible:
    def test_newest_first(self, feed):
        assert titles(feed.visible()) == ["Reload drill", "Ambush", "Flank"]

    def test_tags_match_any(self, feed):
        tags = {ClipTag.SPEEDSOFT, ClipTag.FUNNY}
        assert titles(feed.visible(tags=tags)) == ["Ambush", "Flank"]

    def test_game_date_filter(self, feed):
        assert titles(feed.visible(game_date=GAME_DAY)) == ["Reload drill", "Flank"]

    def test_popular_ties_keep_loaded_order(self, feed, clip_ids):
        feed.toggle_like(clip_ids[0])
        assert titles(feed.visible(sort=SortOrder.POPULAR)) == ["Flank", "Reload drill", "Ambush"]

    def test_is_liked_reflects_viewer(self, clip_store, clip_ids):
        clip_store.toggle_like(clip_ids[1], "u-bob")
        entries = ClipFeed(clip_store, viewer_id="u-bob").load()
        assert [entry.is_liked for entry in entries] == [False, True, False]
        assert not any(entry.is_liked for entry in ClipFeed(clip_store).load())


class TestToggleLike:
    def test_entry_is_pending_while_store_is_called(self, feed, clip_store, clip_ids, monkeypatch):
        seen = []
        toggle = clip_store.toggle_like

        def spy(clip_id, identity_id):
            [entry] = [entry for entry in feed.entries if entry.clip.id == clip_id]
            seen.append((entry.is_liked, entry.pending, entry.clip.like_count))
            return toggle(clip_id, identity_id)

        monkeypatch.setattr(clip_store, "toggle_like", spy)
        feed.toggle_like(clip_ids[0])
        assert seen == [(True, True, 1)]

    def test_settles_to_store_result(self, feed, clip_ids):
        entry = feed.toggle_like(clip_ids[0])
        assert entry.is_liked is True
        assert entry.pending is False
        assert entry.clip.like_count == 1
        assert entry.clip.liked_by == frozenset({"u-bob"})

    def test_second_toggle_restores_original(self, feed, clip_ids):
        feed.toggle_like(clip_ids[0])
        entry = feed.toggle_like(clip_ids[0])
        assert entry.is_liked is False
        assert entry.clip.like_count == 0
        assert entry.clip.liked_by == frozenset()

    def test_failure_reloads_authoritative_state(self, feed, clip_store, clip_ids):
        clip_store.fail_toggles = True
        with pytest.raises(ClipStoreError):
            feed.toggle_like(clip_ids[0])
        [entry] = [entry for entry in feed.entries if entry.clip.id == clip_ids[0]]
        assert entry.is_liked is False
        assert entry.pending is False
        assert entry.clip.like_count == 0
        assert len(feed.entries) == 3

    def test_anonymous_viewer_cannot_like(self, clip_store, clip_ids):
        feed = ClipFeed(clip_store)
        feed.load()
        with pytest.raises(NotAuthenticatedError):
            feed.toggle_like(clip_ids[0])
        assert clip_store.toggle_calls == 0

    def test_unknown_clip(self, feed, clip_store):
        with pytest.raises(ClipNotFoundError):
            feed.toggle_like("missing")
        assert clip_store.toggle_calls == 0
