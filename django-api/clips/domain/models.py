"""Domain models for the clips feed.

Django ORM models are in clips/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum


class ClipTag(Enum):
    SPEEDSOFT = "speedsoft"
    MILSIM = "milsim"
    MULTIKILL = "multikill"
    FUNNY = "funny"
    TUTORIAL = "tutorial"
    GEAR_REVIEW = "gear-review"


class SortOrder(Enum):
    NEWEST = "newest"
    POPULAR = "popular"


@dataclass(frozen=True)
class NewClip:
    """Upload payload; counters are initialised by the store."""

    author_id: str
    author_name: str
    author_avatar: str
    title: str
    description: str
    video_url: str
    video_id: str
    tags: frozenset[ClipTag] = frozenset()
    game_date: date | None = None


@dataclass(frozen=True)
class Clip:
    """Domain representation of a Clip.

    like_count always equals len(liked_by) once a toggle completes.
    """

    id: str
    author_id: str
    author_name: str
    author_avatar: str
    title: str
    description: str
    video_url: str
    video_id: str
    tags: frozenset[ClipTag]
    like_count: int
    liked_by: frozenset[str]
    comment_count: int
    created_at: datetime
    game_date: date | None = None


@dataclass(frozen=True)
class LikeResult:
    liked: bool
    new_count: int


@dataclass(frozen=True)
class FeedEntry:
    """A clip as one viewer sees it.

    pending is set while an optimistic like toggle awaits the store.
    """

    clip: Clip
    is_liked: bool = False
    pending: bool = False

    def flipped(self) -> "FeedEntry":
        delta = -1 if self.is_liked else 1
        clip = replace(self.clip, like_count=max(self.clip.like_count + delta, 0))
        return FeedEntry(clip=clip, is_liked=not self.is_liked, pending=True)
