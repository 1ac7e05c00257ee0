from clips.domain.models import Clip, ClipTag, FeedEntry, LikeResult, NewClip, SortOrder

__all__ = [
    "Clip",
    "ClipTag",
    "FeedEntry",
    "LikeResult",
    "NewClip",
    "SortOrder",
]
