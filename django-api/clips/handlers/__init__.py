from clips.handlers.views import AuthorClipListView, ClipLikeView, ClipListView

__all__ = ["AuthorClipListView", "ClipLikeView", "ClipListView"]
