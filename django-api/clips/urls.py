from django.urls import path

from clips.handlers import AuthorClipListView, ClipLikeView, ClipListView

urlpatterns = [
    path("clips", ClipListView.as_view(), name="clip-list"),
    path("clips/<str:clip_id>/like", ClipLikeView.as_view(), name="clip-like"),
    path("clips/authors/<str:author_id>", AuthorClipListView.as_view(), name="author-clip-list"),
]
