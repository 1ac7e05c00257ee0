"""HTTP handlers (views) for the clips feed.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from clips.domain import FeedEntry, SortOrder
from clips.handlers.serializers import (
    ClipUploadSerializer,
    FeedEntrySerializer,
    FeedQuerySerializer,
)
from clips.services.clip_service import ClipService, parse_tags
from clips.services.feed import ClipFeed
from clips.stores import get_clip_store
from common.auth import AuthContext


def feed_for(auth: AuthContext) -> ClipFeed:
    viewer_id = auth.identity.id if auth.identity else None
    return ClipFeed(get_clip_store(), viewer_id=viewer_id)


class ClipListView(APIView):
    """Handler for GET and POST /api/clips"""

    def get(self, request: Request) -> Response:
        query = FeedQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        raw_tags = [value for value in query.validated_data["tags"].split(",") if value]
        feed = feed_for(AuthContext.from_request(request))
        feed.load()
        entries = feed.visible(
            tags=parse_tags(raw_tags),
            sort=SortOrder(query.validated_data["sort"]),
            game_date=query.validated_data["date"],
        )
        return Response(FeedEntrySerializer(entries, many=True).data)

    def post(self, request: Request) -> Response:
        payload = ClipUploadSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        auth = AuthContext.from_request(request)
        service = ClipService(get_clip_store(), settings.CLIPS["DEFAULT_AVATAR"])
        clip = service.upload(
            auth,
            title=data["title"],
            youtube_url=data["youtube_url"],
            description=data["description"],
            tags=parse_tags(data["tags"]),
            game_date=data["date"],
        )
        return Response(FeedEntrySerializer(FeedEntry(clip=clip)).data, status=status.HTTP_201_CREATED)


class ClipLikeView(APIView):
    """Handler for POST /api/clips/{clip_id}/like"""

    def post(self, request: Request, clip_id: str) -> Response:
        feed = feed_for(AuthContext.from_request(request))
        feed.load()
        entry = feed.toggle_like(clip_id)
        return Response(FeedEntrySerializer(entry).data)


class AuthorClipListView(APIView):
    """Handler for GET /api/clips/authors/{author_id}"""

    def get(self, request: Request, author_id: str) -> Response:
        auth = AuthContext.from_request(request)
        viewer_id = auth.identity.id if auth.identity else None
        service = ClipService(get_clip_store(), settings.CLIPS["DEFAULT_AVATAR"])
        entries = [
            FeedEntry(clip=clip, is_liked=viewer_id is not None and viewer_id in clip.liked_by)
            for clip in service.clips_by_author(author_id)
        ]
        return Response(FeedEntrySerializer(entries, many=True).data)
