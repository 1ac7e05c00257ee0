"""Serializers for transforming clip domain models to API responses."""

from rest_framework import serializers

from clips.domain import ClipTag, SortOrder


class FeedEntrySerializer(serializers.Serializer):
    """Serializer for a FeedEntry (a Clip plus the viewer's like state)."""

    id = serializers.CharField(source="clip.id")
    author_id = serializers.CharField(source="clip.author_id")
    author_name = serializers.CharField(source="clip.author_name")
    author_avatar = serializers.CharField(source="clip.author_avatar")
    title = serializers.CharField(source="clip.title")
    description = serializers.CharField(source="clip.description")
    video_url = serializers.CharField(source="clip.video_url")
    video_id = serializers.CharField(source="clip.video_id")
    tags = serializers.SerializerMethodField()
    like_count = serializers.IntegerField(source="clip.like_count")
    comment_count = serializers.IntegerField(source="clip.comment_count")
    created_at = serializers.DateTimeField(source="clip.created_at")
    game_date = serializers.DateField(source="clip.game_date", allow_null=True)
    is_liked = serializers.BooleanField()
    pending = serializers.BooleanField()

    def get_tags(self, entry) -> list[str]:
        return sorted(tag.value for tag in entry.clip.tags)


# Input


class FeedQuerySerializer(serializers.Serializer):
    tags = serializers.CharField(required=False, allow_blank=True, default="")
    sort = serializers.ChoiceField(
        choices=[order.value for order in SortOrder], default=SortOrder.NEWEST.value
    )
    date = serializers.DateField(required=False, allow_null=True, default=None)


class ClipUploadSerializer(serializers.Serializer):
    title = serializers.CharField(allow_blank=True, trim_whitespace=True)
    youtube_url = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    tags = serializers.ListField(
        child=serializers.ChoiceField(choices=[tag.value for tag in ClipTag]),
        required=False,
        default=list,
    )
    date = serializers.DateField(required=False, allow_null=True, default=None)
