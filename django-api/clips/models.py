"""Django ORM models (persistence layer).

Clips are stored document-style: tags and likers are JSON lists on the row.
"""

import uuid

from django.db import models


class Clip(models.Model):
    """Persistence model for user-submitted video clips."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    author_id = models.CharField(max_length=64)
    author_name = models.CharField(max_length=255)
    author_avatar = models.CharField(max_length=500, blank=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    video_url = models.URLField(max_length=500)
    video_id = models.CharField(max_length=32)
    tags = models.JSONField(default=list, blank=True)
    like_count = models.PositiveIntegerField(default=0)
    liked_by = models.JSONField(default=list, blank=True)
    comment_count = models.PositiveIntegerField(default=0)
    game_date = models.DateField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"]),
            models.Index(fields=["game_date"]),
            models.Index(fields=["author_id"]),
        ]

    def __str__(self) -> str:
        return self.title
