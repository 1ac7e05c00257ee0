"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Signup(models.Model):
    """Persistence model for game-day signups (members and guests)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    person_id = models.CharField(max_length=64, blank=True, null=True)
    display_name = models.CharField(max_length=255)
    email = models.EmailField(blank=True, null=True)
    is_guest = models.BooleanField(default=False)
    sponsor_id = models.CharField(max_length=64, blank=True, null=True)
    sponsor_name = models.CharField(max_length=255, blank=True, null=True)
    sponsor_email = models.EmailField(blank=True, null=True)
    date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date", "created_at"]
        indexes = [
            models.Index(fields=["date"]),
            models.Index(fields=["person_id", "date"]),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["person_id", "date"],
                condition=models.Q(is_guest=False),
                name="unique_member_signup_per_date",
            ),
        ]

    def __str__(self) -> str:
        kind = "guest" if self.is_guest else "member"
        return f"{self.display_name} ({kind}) - {self.date}"
