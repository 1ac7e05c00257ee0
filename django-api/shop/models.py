"""Django ORM models (persistence layer).

Domain logic lives in domain/; these only describe storage.
"""

from django.db import models


class Product(models.Model):
    """Persistence model for catalogue products."""

    id = models.SlugField(primary_key=True, max_length=100)
    sku = models.CharField(max_length=50, unique=True)
    title = models.CharField(max_length=255)
    variant = models.CharField(max_length=255, blank=True)
    price_cad = models.DecimalField(max_digits=10, decimal_places=2)
    image = models.CharField(max_length=500, blank=True)
    category = models.CharField(max_length=100, blank=True, null=True)

    class Meta:
        ordering = ["title", "variant"]
        indexes = [
            models.Index(fields=["category"]),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.variant})" if self.variant else self.title
