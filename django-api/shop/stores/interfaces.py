"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from shop.domain import Product


class ProductStore(ABC):
    """Interface for read-only catalogue lookups."""

    @abstractmethod
    def list_products(self, category: str | None = None) -> list[Product]:
        """Return products, optionally only those in category."""
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by ID, or None if not found."""
        ...
