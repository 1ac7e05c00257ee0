"""Django ORM implementation of the ProductStore."""

from shop import models
from shop.domain import Money, Product
from shop.stores.interfaces import ProductStore


def to_domain(row: models.Product) -> Product:
    return Product(
        id=row.id,
        sku=row.sku,
        title=row.title,
        variant=row.variant,
        price=Money(amount=row.price_cad),
        image=row.image,
        category=row.category,
    )


class DjangoProductStore(ProductStore):
    """Catalogue backed by the products table."""

    def list_products(self, category: str | None = None) -> list[Product]:
        rows = models.Product.objects.all()
        if category:
            rows = rows.filter(category=category)
        return [to_domain(row) for row in rows]

    def get_product(self, product_id: str) -> Product | None:
        row = models.Product.objects.filter(pk=product_id).first()
        return to_domain(row) if row is not None else None
