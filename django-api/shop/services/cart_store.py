"""Persistent cart kept in the visitor's key/value storage.

The cart is a list of product snapshots and quantities stored under a fixed
key. Reads never fail: anything that does not parse is treated as an empty
cart (or a dropped line), so carts written by older versions cannot break the
loader.
"""

import logging
from decimal import InvalidOperation
from typing import Any

from common.storage import KeyValueStorage
from shop.domain import CartItem, Money, Product
from shop.domain.orders import cart_item_count, cart_total
from shop.signals import cart_updated

logger = logging.getLogger(__name__)

CART_KEY = "protocol-zero-cart"


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "sku": product.sku,
        "title": product.title,
        "variant": product.variant,
        "price_cad": str(product.price.amount),
        "image": product.image,
        "category": product.category,
    }


def product_from_dict(data: dict[str, Any]) -> Product:
    return Product(
        id=str(data["id"]),
        sku=str(data["sku"]),
        title=str(data["title"]),
        variant=str(data.get("variant", "")),
        price=Money.from_string(str(data["price_cad"])),
        image=str(data.get("image") or ""),
        category=data.get("category"),
    )


def _parse_item(entry: Any) -> CartItem | None:
    try:
        return CartItem(product=product_from_dict(entry["product"]), quantity=int(entry["quantity"]))
    except (KeyError, TypeError, ValueError, InvalidOperation):
        return None


class CartStore:
    """Cart operations over one browsing context's storage."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def get(self) -> list[CartItem]:
        """Return the persisted cart, or an empty list if none can be read."""
        raw = self._storage.get(CART_KEY)
        if not isinstance(raw, list):
            return []
        items: list[CartItem] = []
        seen: set[str] = set()
        for entry in raw:
            item = _parse_item(entry)
            if item is None:
                logger.debug("dropping unreadable cart entry")
                continue
            if item.product.id in seen:
                continue
            seen.add(item.product.id)
            items.append(item)
        return items

    def add(self, product: Product, quantity: int = 1) -> list[CartItem]:
        """Add quantity of product, merging with an existing line."""
        cart = self.get()
        for index, item in enumerate(cart):
            if item.product.id == product.id:
                cart[index] = CartItem(product=item.product, quantity=item.quantity + quantity)
                break
        else:
            cart.append(CartItem(product=product, quantity=quantity))
        return self._save(cart)

    def set_quantity(self, product_id: str, quantity: int) -> list[CartItem]:
        """Overwrite a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            return self.remove(product_id)
        cart = [
            CartItem(product=item.product, quantity=quantity)
            if item.product.id == product_id
            else item
            for item in self.get()
        ]
        return self._save(cart)

    def remove(self, product_id: str) -> list[CartItem]:
        cart = [item for item in self.get() if item.product.id != product_id]
        return self._save(cart)

    def clear(self) -> list[CartItem]:
        self._storage.delete(CART_KEY)
        return self._notify([])

    @staticmethod
    def total(cart: list[CartItem]) -> Money:
        return cart_total(cart)

    @staticmethod
    def item_count(cart: list[CartItem]) -> int:
        return cart_item_count(cart)

    def _save(self, cart: list[CartItem]) -> list[CartItem]:
        self._storage.set(
            CART_KEY,
            [{"product": product_to_dict(item.product), "quantity": item.quantity} for item in cart],
        )
        return self._notify(cart)

    def _notify(self, cart: list[CartItem]) -> list[CartItem]:
        cart_updated.send(sender=self.__class__, store=self, items=tuple(cart))
        return cart
