from shop.handlers.views import (
    CartItemDetailView,
    CartItemListView,
    CartView,
    CheckoutView,
    ProductListView,
)

__all__ = [
    "CartItemDetailView",
    "CartItemListView",
    "CartView",
    "CheckoutView",
    "ProductListView",
]
