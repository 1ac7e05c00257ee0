from django.urls import path

from shop.handlers import (
    CartItemDetailView,
    CartItemListView,
    CartView,
    CheckoutView,
    ProductListView,
)

urlpatterns = [
    path("products", ProductListView.as_view(), name="product-list"),
    path("cart", CartView.as_view(), name="cart"),
    path("cart/items", CartItemListView.as_view(), name="cart-item-list"),
    path("cart/items/<str:product_id>", CartItemDetailView.as_view(), name="cart-item-detail"),
    path("checkout", CheckoutView.as_view(), name="checkout"),
]
