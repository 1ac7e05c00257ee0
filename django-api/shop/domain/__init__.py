from shop.domain.models import (
    CartItem,
    CustomerInfo,
    Order,
    OrderLine,
    PaymentInstructions,
    PlacedOrder,
    Product,
)
from shop.domain.value_objects import Money

__all__ = [
    "CartItem",
    "CustomerInfo",
    "Order",
    "OrderLine",
    "PaymentInstructions",
    "PlacedOrder",
    "Product",
    "Money",
]
