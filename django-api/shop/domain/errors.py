"""Domain errors for the shop."""

from common.errors import DomainError, ErrorCode


class EmptyCartError(DomainError):
    """Raised when checkout is attempted with nothing in the cart."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EMPTY_CART, message="Your cart is empty")
        self.redirect = "/"


class ProductNotFoundError(DomainError):
    """Raised when a product is not in the catalogue."""

    def __init__(self, product_id: str) -> None:
        super().__init__(code=ErrorCode.PRODUCT_NOT_FOUND, message="Product not found")
        self.product_id = product_id
