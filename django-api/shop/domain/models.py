"""Domain models for the shop: catalogue entries, cart lines and orders.

Orders are never persisted; they exist only long enough to be formatted for
the mail-client hand-off.
"""

from dataclasses import dataclass

from shop.domain.value_objects import Money


@dataclass(frozen=True)
class Product:
    """Domain representation of a catalogue Product."""

    id: str
    sku: str
    title: str
    variant: str
    price: Money
    image: str = ""
    category: str | None = None


@dataclass(frozen=True)
class CartItem:
    """One product and how many of it are in the cart."""

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Cart quantity must be at least 1")

    @property
    def line_total(self) -> Money:
        return self.product.price.times(self.quantity)


@dataclass(frozen=True)
class CustomerInfo:
    """Optional contact details typed in at checkout."""

    name: str = ""
    email: str = ""
    phone: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.email or self.phone)


@dataclass(frozen=True)
class PaymentInstructions:
    """Fixed pickup and e-Transfer details printed on every order."""

    store_email: str
    pickup_location: str
    security_question: str
    security_answer: str


@dataclass(frozen=True)
class OrderLine:
    title: str
    sku: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class Order:
    """A cart snapshot frozen at checkout time."""

    order_id: str
    lines: tuple[OrderLine, ...]
    grand_total: Money
    customer: CustomerInfo = CustomerInfo()


@dataclass(frozen=True)
class PlacedOrder:
    """What the client needs to open the customer's mail client."""

    order_id: str
    subject: str
    body: str
    mailto_url: str
