"""Order assembly: cart totals and the text handed to the mail client.

Everything here is pure. The caller is responsible for refusing checkout on an
empty cart; build_order_body will happily format one.
"""

import secrets
import string
import time
from collections.abc import Iterable, Sequence
from urllib.parse import quote

from shop.domain.models import CartItem, CustomerInfo, Order, OrderLine, PaymentInstructions
from shop.domain.value_objects import Money

BASE36 = string.digits + string.ascii_lowercase
ORDER_SUFFIX_LENGTH = 5

# encodeURIComponent leaves these unescaped
MAILTO_SAFE = "!*'()"


def cart_total(cart: Iterable[CartItem]) -> Money:
    """Sum of price × quantity over all items."""
    total = Money.zero()
    for item in cart:
        total = total + item.line_total
    return total


def cart_item_count(cart: Iterable[CartItem]) -> int:
    """Sum of quantities over all items."""
    return sum(item.quantity for item in cart)


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36[remainder])
    return "".join(reversed(digits))


def generate_order_id() -> str:
    """Short, typable order token: base-36 millisecond clock + random suffix."""
    timestamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(BASE36) for _ in range(ORDER_SUFFIX_LENGTH))
    return f"{timestamp}{suffix}".upper()


def build_order(cart: Sequence[CartItem], order_id: str, customer: CustomerInfo) -> Order:
    lines = tuple(
        OrderLine(
            title=item.product.title,
            sku=item.product.sku,
            quantity=item.quantity,
            unit_price=item.product.price,
            line_total=item.line_total,
        )
        for item in cart
    )
    return Order(
        order_id=order_id,
        lines=lines,
        grand_total=cart_total(cart),
        customer=customer,
    )


def build_order_body(
    cart: Sequence[CartItem],
    order_id: str,
    customer: CustomerInfo,
    instructions: PaymentInstructions,
) -> str:
    """Human-readable order text. Same inputs always give the same text."""
    order = build_order(cart, order_id, customer)
    parts = ["Order Details:\n\n"]
    for line in order.lines:
        parts.append(f"{line.title}\n")
        parts.append(f"SKU: {line.sku}\n")
        parts.append(
            f"Quantity: {line.quantity} × ${line.unit_price} = ${line.line_total} CAD\n\n"
        )
    parts.append("---\n")
    parts.append(f"Subtotal (Grand Total): ${order.grand_total} CAD\n\n")

    if not customer.is_empty:
        parts.append("Customer Information:\n")
        if customer.name:
            parts.append(f"Name: {customer.name}\n")
        if customer.email:
            parts.append(f"Email: {customer.email}\n")
        if customer.phone:
            parts.append(f"Phone: {customer.phone}\n")
        parts.append("\n")

    parts.append(f"Pickup Location: {instructions.pickup_location}\n\n")
    parts.append("Payment Instructions:\n")
    parts.append(f"Please send Interac e-Transfer to: {instructions.store_email}\n")
    parts.append(f"Security Question: {instructions.security_question}\n")
    parts.append(f"Answer: {instructions.security_answer}\n")
    parts.append(f"Amount: ${order.grand_total} CAD\n")
    parts.append(f"Memo: Order {order_id}")
    return "".join(parts)


def order_subject(order_id: str) -> str:
    return f"Order {order_id}"


def build_mailto_uri(recipient: str, subject: str, body: str) -> str:
    return (
        f"mailto:{recipient}"
        f"?subject={quote(subject, safe=MAILTO_SAFE)}"
        f"&body={quote(body, safe=MAILTO_SAFE)}"
    )
