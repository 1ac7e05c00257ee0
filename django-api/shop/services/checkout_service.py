"""Checkout service - turns the cart into an order hand-off.

Services:
- Depend only on interfaces (stores, storage)
- Validate domain invariants
- Return domain models or raise domain errors

Placing an order ends at "mail URI built". Nothing confirms the message is
ever sent, so the cart is cleared as soon as the hand-off exists.
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from common.errors import ValidationFailedError
from common.storage import KeyValueStorage
from shop.domain import CustomerInfo, Order, PaymentInstructions, PlacedOrder
from shop.domain.errors import EmptyCartError
from shop.domain.orders import (
    build_mailto_uri,
    build_order,
    build_order_body,
    generate_order_id,
    order_subject,
)
from shop.services.cart_store import CartStore

logger = logging.getLogger(__name__)

PENDING_ORDER_KEY = "protocol-zero-order-id"


def payment_instructions_from_settings() -> PaymentInstructions:
    shop = settings.SHOP
    return PaymentInstructions(
        store_email=shop["STORE_EMAIL"],
        pickup_location=shop["PICKUP_LOCATION"],
        security_question=shop["SECURITY_QUESTION"],
        security_answer=shop["SECURITY_ANSWER"],
    )


class CheckoutService:
    """Service for previewing and placing orders."""

    def __init__(
        self,
        cart: CartStore,
        storage: KeyValueStorage,
        instructions: PaymentInstructions,
    ) -> None:
        self._cart = cart
        self._storage = storage
        self._instructions = instructions

    def preview(self) -> Order:
        """Return the pending order for the current cart.

        The order id is kept in storage so the placed order carries the id the
        customer was shown.

        Raises:
            EmptyCartError: If the cart is empty.
        """
        cart = self._cart.get()
        if not cart:
            raise EmptyCartError()
        return build_order(cart, self._pending_order_id(), CustomerInfo())

    def place_order(self, customer: CustomerInfo) -> PlacedOrder:
        """Build the mail hand-off for the cart, then clear the cart.

        Raises:
            EmptyCartError: If the cart is empty.
            ValidationFailedError: If a customer email is given but malformed.
        """
        if customer.email:
            try:
                validate_email(customer.email)
            except ValidationError:
                raise ValidationFailedError("Enter a valid email address", field="email")

        cart = self._cart.get()
        if not cart:
            raise EmptyCartError()

        order_id = self._pending_order_id()
        subject = order_subject(order_id)
        body = build_order_body(cart, order_id, customer, self._instructions)
        placed = PlacedOrder(
            order_id=order_id,
            subject=subject,
            body=body,
            mailto_url=build_mailto_uri(self._instructions.store_email, subject, body),
        )

        self._cart.clear()
        self._storage.delete(PENDING_ORDER_KEY)
        logger.info("order %s handed off (%d line(s))", order_id, len(cart))
        return placed

    def _pending_order_id(self) -> str:
        order_id = self._storage.get(PENDING_ORDER_KEY)
        if not isinstance(order_id, str) or not order_id:
            order_id = generate_order_id()
            self._storage.set(PENDING_ORDER_KEY, order_id)
        return order_id
