"""Unit tests for order assembly.

Run with: pytest tests/test_orders.py -v
"""

from urllib.parse import parse_qs, urlparse

import pytest

from shop.domain import CartItem, CustomerInfo, PaymentInstructions
from shop.domain.orders import (
    build_mailto_uri,
    build_order,
    build_order_body,
    generate_order_id,
)

INSTRUCTIONS = PaymentInstructions(
    store_email="orders@example.com",
    pickup_location="Front desk",
    security_question="Favourite mode?",
    security_answer="speedsoft",
)


@pytest.fixture
def two_line_cart(pouch, grenades) -> list[CartItem]:
    return [CartItem(product=pouch, quantity=2), CartItem(product=grenades, quantity=1)]


class TestGenerateOrderId:
    def test_is_uppercase_alphanumeric(self):
        order_id = generate_order_id()
        assert order_id == order_id.upper()
        assert order_id.isalnum()

    def test_ids_differ(self):
        assert len({generate_order_id() for _ in range(200)}) == 200


class TestBuildOrder:
    def test_line_and_grand_totals(self, two_line_cart):
        order = build_order(two_line_cart, "ABC123", CustomerInfo())
        assert [str(line.line_total) for line in order.lines] == ["49.98", "49.99"]
        assert str(order.grand_total) == "99.97"


class TestBuildOrderBody:
    def test_lists_skus_line_totals_and_grand_total(self, two_line_cart):
        body = build_order_body(two_line_cart, "ABC123", CustomerInfo(), INSTRUCTIONS)
        assert "SKU: MOLLE-PDA-001" in body
        assert "SKU: M67-GRN-001" in body
        assert "Quantity: 2 × $24.99 = $49.98 CAD" in body
        assert "Quantity: 1 × $49.99 = $49.99 CAD" in body
        assert "Subtotal (Grand Total): $99.97 CAD" in body
        assert "Amount: $99.97 CAD" in body

    def test_is_deterministic(self, two_line_cart):
        customer = CustomerInfo(name="Sam", email="sam@example.com")
        first = build_order_body(two_line_cart, "ABC123", customer, INSTRUCTIONS)
        second = build_order_body(two_line_cart, "ABC123", customer, INSTRUCTIONS)
        assert first == second

    def test_customer_block_omitted_when_empty(self, two_line_cart):
        body = build_order_body(two_line_cart, "ABC123", CustomerInfo(), INSTRUCTIONS)
        assert "Customer Information" not in body

    def test_customer_block_lists_only_given_fields(self, two_line_cart):
        body = build_order_body(two_line_cart, "ABC123", CustomerInfo(phone="555-1234"), INSTRUCTIONS)
        assert "Customer Information:\nPhone: 555-1234\n" in body
        assert "Name:" not in body
        assert "Email:" not in body

    def test_ends_with_memo_and_carries_instructions(self, two_line_cart):
        body = build_order_body(two_line_cart, "ABC123", CustomerInfo(), INSTRUCTIONS)
        assert body.endswith("Memo: Order ABC123")
        assert "Please send Interac e-Transfer to: orders@example.com" in body
        assert "Pickup Location: Front desk" in body


class TestMailtoUri:
    def test_round_trips_subject_and_body(self):
        body = "Line one\nTotal: $99.97 CAD & more"
        uri = build_mailto_uri("orders@example.com", "Order ABC123", body)
        parsed = urlparse(uri)
        assert parsed.scheme == "mailto"
        assert parsed.path == "orders@example.com"
        query = parse_qs(parsed.query)
        assert query["subject"] == ["Order ABC123"]
        assert query["body"] == [body]

    def test_spaces_are_percent_encoded(self):
        uri = build_mailto_uri("a@example.com", "Order X", "a b")
        assert "subject=Order%20X" in uri
        assert "body=a%20b" in uri
