"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date
from decimal import Decimal

import pytest

from shop.domain import CartItem, Money
from signups.domain import GameDate, PromptAction
from signups.domain.schedule import day_info, week_dates


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("24.99")).amount == Decimal("24.99")

    def test_money_accepts_zero(self):
        assert Money.zero().amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("5"))) == "5.00"
        assert str(Money(Decimal("24.99")).times(2)) == "49.98"

    def test_money_addition(self):
        assert Money(Decimal("49.98")) + Money(Decimal("49.99")) == Money(Decimal("99.97"))


class TestCartItem:
    def test_rejects_zero_quantity(self, pouch):
        with pytest.raises(ValueError):
            CartItem(product=pouch, quantity=0)

    def test_line_total(self, pouch):
        assert str(CartItem(product=pouch, quantity=3).line_total) == "74.97"


class TestGameDate:
    """Tests for GameDate value object."""

    def test_from_string_valid_date(self):
        assert GameDate.from_string("2025-06-14").value == date(2025, 6, 14)

    @pytest.mark.parametrize("value", ["", "2025-6-14", "14/06/2025", "2025-02-30", "2025-W24-1"])
    def test_from_string_invalid_date(self, value):
        with pytest.raises(ValueError):
            GameDate.from_string(value)

    def test_str_is_iso(self):
        assert str(GameDate(date(2025, 6, 14))) == "2025-06-14"


class TestPromptAction:
    def test_guest_signup_target_carries_date(self):
        assert PromptAction.GUEST_SIGNUP.target(date(2025, 6, 14), "/login") == "/guest-signup?date=2025-06-14"

    def test_sign_in_target(self):
        assert PromptAction.SIGN_IN.target(date(2025, 6, 14), "/login") == "/login"

    def test_dismiss_has_no_target(self):
        assert PromptAction.DISMISS.target(date(2025, 6, 14), "/login") is None


class TestSchedule:
    def test_week_starts_on_monday(self):
        days = week_dates(date(2025, 6, 11))
        assert days[0] == date(2025, 6, 9)
        assert days[-1] == date(2025, 6, 15)
        assert len(days) == 7

    def test_sunday_belongs_to_the_week_before(self):
        assert week_dates(date(2025, 6, 15))[0] == date(2025, 6, 9)

    def test_monday_is_discounted_without_late_pricing(self):
        info = day_info(date(2025, 6, 9))
        assert info.special == "50% OFF"
        assert info.discount_price == "$25"
        assert info.late_pricing is None

    def test_saturday_late_window(self):
        info = day_info(date(2025, 6, 14))
        assert info.hours == "10AM-12AM"
        assert info.late_pricing == "$25 (9PM-12AM)"
