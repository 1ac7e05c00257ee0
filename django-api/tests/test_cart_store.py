"""Unit tests for the persistent cart.

Run with: pytest tests/test_cart_store.py -v
"""

from decimal import Decimal

import pytest

from common.storage import MemoryStorage, NullStorage
from shop.services.cart_store import CART_KEY, CartStore
from shop.signals import cart_updated


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def cart(storage) -> CartStore:
    return CartStore(storage)


@pytest.fixture
def notifications():
    received = []

    def listener(sender, items, **kwargs):
        received.append(items)

    cart_updated.connect(listener)
    yield received
    cart_updated.disconnect(listener)


class TestCartStore:
    def test_empty_when_nothing_persisted(self, cart):
        assert cart.get() == []

    def test_add_merges_quantities_for_same_product(self, cart, pouch):
        cart.add(pouch)
        cart.add(pouch, 2)
        items = cart.get()
        assert len(items) == 1
        assert items[0].quantity == 3

    def test_add_keeps_insertion_order(self, cart, pouch, grenades):
        cart.add(pouch)
        cart.add(grenades)
        assert [item.product.id for item in cart.get()] == [pouch.id, grenades.id]

    def test_set_quantity_overwrites(self, cart, pouch):
        cart.add(pouch, 5)
        cart.set_quantity(pouch.id, 2)
        assert cart.get()[0].quantity == 2

    def test_set_quantity_zero_removes(self, cart, pouch, grenades):
        cart.add(pouch)
        cart.add(grenades)
        cart.set_quantity(pouch.id, 0)
        assert [item.product.id for item in cart.get()] == [grenades.id]

    def test_remove_missing_is_noop(self, cart, pouch):
        cart.add(pouch)
        cart.remove("nope")
        assert len(cart.get()) == 1

    def test_clear(self, cart, pouch, grenades):
        cart.add(pouch)
        cart.add(grenades)
        cart.clear()
        assert cart.get() == []

    def test_survives_a_new_store_instance(self, storage, pouch):
        CartStore(storage).add(pouch, 2)
        assert CartStore(storage).get()[0].quantity == 2

    def test_item_count_and_no_duplicate_ids_after_mixed_operations(self, cart, pouch, grenades):
        cart.add(pouch, 2)
        cart.add(grenades)
        cart.add(pouch)
        cart.set_quantity(grenades.id, 4)
        cart.remove("unknown")
        items = cart.get()
        assert CartStore.item_count(items) == sum(item.quantity for item in items) == 7
        assert len({item.product.id for item in items}) == len(items)

    def test_total_grows_by_price_times_quantity(self, cart, pouch, grenades):
        cart.add(pouch, 2)
        before = CartStore.total(cart.get()).amount
        cart.add(grenades, 3)
        after = CartStore.total(cart.get()).amount
        assert after - before == Decimal("49.99") * 3

    def test_two_line_cart_totals(self, cart, pouch, grenades):
        cart.add(pouch, 2)
        cart.add(grenades, 1)
        items = cart.get()
        assert str(CartStore.total(items)) == "99.97"
        assert CartStore.item_count(items) == 3


class TestCartLoader:
    """Stored carts from older versions must never break the loader."""

    @pytest.mark.parametrize("stored", ["garbage", {"items": []}, 42, None])
    def test_non_list_payload_is_empty(self, stored):
        assert CartStore(MemoryStorage({CART_KEY: stored})).get() == []

    def test_malformed_entries_are_dropped(self, pouch):
        storage = MemoryStorage()
        CartStore(storage).add(pouch)
        storage.set(CART_KEY, storage.get(CART_KEY) + [{"product": {"id": "x"}}, "junk", {"quantity": 1}])
        items = CartStore(storage).get()
        assert [item.product.id for item in items] == [pouch.id]

    def test_bad_price_drops_entry(self):
        storage = MemoryStorage(
            {
                CART_KEY: [
                    {
                        "product": {"id": "a", "sku": "A", "title": "A", "price_cad": "abc"},
                        "quantity": 1,
                    }
                ]
            }
        )
        assert CartStore(storage).get() == []

    def test_unavailable_storage_reads_empty(self, pouch):
        cart = CartStore(NullStorage())
        cart.add(pouch)
        assert cart.get() == []


class TestCartNotifications:
    def test_every_mutation_notifies(self, cart, pouch, notifications):
        cart.add(pouch)
        cart.set_quantity(pouch.id, 3)
        cart.remove(pouch.id)
        cart.clear()
        assert len(notifications) == 4

    def test_notification_carries_new_items(self, cart, pouch, notifications):
        cart.add(pouch, 2)
        assert notifications[-1][0].quantity == 2

    def test_fans_out_to_every_listener(self, cart, pouch, notifications):
        extra = []

        def second(sender, items, **kwargs):
            extra.append(items)

        cart_updated.connect(second)
        try:
            cart.add(pouch)
        finally:
            cart_updated.disconnect(second)
        assert len(notifications) == 1
        assert len(extra) == 1
