"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from common.auth import AuthContext, Identity
from common.storage import MemoryStorage
from shop.domain import Money, Product
from signups.services.checkin_engine import CheckInEngine
from signups.stores.guest_markers import GuestMarkerStore
from signups.stores.inflight import InFlightGuard
from tests.fakes import InMemorySignupStore

TODAY = date(2025, 6, 11)  # a Wednesday


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def member() -> AuthContext:
    return AuthContext(
        identity=Identity(id="u-alice", display_name="Alice", email="alice@example.com"),
        session_key="s-alice",
    )


@pytest.fixture
def anonymous() -> AuthContext:
    return AuthContext.anonymous("s-anon")


@pytest.fixture
def signup_store() -> InMemorySignupStore:
    return InMemorySignupStore()


@pytest.fixture
def session_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def engine(signup_store, session_storage) -> CheckInEngine:
    return CheckInEngine(
        store=signup_store,
        markers=GuestMarkerStore(session_storage),
        guard=InFlightGuard(timeout=10),
        sign_in_url="/api/auth/login/",
        today=lambda: TODAY,
    )


@pytest.fixture
def pouch() -> Product:
    return Product(
        id="molle-pda-mc-cp",
        sku="MOLLE-PDA-001",
        title="MOLLE PDA Phone Panel",
        variant="MC Camo / CP Camo",
        price=Money(Decimal("24.99")),
        category="Pouches",
    )


@pytest.fixture
def grenades() -> Product:
    return Product(
        id="m67-grenade-16",
        sku="M67-GRN-001",
        title="M67 Toy Grenade Set",
        variant="16 Grenades + Airdrop Box",
        price=Money(Decimal("49.99")),
        category="Grenades",
    )
