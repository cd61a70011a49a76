"""
Pytest configuration and shared fixtures.
"""

import uuid
from decimal import Decimal

import pytest

from allocations.infrastructure.repositories.django_assignment_ledger import (
    DjangoAssignmentLedger,
)
from core.domain.value_objects import Tier
from core.infrastructure.event_handlers import register_event_handlers
from core.infrastructure.events import event_bus
from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry
from orders.domain.order import Order
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository

ADMIN_KEY = "test-admin-key"
PAYMENTS_KEY = "test-payments-key"


@pytest.fixture
def deduplicator():
    """Fixture for Deduplicator."""
    return DjangoDeduplicator()


@pytest.fixture
def pool_registry(deduplicator):
    """Fixture for PoolRegistry."""
    return DjangoPoolRegistry(deduplicator)


@pytest.fixture
def assignment_ledger(pool_registry):
    """Fixture for AssignmentLedger."""
    return DjangoAssignmentLedger(pool_registry)


@pytest.fixture
def order_repository():
    """Fixture for OrderRepository."""
    return DjangoOrderRepository()


@pytest.fixture(autouse=True)
def default_event_handlers():
    """Keep exactly the production subscriptions on the event bus."""
    event_bus.clear()
    register_event_handlers()
    yield
    event_bus.clear()
    register_event_handlers()


@pytest.fixture
def make_order():
    """Factory for unsaved Order entities."""

    def _make(tier=Tier.SEVEN_DAYS, user_id="user-1", product_type="vpn"):
        return Order.create(
            user_id=user_id,
            product_type=product_type,
            tier=tier,
            amount=Decimal("9.99"),
            currency="usd",
            payment_method="card",
        )

    return _make


@pytest.fixture
def unique_key():
    """Factory for key values that never collide across tests."""

    def _make(prefix="KEY"):
        return f"{prefix}-{uuid.uuid4().hex[:12].upper()}"

    return _make


@pytest.fixture
def api_client():
    """Fixture for API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_headers():
    """Headers accepted by the admin API."""
    return {"HTTP_X_ADMIN_KEY": ADMIN_KEY}


@pytest.fixture
def payments_headers():
    """Headers accepted by the payment events endpoint."""
    return {"HTTP_X_PAYMENTS_KEY": PAYMENTS_KEY}


@pytest.fixture
def user_headers():
    """Headers the gateway forwards for a signed-in user."""
    return {"HTTP_X_USER_ID": "user-1"}
