"""
In-memory fakes for unit tests that do not touch the database.
"""

import pytest

from allocations.domain.assignment import Assignment
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.events import EventHandler
from core.domain.exceptions import OutOfStockError
from core.domain.value_objects import FulfillmentStatus
from core.infrastructure.events import event_bus
from orders.ports.order_repository import OrderRepository


class InMemoryLedger(AssignmentLedger):
    """Ledger over plain lists, one stock list per tier."""

    def __init__(self, stock=None):
        self.stock = {tier: list(keys) for tier, keys in (stock or {}).items()}
        self.assignments = {}
        self.allocate_calls = 0

    def restock(self, tier, keys):
        self.stock.setdefault(tier, []).extend(keys)

    async def allocate(self, tier, order_id, user_id, product_type):
        self.allocate_calls += 1
        if order_id in self.assignments:
            return self.assignments[order_id], False
        keys = self.stock.get(tier, [])
        if not keys:
            raise OutOfStockError(f"No keys available in tier {tier.value}")
        assignment = Assignment.create(
            order_id=order_id,
            user_id=user_id,
            key_value=keys.pop(0),
            tier=tier,
            product_type=product_type,
        )
        self.assignments[order_id] = assignment
        return assignment, True

    async def find_by_order(self, order_id):
        return self.assignments.get(order_id)

    async def find_by_user(self, user_id):
        found = [a for a in self.assignments.values() if a.user_id == user_id]
        return sorted(found, key=lambda a: a.assigned_at, reverse=True)

    async def available_count(self, tier):
        return len(self.stock.get(tier, []))

    async def assigned_counts(self):
        counts = {}
        for assignment in self.assignments.values():
            counts[assignment.tier] = counts.get(assignment.tier, 0) + 1
        return counts


class InMemoryOrderRepository(OrderRepository):
    """Order repository over a dict, keeping insertion order."""

    def __init__(self):
        self.orders = {}

    async def save(self, order):
        stored = self.orders.get(order.id)
        if stored is not None and stored.is_fulfilled and not order.is_fulfilled:
            return stored
        self.orders[order.id] = order
        return order

    async def find_by_id(self, order_id):
        return self.orders.get(order_id)

    async def find_by_user(self, user_id):
        return [o for o in self.orders.values() if o.user_id == user_id]

    async def find_awaiting_stock(self, tier):
        waiting = [
            o
            for o in self.orders.values()
            if o.tier == tier and o.fulfillment_status == FulfillmentStatus.OUT_OF_STOCK
        ]
        return sorted(waiting, key=lambda o: o.created_at)


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


@pytest.fixture
def make_ledger():
    """Factory for InMemoryLedger."""
    return InMemoryLedger


@pytest.fixture
def memory_orders():
    """Fixture for InMemoryOrderRepository."""
    return InMemoryOrderRepository()


@pytest.fixture
def record_events():
    """Subscribe a recorder to the given event type and return it."""

    def _record(event_type):
        recorder = RecordingHandler()
        event_bus.subscribe(event_type, recorder)
        return recorder

    return _record
