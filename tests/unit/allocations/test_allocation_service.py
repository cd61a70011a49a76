"""
Unit tests for AllocationService and AssignKeyHandler.
"""

import pytest

from allocations.application.commands.assign_key import AssignKeyCommand
from allocations.application.handlers.assign_key_handler import AssignKeyHandler
from allocations.domain.events import AllocationOutOfStock, KeyAssigned
from allocations.domain.services import AllocationService
from core.domain.exceptions import AssignmentNotFoundError, OutOfStockError
from core.domain.value_objects import Tier


@pytest.mark.asyncio
class TestAllocationService:
    """Tests for AllocationService."""

    async def test_allocate_issues_key(self, make_ledger):
        ledger = make_ledger({Tier.ONE_DAY: ["A", "B"]})

        assignment, created = await AllocationService.allocate(
            Tier.ONE_DAY, "order-1", "user-1", "vpn", ledger
        )

        assert created is True
        assert str(assignment.key_value) == "A"
        assert ledger.stock[Tier.ONE_DAY] == ["B"]

    async def test_replay_returns_same_assignment_without_touching_pool(self, make_ledger):
        """Test an order never receives a second key."""
        ledger = make_ledger({Tier.ONE_DAY: ["A", "B"]})
        first = await AllocationService.assign(Tier.ONE_DAY, "order-1", "user-1", "vpn", ledger)

        second, created = await AllocationService.allocate(
            Tier.ONE_DAY, "order-1", "user-1", "vpn", ledger
        )

        assert created is False
        assert second == first
        assert ledger.allocate_calls == 1
        assert ledger.stock[Tier.ONE_DAY] == ["B"]

    async def test_empty_pool_fails_immediately(self, make_ledger):
        ledger = make_ledger({Tier.ONE_DAY: ["A"]})

        with pytest.raises(OutOfStockError):
            await AllocationService.allocate(Tier.SEVEN_DAYS, "order-1", "user-1", "vpn", ledger)

    async def test_lookup_missing(self, make_ledger):
        with pytest.raises(AssignmentNotFoundError):
            await AllocationService.lookup("order-404", make_ledger())

    async def test_list_for_user(self, make_ledger):
        ledger = make_ledger({Tier.ONE_DAY: ["A", "B", "C"]})
        await AllocationService.assign(Tier.ONE_DAY, "order-1", "user-1", "vpn", ledger)
        await AllocationService.assign(Tier.ONE_DAY, "order-2", "user-2", "vpn", ledger)
        await AllocationService.assign(Tier.ONE_DAY, "order-3", "user-1", "vpn", ledger)

        keys = await AllocationService.list_for_user("user-1", ledger)

        assert {a.order_id for a in keys} == {"order-1", "order-3"}


@pytest.mark.asyncio
class TestAssignKeyHandler:
    """Tests for AssignKeyHandler."""

    async def test_publishes_key_assigned_once(self, make_ledger, record_events):
        """Test replays do not announce a second assignment."""
        recorder = record_events(KeyAssigned)
        handler = AssignKeyHandler(make_ledger({Tier.THIRTY_DAYS: ["A"]}))
        command = AssignKeyCommand(
            tier=Tier.THIRTY_DAYS, order_id="order-1", user_id="user-1", product_type="vpn"
        )

        first = await handler.handle(command)
        second = await handler.handle(command)

        assert first == second
        assert len(recorder.events) == 1
        assert recorder.events[0].order_id == "order-1"
        assert recorder.events[0].key_hint == "****"

    async def test_out_of_stock_is_announced_and_raised(self, make_ledger, record_events):
        recorder = record_events(AllocationOutOfStock)
        handler = AssignKeyHandler(make_ledger())

        with pytest.raises(OutOfStockError):
            await handler.handle(
                AssignKeyCommand(
                    tier=Tier.ONE_DAY, order_id="order-1", user_id="user-1", product_type="vpn"
                )
            )

        assert len(recorder.events) == 1
        assert recorder.events[0].tier == Tier.ONE_DAY
