"""
Integration tests for orders, payments and restock re-drive.
"""

import io
import uuid
from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync
from django.core.management import call_command
from django.core.management.base import CommandError

from core.domain.value_objects import FulfillmentStatus, PaymentStatus, Tier
from inventory.application.commands.add_keys import AddKeysCommand
from inventory.application.handlers.add_keys_handler import AddKeysHandler
from orders.application.commands.record_payment import RecordPaymentCommand
from orders.application.handlers.record_payment_handler import RecordPaymentHandler


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
@pytest.mark.asyncio
class TestOrderRepository:
    """Integration tests for DjangoOrderRepository."""

    async def test_save_and_find(self, order_repository, make_order):
        order = make_order()

        saved = await order_repository.save(order)
        found = await order_repository.find_by_id(order.id)

        assert saved.id == order.id
        assert found.amount == Decimal("9.99")
        assert found.payment_status == PaymentStatus.PENDING
        assert await order_repository.find_by_id(uuid.uuid4()) is None

    async def test_fulfilled_order_is_never_downgraded(self, order_repository, make_order):
        """Test a stale writer cannot move a fulfilled order back."""
        paid = make_order().mark_paid()
        await order_repository.save(paid)
        await order_repository.save(paid.mark_fulfilled())

        stored = await order_repository.save(paid.mark_out_of_stock())

        assert stored.is_fulfilled
        assert (await order_repository.find_by_id(paid.id)).is_fulfilled

    async def test_find_awaiting_stock_oldest_first(self, order_repository, make_order):
        first = make_order(tier=Tier.ONE_DAY).mark_paid().mark_out_of_stock()
        other_tier = make_order(tier=Tier.SEVEN_DAYS).mark_paid().mark_out_of_stock()
        second = make_order(tier=Tier.ONE_DAY).mark_paid().mark_out_of_stock()
        for order in (second, other_tier, first):
            await order_repository.save(order)

        waiting = await order_repository.find_awaiting_stock(Tier.ONE_DAY)

        assert [o.id for o in waiting] == [first.id, second.id]

    async def test_find_by_user(self, order_repository, make_order):
        await order_repository.save(make_order(user_id="user-1"))
        await order_repository.save(make_order(user_id="user-2"))

        orders = await order_repository.find_by_user("user-1")

        assert [o.user_id for o in orders] == ["user-1"]


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
@pytest.mark.asyncio
class TestRestockFulfillment:
    """Tests for out-of-stock orders being served by a restock."""

    async def test_restock_fulfills_waiting_order(
        self, pool_registry, assignment_ledger, order_repository, make_order
    ):
        """Test adding keys re-drives paid orders of that tier."""
        order = make_order(tier=Tier.THIRTY_DAYS)
        await order_repository.save(order)
        result = await RecordPaymentHandler(order_repository, assignment_ledger).handle(
            RecordPaymentCommand(order_id=order.id, status="paid", event_id="evt-1")
        )
        assert result.out_of_stock

        await AddKeysHandler(pool_registry).handle(
            AddKeysCommand(tier="30 days", keys=["LATE-KEY"])
        )

        stored = await order_repository.find_by_id(order.id)
        assert stored.fulfillment_status == FulfillmentStatus.FULFILLED
        assignment = await assignment_ledger.find_by_order(str(order.id))
        assert str(assignment.key_value) == "LATE-KEY"
        assert await pool_registry.available_count(Tier.THIRTY_DAYS) == 0

    async def test_restock_between_empty_read_and_out_of_stock_save(
        self, pool_registry, assignment_ledger, order_repository, make_order
    ):
        """Test a restock whose re-drive misses the order still gets it a key."""
        order = make_order(tier=Tier.ONE_DAY)
        await order_repository.save(order)
        save = order_repository.save
        restocked = []

        async def save_after_restock(entity):
            if entity.awaits_stock and not restocked:
                restocked.append(
                    await AddKeysHandler(pool_registry).handle(
                        AddKeysCommand(tier="1 day", keys=["LATE"])
                    )
                )
            return await save(entity)

        order_repository.save = save_after_restock
        result = await RecordPaymentHandler(order_repository, assignment_ledger).handle(
            RecordPaymentCommand(order_id=order.id, status="paid", event_id="evt-1")
        )

        assert restocked[0].added == 1
        assert not result.out_of_stock
        stored = await order_repository.find_by_id(order.id)
        assert stored.fulfillment_status == FulfillmentStatus.FULFILLED
        assert result.assignment.key == "LATE"
        assert await pool_registry.available_count(Tier.ONE_DAY) == 0

    async def test_restock_of_other_tier_leaves_order_waiting(
        self, pool_registry, assignment_ledger, order_repository, make_order
    ):
        order = make_order(tier=Tier.ONE_DAY)
        await order_repository.save(order)
        await RecordPaymentHandler(order_repository, assignment_ledger).handle(
            RecordPaymentCommand(order_id=order.id, status="paid", event_id=None)
        )

        await AddKeysHandler(pool_registry).handle(AddKeysCommand(tier="7 days", keys=["K-1"]))

        assert (await order_repository.find_by_id(order.id)).awaits_stock
        assert await pool_registry.available_count(Tier.SEVEN_DAYS) == 1


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestManagementCommands:
    """Tests for the load_keys and retry_fulfillment commands."""

    def test_load_keys(self, tmp_path, pool_registry):
        key_file = tmp_path / "keys.txt"
        key_file.write_text("K-1\n\n  K-2  \nK-1\nK-3\n", encoding="utf-8")
        out = io.StringIO()

        call_command("load_keys", "7 days", str(key_file), "--batch-size", "2", stdout=out)

        assert "Added 3 key(s) to 7 days (1 duplicate(s) skipped)" in out.getvalue()
        pool = async_to_sync(pool_registry.get_pool)(Tier.SEVEN_DAYS)
        assert pool.values() == ["K-1", "K-2", "K-3"]

    def test_load_keys_unknown_tier(self, tmp_path):
        key_file = tmp_path / "keys.txt"
        key_file.write_text("K-1\n", encoding="utf-8")

        with pytest.raises(CommandError, match="Unknown tier"):
            call_command("load_keys", "2 days", str(key_file))

    def test_load_keys_overlong_line_loads_nothing(self, tmp_path, pool_registry):
        """Test a bad line in a later batch stops the load before any batch is stored."""
        key_file = tmp_path / "keys.txt"
        key_file.write_text("K-1\nK-2\n" + "X" * 256 + "\n", encoding="utf-8")

        with pytest.raises(CommandError, match="longer than 255"):
            call_command("load_keys", "1 day", str(key_file), "--batch-size", "2")

        assert async_to_sync(pool_registry.available_count)(Tier.ONE_DAY) == 0

    def test_load_keys_missing_file(self, tmp_path):
        with pytest.raises(CommandError, match="Cannot read"):
            call_command("load_keys", "1 day", str(tmp_path / "missing.txt"))

    def test_retry_fulfillment(self, pool_registry, order_repository, make_order):
        """Test the command serves orders parked before a silent restock."""
        waiting = make_order(tier=Tier.ONE_DAY).mark_paid().mark_out_of_stock()
        async_to_sync(order_repository.save)(waiting)
        async_to_sync(pool_registry.add_many)(Tier.ONE_DAY, ["K-1"])
        out = io.StringIO()

        call_command("retry_fulfillment", "--tier", "1 day", stdout=out)

        assert "1 day: fulfilled 1, still waiting 0" in out.getvalue()
        assert async_to_sync(order_repository.find_by_id)(waiting.id).is_fulfilled

    def test_retry_fulfillment_unknown_tier(self):
        with pytest.raises(CommandError):
            call_command("retry_fulfillment", "--tier", "2 days")
