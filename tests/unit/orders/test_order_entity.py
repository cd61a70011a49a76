"""
Unit tests for Order domain entity.
"""

from decimal import Decimal

import pytest

from core.domain.exceptions import InvalidOrderStateError
from core.domain.value_objects import FulfillmentStatus, PaymentStatus, Tier
from orders.domain.order import Order


class TestOrderEntity:
    """Tests for Order domain entity."""

    def test_create_order(self, make_order):
        """Test creating an order entity."""
        order = make_order(tier=Tier.THIRTY_DAYS)

        assert order.tier == Tier.THIRTY_DAYS
        assert order.currency == "USD"
        assert order.amount == Decimal("9.99")
        assert order.payment_status == PaymentStatus.PENDING
        assert order.fulfillment_status == FulfillmentStatus.PENDING_PAYMENT
        assert order.paid_at is None

    def test_order_validation(self):
        with pytest.raises(ValueError, match="Currency"):
            Order.create(
                user_id="user-1",
                product_type="vpn",
                tier=Tier.ONE_DAY,
                amount=Decimal("1.00"),
                currency="dollars",
                payment_method="card",
            )

        with pytest.raises(ValueError, match="negative"):
            Order.create(
                user_id="user-1",
                product_type="vpn",
                tier=Tier.ONE_DAY,
                amount=Decimal("-1"),
                currency="usd",
                payment_method="card",
            )

    def test_mark_paid_starts_fulfillment(self, make_order):
        order = make_order().mark_paid("evt-1")

        assert order.payment_status == PaymentStatus.PAID
        assert order.fulfillment_status == FulfillmentStatus.FULFILLING
        assert order.paid_at is not None
        assert order.payment_event_id == "evt-1"

    def test_mark_paid_replay_is_noop(self, make_order):
        """Test a repeated confirmation returns the same instance."""
        paid = make_order().mark_paid("evt-1")

        assert paid.mark_paid("evt-2") is paid

    def test_failed_payment_is_terminal(self, make_order):
        failed = make_order().mark_payment_failed("evt-1")

        assert failed.payment_status == PaymentStatus.FAILED
        assert failed.fulfillment_status == FulfillmentStatus.PENDING_PAYMENT
        assert failed.mark_payment_failed() is failed
        with pytest.raises(InvalidOrderStateError):
            failed.mark_paid()

    def test_paid_order_cannot_fail(self, make_order):
        with pytest.raises(InvalidOrderStateError):
            make_order().mark_paid().mark_payment_failed()

    def test_fulfill(self, make_order):
        fulfilled = make_order().mark_paid().mark_fulfilled()

        assert fulfilled.is_fulfilled
        assert fulfilled.fulfilled_at is not None
        assert fulfilled.mark_fulfilled() is fulfilled

    def test_unpaid_order_cannot_be_fulfilled(self, make_order):
        with pytest.raises(InvalidOrderStateError):
            make_order().mark_fulfilled()

    def test_out_of_stock_and_retry(self, make_order):
        """Test a waiting order goes back to fulfilling on retry."""
        waiting = make_order().mark_paid().mark_out_of_stock()

        assert waiting.awaits_stock
        retried = waiting.retry_fulfillment()
        assert retried.fulfillment_status == FulfillmentStatus.FULFILLING
        assert retried.mark_fulfilled().is_fulfilled

    def test_retry_requires_waiting_order(self, make_order):
        with pytest.raises(InvalidOrderStateError):
            make_order().mark_paid().retry_fulfillment()

    def test_fulfilled_order_cannot_go_out_of_stock(self, make_order):
        with pytest.raises(InvalidOrderStateError):
            make_order().mark_paid().mark_fulfilled().mark_out_of_stock()
