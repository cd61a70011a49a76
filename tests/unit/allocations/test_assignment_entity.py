"""
Unit tests for Assignment domain entity.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from allocations.domain.assignment import Assignment
from core.domain.value_objects import KeyValue, Tier


class TestAssignmentEntity:
    """Tests for Assignment domain entity."""

    def test_create_assignment(self):
        """Test creating an assignment entity."""
        assigned_at = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

        assignment = Assignment.create(
            order_id="order-1",
            user_id="user-1",
            key_value="AAAA-1111",
            tier=Tier.SEVEN_DAYS,
            product_type="vpn",
            assigned_at=assigned_at,
        )

        assert isinstance(assignment.id, uuid.UUID)
        assert assignment.key_value == KeyValue("AAAA-1111")
        assert assignment.assigned_at == assigned_at
        assert assignment.expires_at == assigned_at + timedelta(days=7)

    @pytest.mark.parametrize("tier", list(Tier))
    def test_expiry_follows_tier(self, tier):
        """Test each tier grants its own validity window."""
        assignment = Assignment.create(
            order_id="order-1",
            user_id="user-1",
            key_value="AAAA-1111",
            tier=tier,
            product_type="vpn",
        )

        assert assignment.expires_at - assignment.assigned_at == tier.duration

    def test_assignment_requires_order(self):
        with pytest.raises(ValueError, match="Order ID is required"):
            Assignment.create(
                order_id="",
                user_id="user-1",
                key_value="AAAA-1111",
                tier=Tier.ONE_DAY,
                product_type="vpn",
            )

    def test_assignment_requires_user(self):
        with pytest.raises(ValueError, match="User ID is required"):
            Assignment.create(
                order_id="order-1",
                user_id="",
                key_value="AAAA-1111",
                tier=Tier.ONE_DAY,
                product_type="vpn",
            )

    def test_is_expired(self):
        """Test expiry check against a reference time."""
        assigned_at = datetime(2024, 3, 1, tzinfo=timezone.utc)
        assignment = Assignment.create(
            order_id="order-1",
            user_id="user-1",
            key_value="AAAA-1111",
            tier=Tier.ONE_DAY,
            product_type="vpn",
            assigned_at=assigned_at,
        )

        assert not assignment.is_expired(assigned_at + timedelta(hours=23))
        assert assignment.is_expired(assigned_at + timedelta(days=1))

    def test_assignment_is_immutable(self):
        assignment = Assignment.create(
            order_id="order-1",
            user_id="user-1",
            key_value="AAAA-1111",
            tier=Tier.ONE_DAY,
            product_type="vpn",
        )

        with pytest.raises(AttributeError):
            assignment.order_id = "order-2"

    def test_key_hint(self):
        assignment = Assignment.create(
            order_id="order-1",
            user_id="user-1",
            key_value="AAAA-1111",
            tier=Tier.ONE_DAY,
            product_type="vpn",
        )
        assert assignment.key_hint == "****1111"
