"""
Allocation domain events.
"""
import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent
from core.domain.value_objects import Tier


class KeyAssigned(DomainEvent):
    """Event raised when a key is issued to an order."""

    def __init__(
        self,
        assignment_id: uuid.UUID,
        order_id: str,
        user_id: str,
        tier: Tier,
        key_hint: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize KeyAssigned event.

        Args:
            assignment_id: Assignment UUID
            order_id: Order the key was issued for
            user_id: Owner of the order
            tier: Tier the key came from
            key_hint: Masked key value, safe to log
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=order_id, occurred_at=occurred_at)
        self.assignment_id = assignment_id
        self.order_id = order_id
        self.user_id = user_id
        self.tier = tier
        self.key_hint = key_hint

    def payload(self):
        return {
            "assignment_id": str(self.assignment_id),
            "order_id": self.order_id,
            "user_id": self.user_id,
            "tier": self.tier.value,
            "key": self.key_hint,
        }


class AllocationOutOfStock(DomainEvent):
    """Event raised when an order could not be served from an empty pool."""

    def __init__(self, order_id: str, tier: Tier, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=order_id, occurred_at=occurred_at)
        self.order_id = order_id
        self.tier = tier

    def payload(self):
        return {"order_id": self.order_id, "tier": self.tier.value}
