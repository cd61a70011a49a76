"""
Order domain events.
"""
import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent
from core.domain.value_objects import Tier


class OrderCreated(DomainEvent):
    """Event raised when an order is placed."""

    def __init__(
        self,
        order_id: uuid.UUID,
        user_id: str,
        tier: Tier,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=str(order_id), occurred_at=occurred_at)
        self.order_id = order_id
        self.user_id = user_id
        self.tier = tier

    def payload(self):
        return {"order_id": str(self.order_id), "user_id": self.user_id, "tier": self.tier.value}


class OrderPaymentFailed(DomainEvent):
    """Event raised when the payment collaborator reports a failed payment."""

    def __init__(self, order_id: uuid.UUID, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=str(order_id), occurred_at=occurred_at)
        self.order_id = order_id

    def payload(self):
        return {"order_id": str(self.order_id)}


class OrderFulfilled(DomainEvent):
    """Event raised when an order received its key."""

    def __init__(
        self,
        order_id: uuid.UUID,
        assignment_id: uuid.UUID,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize OrderFulfilled event.

        Args:
            order_id: Order UUID
            assignment_id: Assignment holding the issued key
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=str(order_id), occurred_at=occurred_at)
        self.order_id = order_id
        self.assignment_id = assignment_id

    def payload(self):
        return {"order_id": str(self.order_id), "assignment_id": str(self.assignment_id)}
