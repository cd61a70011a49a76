"""
Assignment domain entity.

An assignment is the permanent record binding one order and its user to
one issued key.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import KeyValue, Tier
from inventory.domain.key import mask_key


@dataclass(frozen=True)
class Assignment:
    """
    Assignment domain entity.

    Written once and never mutated or deleted.
    """

    id: uuid.UUID
    order_id: str
    user_id: str
    key_value: KeyValue
    tier: Tier
    product_type: str
    assigned_at: datetime
    expires_at: datetime

    def __post_init__(self):
        """Validate assignment entity."""
        if not self.order_id:
            raise ValueError("Order ID is required")
        if not self.user_id:
            raise ValueError("User ID is required")
        if self.expires_at <= self.assigned_at:
            raise ValueError("Assignment must expire after it was made")

    @classmethod
    def create(
        cls,
        order_id: str,
        user_id: str,
        key_value: str,
        tier: Tier,
        product_type: str,
        assigned_at: Optional[datetime] = None,
        assignment_id: Optional[uuid.UUID] = None,
    ) -> "Assignment":
        """
        Create a new assignment.

        The expiry is derived from the tier: assigned_at + tier duration.

        Args:
            order_id: Order the key is issued for
            user_id: Owner of the order
            key_value: Issued key string
            tier: Tier the key came from
            product_type: Product the order bought
            assigned_at: Issue time (defaults to now)
            assignment_id: Optional UUID (generated if not provided)

        Returns:
            Assignment entity instance
        """
        assigned_at = assigned_at or datetime.now(timezone.utc)
        return cls(
            id=assignment_id or uuid.uuid4(),
            order_id=str(order_id),
            user_id=str(user_id),
            key_value=KeyValue(key_value),
            tier=tier,
            product_type=product_type,
            assigned_at=assigned_at,
            expires_at=assigned_at + tier.duration,
        )

    @property
    def key_hint(self) -> str:
        return mask_key(str(self.key_value))

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check whether the key's validity window has passed.

        Args:
            now: Reference time (defaults to now)

        Returns:
            True once expires_at is reached
        """
        return (now or datetime.now(timezone.utc)) >= self.expires_at
