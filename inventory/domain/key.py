"""
Key domain entity.

A key is a single-use activation token that lives in exactly one tier.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import KeyStatus, KeyValue, Tier


def mask_key(value: str) -> str:
    """Return a log-safe hint of a key value."""
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"


@dataclass(frozen=True)
class Key:
    """
    Key domain entity.

    Immutable; status transitions return a new instance.
    """

    value: KeyValue
    tier: Tier
    status: KeyStatus
    added_at: datetime
    status_changed_at: Optional[datetime] = None

    @classmethod
    def create(cls, value: str, tier: Tier, added_at: Optional[datetime] = None) -> "Key":
        """
        Create a new available key.

        Args:
            value: Key string, already trimmed
            tier: Tier the key is stocked in
            added_at: Ingest time (defaults to now)

        Returns:
            Key entity instance
        """
        return cls(
            value=KeyValue(value),
            tier=tier,
            status=KeyStatus.AVAILABLE,
            added_at=added_at or datetime.now(timezone.utc),
        )

    @property
    def is_available(self) -> bool:
        return self.status == KeyStatus.AVAILABLE

    @property
    def hint(self) -> str:
        return mask_key(str(self.value))

    def assign(self) -> "Key":
        """
        Mark the key as issued to an order.

        Returns:
            New Key instance with assigned status
        """
        if not self.is_available:
            raise ValueError(f"Cannot assign a key in status {self.status}")
        return replace(
            self, status=KeyStatus.ASSIGNED, status_changed_at=datetime.now(timezone.utc)
        )

    def remove(self) -> "Key":
        """
        Withdraw the key from its pool for good.

        Returns:
            New Key instance with removed status
        """
        if not self.is_available:
            raise ValueError(f"Cannot remove a key in status {self.status}")
        return replace(
            self, status=KeyStatus.REMOVED, status_changed_at=datetime.now(timezone.utc)
        )
