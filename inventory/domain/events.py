"""
Inventory domain events.

Domain events represent something that happened to a tier's key pool.
"""
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent
from core.domain.value_objects import Tier


class KeysIngested(DomainEvent):
    """Event raised when a bulk add stocked at least one new key."""

    def __init__(
        self,
        tier: Tier,
        added: int,
        duplicates: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize KeysIngested event.

        Args:
            tier: Tier that received the keys
            added: Number of keys stocked
            duplicates: Number of candidates rejected as duplicates
            occurred_at: When the event occurred
        """
        super().__init__(aggregate_id=tier.value, occurred_at=occurred_at)
        self.tier = tier
        self.added = added
        self.duplicates = duplicates

    def payload(self):
        return {"tier": self.tier.value, "added": self.added, "duplicates": self.duplicates}


class KeyRemoved(DomainEvent):
    """Event raised when an admin withdraws an available key."""

    def __init__(self, tier: Tier, key_hint: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=tier.value, occurred_at=occurred_at)
        self.tier = tier
        self.key_hint = key_hint

    def payload(self):
        return {"tier": self.tier.value, "key": self.key_hint}
