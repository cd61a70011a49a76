"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from core.domain.exceptions import InvalidTierError

MAX_KEY_LENGTH = 255


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class KeyValue(ValueObject):
    """
    Activation key string.

    Keys are opaque and case-sensitive; only surrounding whitespace is
    insignificant.
    """

    value: str

    def __post_init__(self):
        """Validate key format."""
        if not self.value or not self.value.strip():
            raise ValueError("Key cannot be empty")
        if self.value != self.value.strip():
            raise ValueError("Key must not carry surrounding whitespace")
        if len(self.value) > MAX_KEY_LENGTH:
            raise ValueError("Key too long")

    def __str__(self) -> str:
        """Return key as string."""
        return self.value


class Tier(Enum):
    """Key validity tier."""

    ONE_DAY = "1 day"
    SEVEN_DAYS = "7 days"
    THIRTY_DAYS = "30 days"

    def __str__(self) -> str:
        """Return tier label."""
        return self.value

    @property
    def duration(self) -> timedelta:
        """Validity granted by a key of this tier."""
        return _TIER_DURATIONS[self]

    @classmethod
    def parse(cls, value) -> "Tier":
        """
        Resolve a tier from its label.

        Args:
            value: Tier label (e.g. "7 days") or Tier instance

        Returns:
            Tier member

        Raises:
            InvalidTierError: If the label is not a known tier
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidTierError(f"Unknown tier: {value!r}") from None


_TIER_DURATIONS = {
    Tier.ONE_DAY: timedelta(days=1),
    Tier.SEVEN_DAYS: timedelta(days=7),
    Tier.THIRTY_DAYS: timedelta(days=30),
}


class KeyStatus(Enum):
    """Key lifecycle status."""

    AVAILABLE = "available"
    ASSIGNED = "assigned"
    REMOVED = "removed"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class PaymentStatus(Enum):
    """Payment status of an order."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class FulfillmentStatus(Enum):
    """Order fulfillment state as seen by the allocation engine."""

    PENDING_PAYMENT = "pending_payment"
    FULFILLING = "fulfilling"
    FULFILLED = "fulfilled"
    OUT_OF_STOCK = "out_of_stock"

    def __str__(self) -> str:
        return self.value
