"""
Deduplicator port (interface).

The deduplicator remembers every key value ever accepted, whatever
happened to the key afterwards.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from core.domain.value_objects import Tier


class Deduplicator(ABC):
    """Abstract append-only memory of accepted key values."""

    @abstractmethod
    def claim(self, tier: Tier, values: Sequence[str]) -> List[str]:
        """
        Record the values that were never seen before.

        Synchronous: it runs inside the ingesting tier's critical section
        and the caller's transaction.

        Args:
            tier: Tier the values are being ingested into
            values: Distinct candidate values

        Returns:
            The subset of values this call recorded, in input order
        """
        pass

    @abstractmethod
    async def is_seen(self, value: str) -> bool:
        """
        Check whether a value was ever accepted.

        Args:
            value: Key string

        Returns:
            True if the value is known
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Count every value ever accepted.

        Returns:
            Size of the memory
        """
        pass
