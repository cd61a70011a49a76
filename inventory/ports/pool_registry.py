"""
PoolRegistry port (interface).

This defines the contract for the per-tier key pools.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from core.domain.value_objects import Tier
from inventory.domain.key import Key
from inventory.domain.key_pool import IngestResult, KeyPool


class PoolRegistry(ABC):
    """
    Abstract registry owning one key pool per tier.

    Mutations of one tier are serialized with each other; different tiers
    proceed independently.
    """

    @abstractmethod
    async def add_many(self, tier: Tier, candidate_keys: Iterable[str]) -> IngestResult:
        """
        Ingest candidate keys into a tier.

        Args:
            tier: Target tier
            candidate_keys: Raw lines; blank lines are ignored

        Returns:
            IngestResult with added and duplicate counts
        """
        pass

    @abstractmethod
    async def remove(self, tier: Tier, key_value: str) -> Key:
        """
        Withdraw an available key from a tier.

        Args:
            tier: Tier holding the key
            key_value: Key string

        Returns:
            The removed Key

        Raises:
            KeyNotFoundError: If the key is not available in the tier
            KeyAlreadyAssignedError: If the key was already issued
        """
        pass

    @abstractmethod
    async def get_pool(self, tier: Tier) -> KeyPool:
        """
        Snapshot the available keys of a tier.

        Args:
            tier: Tier to inspect

        Returns:
            KeyPool in insertion order
        """
        pass

    @abstractmethod
    async def list_available(self, tier: Tier) -> List[Key]:
        """
        List available keys of a tier.

        Args:
            tier: Tier to inspect

        Returns:
            List of Key entities in insertion order
        """
        pass

    @abstractmethod
    async def available_count(self, tier: Tier) -> int:
        """
        Count available keys of a tier.

        Args:
            tier: Tier to inspect

        Returns:
            Number of available keys
        """
        pass

    @abstractmethod
    async def available_counts(self) -> Dict[Tier, int]:
        """
        Count available keys of every tier in one read.

        Returns:
            Mapping of tier to available count (tiers without keys may be absent)
        """
        pass
