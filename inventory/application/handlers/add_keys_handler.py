"""
AddKeysHandler.

Stocks a batch of keys into a tier and announces the restock.
"""
import logging

from core.domain.value_objects import Tier
from core.infrastructure.events import event_bus
from core.metrics import keys_duplicates_total, keys_ingested_total
from inventory.application.commands.add_keys import AddKeysCommand
from inventory.application.dto.inventory_dto import IngestResultDTO
from inventory.domain.events import KeysIngested
from inventory.ports.pool_registry import PoolRegistry

logger = logging.getLogger(__name__)


class AddKeysHandler:
    """Handler for AddKeysCommand."""

    def __init__(self, pool_registry: PoolRegistry):
        """Initialize handler with the pool registry."""
        self.pool_registry = pool_registry

    async def handle(self, command: AddKeysCommand) -> IngestResultDTO:
        """
        Handle add keys command.

        Args:
            command: AddKeysCommand

        Returns:
            IngestResultDTO with added and duplicate counts

        Raises:
            InvalidTierError: If the tier is unknown
        """
        tier = Tier.parse(command.tier)
        result = await self.pool_registry.add_many(tier, command.keys)

        keys_ingested_total.labels(tier=tier.value).inc(result.added)
        keys_duplicates_total.labels(tier=tier.value).inc(result.duplicates)

        if result.added > 0:
            # Wakes up orders waiting on this tier
            await event_bus.publish(
                KeysIngested(tier=tier, added=result.added, duplicates=result.duplicates)
            )

        return IngestResultDTO(
            tier=tier.value,
            added=result.added,
            duplicates=result.duplicates,
        )
