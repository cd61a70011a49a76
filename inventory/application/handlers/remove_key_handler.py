"""
RemoveKeyHandler.

Withdraws an available key from a tier.
"""
from core.domain.value_objects import Tier
from core.infrastructure.events import event_bus
from core.metrics import keys_removed_total
from inventory.application.commands.remove_key import RemoveKeyCommand
from inventory.domain.events import KeyRemoved
from inventory.domain.key import Key
from inventory.ports.pool_registry import PoolRegistry


class RemoveKeyHandler:
    """Handler for RemoveKeyCommand."""

    def __init__(self, pool_registry: PoolRegistry):
        self.pool_registry = pool_registry

    async def handle(self, command: RemoveKeyCommand) -> Key:
        """
        Handle remove key command.

        Args:
            command: RemoveKeyCommand

        Returns:
            The removed Key

        Raises:
            InvalidTierError: If the tier is unknown
            KeyNotFoundError: If the key is not available in the tier
            KeyAlreadyAssignedError: If the key was already issued
        """
        tier = Tier.parse(command.tier)
        key = await self.pool_registry.remove(tier, command.key)

        keys_removed_total.labels(tier=tier.value).inc()
        await event_bus.publish(KeyRemoved(tier=tier, key_hint=key.hint))

        return key
