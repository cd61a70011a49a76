"""
GetPoolHandler.
"""
from core.domain.value_objects import Tier
from inventory.application.dto.inventory_dto import PoolDTO
from inventory.application.queries.get_pool import GetPoolQuery
from inventory.ports.pool_registry import PoolRegistry


class GetPoolHandler:
    """Handler for GetPoolQuery."""

    def __init__(self, pool_registry: PoolRegistry):
        self.pool_registry = pool_registry

    async def handle(self, query: GetPoolQuery) -> PoolDTO:
        tier = Tier.parse(query.tier)
        pool = await self.pool_registry.get_pool(tier)
        return PoolDTO(tier=tier.value, count=pool.count, keys=pool.values())
