"""
GetKeyStatsHandler.

Stats are recomputed from the database on every call.
"""
from allocations.ports.assignment_ledger import AssignmentLedger
from core.metrics import pool_available_keys
from inventory.application.dto.inventory_dto import KeyStatsDTO
from inventory.application.queries.get_key_stats import GetKeyStatsQuery
from inventory.domain.services import StatsAggregator
from inventory.ports.pool_registry import PoolRegistry


class GetKeyStatsHandler:
    """Handler for GetKeyStatsQuery."""

    def __init__(self, pool_registry: PoolRegistry, ledger: AssignmentLedger):
        """Initialize handler with the pool registry and assignment ledger."""
        self.pool_registry = pool_registry
        self.ledger = ledger

    async def handle(self, query: GetKeyStatsQuery) -> KeyStatsDTO:
        """
        Handle get key stats query.

        Args:
            query: GetKeyStatsQuery

        Returns:
            KeyStatsDTO keyed by tier label
        """
        stats = await StatsAggregator.collect(self.pool_registry, self.ledger)

        for tier, count in stats.available.items():
            pool_available_keys.labels(tier=tier.value).set(count)

        return KeyStatsDTO(
            available={tier.value: count for tier, count in stats.available.items()},
            assigned={tier.value: count for tier, count in stats.assigned.items()},
            total_assigned=stats.total_assigned,
        )
