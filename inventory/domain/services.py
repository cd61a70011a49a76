"""
Pool statistics.

Stats are derived on every read from the pools and the assignment ledger.
"""
from dataclasses import dataclass
from typing import Dict

from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.value_objects import Tier
from inventory.ports.pool_registry import PoolRegistry


@dataclass(frozen=True)
class PoolStats:
    """Available and assigned key counts per tier."""

    available: Dict[Tier, int]
    assigned: Dict[Tier, int]

    @property
    def total_assigned(self) -> int:
        return sum(self.assigned.values())

    @property
    def total_available(self) -> int:
        return sum(self.available.values())


class StatsAggregator:
    """Read-only view over the pool registry and the assignment ledger."""

    @staticmethod
    async def collect(pool_registry: PoolRegistry, ledger: AssignmentLedger) -> PoolStats:
        """
        Compute current stats for every known tier.

        Args:
            pool_registry: Pool registry
            ledger: Assignment ledger

        Returns:
            PoolStats with an entry for each tier, zero when empty
        """
        available = await pool_registry.available_counts()
        assigned = await ledger.assigned_counts()
        return PoolStats(
            available={tier: available.get(tier, 0) for tier in Tier},
            assigned={tier: assigned.get(tier, 0) for tier in Tier},
        )
