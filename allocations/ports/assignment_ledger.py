"""
AssignmentLedger port (interface).

The ledger is append-only: one assignment per order, one assignment per key.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from allocations.domain.assignment import Assignment
from core.domain.value_objects import Tier


class AssignmentLedger(ABC):
    """Abstract repository for assignments."""

    @abstractmethod
    async def allocate(
        self, tier: Tier, order_id: str, user_id: str, product_type: str
    ) -> Tuple[Assignment, bool]:
        """
        Take one available key of the tier and record it against the order.

        Runs in the tier's critical section. If the order already holds an
        assignment, that assignment is returned and the pool is untouched.

        Args:
            tier: Tier to draw from
            order_id: Order being fulfilled
            user_id: Owner of the order
            product_type: Product the order bought

        Returns:
            Tuple of (assignment, created)

        Raises:
            OutOfStockError: If the tier has no available key
        """
        pass

    @abstractmethod
    async def find_by_order(self, order_id: str) -> Optional[Assignment]:
        """
        Find the assignment of an order.

        Args:
            order_id: Order identifier

        Returns:
            Assignment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Assignment]:
        """
        List a user's assignments, newest first.

        Args:
            user_id: User identifier

        Returns:
            List of Assignment entities
        """
        pass

    @abstractmethod
    async def available_count(self, tier: Tier) -> int:
        """
        Count the keys the tier can still hand out.

        Args:
            tier: Tier to count

        Returns:
            Number of available keys
        """
        pass

    @abstractmethod
    async def assigned_counts(self) -> Dict[Tier, int]:
        """
        Count assignments per tier in one read.

        Returns:
            Mapping of tier to assignment count (tiers without any may be absent)
        """
        pass
