"""
Allocation domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
from typing import List, Tuple

from allocations.domain.assignment import Assignment
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.exceptions import AssignmentNotFoundError
from core.domain.value_objects import Tier

logger = logging.getLogger(__name__)


class AllocationService:
    """Domain service handing exactly one key to each paid order."""

    @staticmethod
    async def allocate(
        tier: Tier,
        order_id: str,
        user_id: str,
        product_type: str,
        ledger: AssignmentLedger,
    ) -> Tuple[Assignment, bool]:
        """
        Issue a key to an order, at most once.

        An order that already holds an assignment gets it back unchanged
        without touching the pool. Otherwise one arbitrary available key is
        taken and recorded; an empty pool fails immediately.

        Args:
            tier: Tier the order bought
            order_id: Order being fulfilled
            user_id: Owner of the order
            product_type: Product the order bought
            ledger: Assignment ledger

        Returns:
            Tuple of (assignment, created)

        Raises:
            OutOfStockError: If the tier has no available key
        """
        existing = await ledger.find_by_order(order_id)
        if existing is not None:
            logger.info(
                "Order already fulfilled, returning existing assignment",
                extra={"order_id": order_id, "tier": existing.tier.value},
            )
            return existing, False

        return await ledger.allocate(tier, order_id, user_id, product_type)

    @staticmethod
    async def assign(
        tier: Tier,
        order_id: str,
        user_id: str,
        product_type: str,
        ledger: AssignmentLedger,
    ) -> Assignment:
        """
        Issue a key to an order, returning only the assignment.

        Raises:
            OutOfStockError: If the tier has no available key
        """
        assignment, _ = await AllocationService.allocate(
            tier, order_id, user_id, product_type, ledger
        )
        return assignment

    @staticmethod
    async def lookup(order_id: str, ledger: AssignmentLedger) -> Assignment:
        """
        Fetch the assignment of an order.

        Raises:
            AssignmentNotFoundError: If the order holds no assignment
        """
        assignment = await ledger.find_by_order(order_id)
        if assignment is None:
            raise AssignmentNotFoundError(f"No assignment for order {order_id}")
        return assignment

    @staticmethod
    async def list_for_user(user_id: str, ledger: AssignmentLedger) -> List[Assignment]:
        return await ledger.find_by_user(user_id)
