"""
AssignKeyHandler.

Issues a key to an order and reports the outcome on the event bus.
"""
import logging

from allocations.application.commands.assign_key import AssignKeyCommand
from allocations.domain.assignment import Assignment
from allocations.domain.events import AllocationOutOfStock, KeyAssigned
from allocations.domain.services import AllocationService
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.exceptions import OutOfStockError
from core.infrastructure.events import event_bus
from core.metrics import allocation_out_of_stock_total, keys_assigned_total

logger = logging.getLogger(__name__)


class AssignKeyHandler:
    """Handler for AssignKeyCommand."""

    def __init__(self, ledger: AssignmentLedger):
        """Initialize handler with the assignment ledger."""
        self.ledger = ledger

    async def handle(self, command: AssignKeyCommand) -> Assignment:
        """
        Handle assign key command.

        Replays for an order that already holds a key return that key.

        Args:
            command: AssignKeyCommand

        Returns:
            Assignment entity

        Raises:
            OutOfStockError: If the tier has no available key
        """
        try:
            assignment, created = await AllocationService.allocate(
                command.tier,
                command.order_id,
                command.user_id,
                command.product_type,
                self.ledger,
            )
        except OutOfStockError:
            allocation_out_of_stock_total.labels(tier=command.tier.value).inc()
            logger.warning(
                "Allocation failed, pool empty",
                extra={"order_id": command.order_id, "tier": command.tier.value},
            )
            await event_bus.publish(
                AllocationOutOfStock(order_id=command.order_id, tier=command.tier)
            )
            raise

        if created:
            keys_assigned_total.labels(tier=assignment.tier.value).inc()
            await event_bus.publish(
                KeyAssigned(
                    assignment_id=assignment.id,
                    order_id=assignment.order_id,
                    user_id=assignment.user_id,
                    tier=assignment.tier,
                    key_hint=assignment.key_hint,
                )
            )

        return assignment
