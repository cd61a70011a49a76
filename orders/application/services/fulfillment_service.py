"""
Fulfillment service.

Drives a paid order to fulfilled, or parks it as out_of_stock until its
tier is restocked.
"""
import logging
from typing import Optional, Tuple

from allocations.application.commands.assign_key import AssignKeyCommand
from allocations.application.handlers.assign_key_handler import AssignKeyHandler
from allocations.domain.assignment import Assignment
from allocations.domain.services import AllocationService
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.exceptions import InvalidOrderStateError, OutOfStockError
from core.domain.value_objects import FulfillmentStatus
from core.infrastructure.events import event_bus
from orders.domain.events import OrderFulfilled
from orders.domain.order import Order
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class FulfillmentService:
    """Application service issuing keys to paid orders."""

    def __init__(self, order_repository: OrderRepository, ledger: AssignmentLedger):
        """Initialize service with repositories."""
        self.order_repository = order_repository
        self.ledger = ledger
        self.assign_key_handler = AssignKeyHandler(ledger)

    async def fulfill(self, order: Order) -> Tuple[Order, Optional[Assignment]]:
        """
        Issue a key to a paid order.

        A fulfilled order gets its existing assignment back. An out-of-stock
        order is moved back to fulfilling first. When the tier is empty the
        order is saved as out_of_stock and no assignment is returned.

        A restock committing between the empty read and the out_of_stock save
        re-drives without seeing this order, so the tier is checked again
        after the save and the order retried while it has stock.

        Args:
            order: Paid order

        Returns:
            Tuple of (saved order, assignment or None)

        Raises:
            InvalidOrderStateError: If the order is not paid
        """
        while True:
            if order.is_fulfilled:
                assignment = await AllocationService.lookup(str(order.id), self.ledger)
                return order, assignment

            if order.awaits_stock:
                order = order.retry_fulfillment()
            elif order.fulfillment_status != FulfillmentStatus.FULFILLING:
                raise InvalidOrderStateError(
                    f"Order {order.id} is not paid ({order.fulfillment_status})"
                )

            try:
                assignment = await self.assign_key_handler.handle(
                    AssignKeyCommand(
                        tier=order.tier,
                        order_id=str(order.id),
                        user_id=order.user_id,
                        product_type=order.product_type,
                    )
                )
            except OutOfStockError:
                order = await self.order_repository.save(order.mark_out_of_stock())
                if order.is_fulfilled or await self.ledger.available_count(order.tier) > 0:
                    continue
                logger.info(
                    "Order waiting for stock",
                    extra={"order_id": str(order.id), "tier": order.tier.value},
                )
                return order, None

            order = await self.order_repository.save(order.mark_fulfilled(assignment.assigned_at))
            await event_bus.publish(OrderFulfilled(order_id=order.id, assignment_id=assignment.id))
            return order, assignment
