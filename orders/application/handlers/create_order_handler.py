"""
CreateOrderHandler.

Places an order awaiting payment.
"""
import logging

from core.domain.value_objects import Tier
from core.infrastructure.events import event_bus
from core.metrics import orders_created_total
from orders.application.commands.create_order import CreateOrderCommand
from orders.application.dto.order_dto import OrderDTO
from orders.domain.events import OrderCreated
from orders.domain.order import Order
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:
    """Handler for CreateOrderCommand."""

    def __init__(self, order_repository: OrderRepository):
        """Initialize handler with repository."""
        self.order_repository = order_repository

    async def handle(self, command: CreateOrderCommand) -> OrderDTO:
        """
        Handle create order command.

        Args:
            command: CreateOrderCommand

        Returns:
            OrderDTO in pending_payment state

        Raises:
            InvalidTierError: If the tier is unknown
        """
        tier = Tier.parse(command.tier)
        order = Order.create(
            user_id=command.user_id,
            product_type=command.product_type,
            tier=tier,
            amount=command.amount,
            currency=command.currency,
            payment_method=command.payment_method,
        )
        saved = await self.order_repository.save(order)

        orders_created_total.labels(tier=tier.value).inc()
        logger.info(
            "Order created",
            extra={"order_id": str(saved.id), "user_id": saved.user_id, "tier": tier.value},
        )
        await event_bus.publish(OrderCreated(order_id=saved.id, user_id=saved.user_id, tier=tier))

        return OrderDTO.from_entity(saved)
