"""
RecordPaymentHandler.

Applies a verified payment event: a paid order is fulfilled right away,
a failed one is closed without a key.
"""
import logging

from allocations.application.dto.assignment_dto import AssignmentDTO
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.exceptions import OrderNotFoundError
from core.domain.value_objects import PaymentStatus
from core.infrastructure.events import event_bus
from core.metrics import payment_events_total
from orders.application.commands.record_payment import RecordPaymentCommand
from orders.application.dto.order_dto import OrderDTO, PaymentResultDTO
from orders.application.services.fulfillment_service import FulfillmentService
from orders.domain.events import OrderPaymentFailed
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RecordPaymentHandler:
    """Handler for RecordPaymentCommand."""

    def __init__(self, order_repository: OrderRepository, ledger: AssignmentLedger):
        """Initialize handler with repositories."""
        self.order_repository = order_repository
        self.fulfillment_service = FulfillmentService(order_repository, ledger)

    async def handle(self, command: RecordPaymentCommand) -> PaymentResultDTO:
        """
        Handle record payment command.

        Replays of a paid event return the key already issued.

        Args:
            command: RecordPaymentCommand

        Returns:
            PaymentResultDTO with the order and, when issued, its key

        Raises:
            OrderNotFoundError: If order not found
            InvalidOrderStateError: If the event contradicts the order's payment state
        """
        status = PaymentStatus(command.status)
        payment_events_total.labels(status=status.value).inc()

        order = await self.order_repository.find_by_id(command.order_id)
        if not order:
            raise OrderNotFoundError(f"Order {command.order_id} not found")

        if status == PaymentStatus.FAILED:
            failed = order.mark_payment_failed(command.event_id)
            if failed is not order:
                order = await self.order_repository.save(failed)
                logger.info("Payment failed", extra={"order_id": str(order.id)})
                await event_bus.publish(OrderPaymentFailed(order_id=order.id))
            return PaymentResultDTO(order=OrderDTO.from_entity(order))

        paid = order.mark_paid(command.event_id)
        if paid is not order:
            paid = await self.order_repository.save(paid)
            logger.info("Payment confirmed", extra={"order_id": str(paid.id)})

        order, assignment = await self.fulfillment_service.fulfill(paid)
        return PaymentResultDTO(
            order=OrderDTO.from_entity(order),
            assignment=AssignmentDTO.from_entity(assignment) if assignment else None,
        )
