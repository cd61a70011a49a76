"""
RetryFulfillmentHandler.

Re-drives a tier's out-of-stock orders, oldest first, until the pool runs
dry again.
"""
import logging

from allocations.ports.assignment_ledger import AssignmentLedger
from orders.application.commands.retry_fulfillment import RetryFulfillmentCommand
from orders.application.dto.order_dto import RetryResultDTO
from orders.application.services.fulfillment_service import FulfillmentService
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RetryFulfillmentHandler:
    """Handler for RetryFulfillmentCommand."""

    def __init__(self, order_repository: OrderRepository, ledger: AssignmentLedger):
        self.order_repository = order_repository
        self.fulfillment_service = FulfillmentService(order_repository, ledger)

    async def handle(self, command: RetryFulfillmentCommand) -> RetryResultDTO:
        """
        Handle retry fulfillment command.

        Args:
            command: RetryFulfillmentCommand

        Returns:
            RetryResultDTO with fulfilled and still-waiting counts
        """
        waiting = await self.order_repository.find_awaiting_stock(command.tier)
        fulfilled = 0

        for position, order in enumerate(waiting):
            _, assignment = await self.fulfillment_service.fulfill(order)
            if assignment is None:
                # Pool is empty again; later orders keep their place.
                remaining = len(waiting) - position
                break
            fulfilled += 1
        else:
            remaining = 0

        if waiting:
            logger.info(
                "Fulfillment retried",
                extra={
                    "tier": command.tier.value,
                    "fulfilled": fulfilled,
                    "waiting": remaining,
                },
            )
        return RetryResultDTO(tier=command.tier.value, fulfilled=fulfilled, waiting=remaining)
