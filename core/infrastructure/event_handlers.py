"""
Event handlers for domain events.

These handlers process domain events for side effects like audit logging
and re-driving orders that wait for stock.
"""

import logging

from allocations.domain.events import AllocationOutOfStock, KeyAssigned
from core.domain.events import DomainEvent, EventHandler
from inventory.domain.events import KeyRemoved, KeysIngested
from orders.domain.events import OrderCreated, OrderFulfilled, OrderPaymentFailed

logger = logging.getLogger(__name__)

AUDITED_EVENTS = (
    KeysIngested,
    KeyRemoved,
    KeyAssigned,
    AllocationOutOfStock,
    OrderCreated,
    OrderPaymentFailed,
    OrderFulfilled,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every inventory and order event to the audit logger.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
                "data": event.payload(),
            },
        )


class RestockFulfillmentHandler(EventHandler):
    """
    Event handler re-driving out-of-stock orders of a restocked tier.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle KeysIngested by retrying the tier's waiting orders.

        Args:
            event: KeysIngested event
        """
        from orders.application.commands.retry_fulfillment import RetryFulfillmentCommand
        from orders.application.handlers.retry_fulfillment_handler import (
            RetryFulfillmentHandler,
        )
        from allocations.infrastructure.repositories.django_assignment_ledger import (
            DjangoAssignmentLedger,
        )
        from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
        from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry
        from orders.infrastructure.repositories.django_order_repository import (
            DjangoOrderRepository,
        )

        ledger = DjangoAssignmentLedger(DjangoPoolRegistry(DjangoDeduplicator()))
        handler = RetryFulfillmentHandler(DjangoOrderRepository(), ledger)
        result = await handler.handle(RetryFulfillmentCommand(tier=event.tier))

        if result.fulfilled:
            logger.info(
                "Restock fulfilled waiting orders",
                extra={"tier": result.tier, "fulfilled": result.fulfilled, "waiting": result.waiting},
            )


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, audit_handler)

    event_bus.subscribe(KeysIngested, RestockFulfillmentHandler())

    logger.info("Event handlers registered")
