"""
Django management command to re-drive orders waiting for stock.

Restocks trigger this automatically; the command covers restocks that
happened while the service was down.
"""

import asyncio

from django.core.management.base import BaseCommand, CommandError

from allocations.infrastructure.repositories.django_assignment_ledger import (
    DjangoAssignmentLedger,
)
from core.domain.exceptions import InvalidTierError
from core.domain.value_objects import Tier
from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry
from orders.application.commands.retry_fulfillment import RetryFulfillmentCommand
from orders.application.handlers.retry_fulfillment_handler import RetryFulfillmentHandler
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository


class Command(BaseCommand):
    """Command to retry fulfillment of out-of-stock orders."""

    help = "Retry fulfillment of out-of-stock orders, oldest first"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--tier",
            type=str,
            default=None,
            help="Only retry this tier (default: every tier)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        try:
            tiers = [Tier.parse(options["tier"])] if options["tier"] else list(Tier)
        except InvalidTierError as e:
            raise CommandError(e.message) from e

        ledger = DjangoAssignmentLedger(DjangoPoolRegistry(DjangoDeduplicator()))
        handler = RetryFulfillmentHandler(DjangoOrderRepository(), ledger)

        async def retry():
            return [await handler.handle(RetryFulfillmentCommand(tier=tier)) for tier in tiers]

        for result in asyncio.run(retry()):
            # pylint: disable=no-member
            style = self.style.SUCCESS if result.waiting == 0 else self.style.WARNING
            self.stdout.write(
                style(f"{result.tier}: fulfilled {result.fulfilled}, still waiting {result.waiting}")
            )
