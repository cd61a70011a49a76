"""
Django implementation of AssignmentLedger port.

This adapter converts between domain entities and Django ORM models.
"""
import logging
from typing import Dict, List, Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import IntegrityError
from django.db.models import Count

from allocations.domain.assignment import Assignment
from allocations.infrastructure.models import Assignment as AssignmentModel
from allocations.ports.assignment_ledger import AssignmentLedger
from core.domain.exceptions import OutOfStockError
from core.domain.value_objects import KeyValue, Tier
from inventory.infrastructure.locking import exclusive
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry

logger = logging.getLogger(__name__)


class DjangoAssignmentLedger(AssignmentLedger):
    """
    Django ORM implementation of AssignmentLedger.

    Allocation draws from the pool registry and appends to the ledger in
    one transaction, under the tier's critical section.
    """

    def __init__(self, pool_registry: DjangoPoolRegistry):
        self.pool_registry = pool_registry

    def _to_domain(self, model: AssignmentModel) -> Assignment:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Assignment model

        Returns:
            Assignment domain entity
        """
        return Assignment(
            id=model.id,
            order_id=model.order_id,
            user_id=model.user_id,
            key_value=KeyValue(model.key_value),
            tier=Tier(model.tier),
            product_type=model.product_type,
            assigned_at=model.assigned_at,
            expires_at=model.expires_at,
        )

    def _to_model(self, assignment: Assignment) -> AssignmentModel:
        return AssignmentModel(
            id=assignment.id,
            order_id=assignment.order_id,
            user_id=assignment.user_id,
            key_value=str(assignment.key_value),
            tier=assignment.tier.value,
            product_type=assignment.product_type,
            assigned_at=assignment.assigned_at,
            expires_at=assignment.expires_at,
        )

    def _find_by_order(self, order_id: str) -> Optional[Assignment]:
        model = AssignmentModel.objects.filter(  # pylint: disable=no-member
            order_id=str(order_id)
        ).first()
        return self._to_domain(model) if model else None

    def _allocate(
        self, tier: Tier, order_id: str, user_id: str, product_type: str
    ) -> Tuple[Assignment, bool]:
        with exclusive(tier):
            existing = self._find_by_order(order_id)
            if existing is not None:
                return existing, False

            key = self.pool_registry.take_available(tier)
            if key is None:
                raise OutOfStockError(f"No keys available in tier {tier.value}")

            assignment = Assignment.create(
                order_id=order_id,
                user_id=user_id,
                key_value=str(key.value),
                tier=tier,
                product_type=product_type,
                assigned_at=key.status_changed_at,
            )
            self._to_model(assignment).save(force_insert=True)

        logger.info(
            "Key assigned",
            extra={
                "order_id": assignment.order_id,
                "tier": tier.value,
                "key": assignment.key_hint,
            },
        )
        return assignment, True

    async def allocate(
        self, tier: Tier, order_id: str, user_id: str, product_type: str
    ) -> Tuple[Assignment, bool]:
        """
        Take one available key of the tier and record it against the order.

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
        try:
            return await sync_to_async(self._allocate)(tier, order_id, user_id, product_type)
        except IntegrityError:
            # The same order was allocated concurrently under another tier lock;
            # the transaction rolled back, so the key stays available.
            existing = await self.find_by_order(order_id)
            if existing is None:
                raise
            logger.warning(
                "Concurrent allocation for order resolved to existing assignment",
                extra={"order_id": order_id},
            )
            return existing, False

    @sync_to_async
    def find_by_order(self, order_id: str) -> Optional[Assignment]:
        """
        Find the assignment of an order.

        Args:
            order_id: Order identifier

        Returns:
            Assignment if found, None otherwise
        """
        return self._find_by_order(order_id)

    @sync_to_async
    def find_by_user(self, user_id: str) -> List[Assignment]:
        """
        List a user's assignments, newest first.

        Args:
            user_id: User identifier

        Returns:
            List of Assignment entities
        """
        models = AssignmentModel.objects.filter(  # pylint: disable=no-member
            user_id=str(user_id)
        ).order_by("-assigned_at", "-id")
        return [self._to_domain(model) for model in models]

    async def available_count(self, tier: Tier) -> int:
        return await self.pool_registry.available_count(tier)

    @sync_to_async
    def assigned_counts(self) -> Dict[Tier, int]:
        rows = (
            AssignmentModel.objects.values("tier")  # pylint: disable=no-member
            .annotate(total=Count("id"))
            .order_by()
        )
        return {Tier(row["tier"]): row["total"] for row in rows}
