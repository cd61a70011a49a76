"""
Django implementation of OrderRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import logging
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import transaction

from core.domain.value_objects import FulfillmentStatus, PaymentStatus, Tier
from orders.domain.order import Order
from orders.infrastructure.models import Order as OrderModel
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DjangoOrderRepository(OrderRepository):
    """
    Django ORM implementation of OrderRepository.

    A stored fulfilled order is never moved out of fulfilled, whatever a
    concurrent writer saves afterwards.
    """

    def _to_domain(self, model: OrderModel) -> Order:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Order model

        Returns:
            Order domain entity
        """
        return Order(
            id=model.id,
            user_id=model.user_id,
            product_type=model.product_type,
            tier=Tier(model.tier),
            amount=model.amount,
            currency=model.currency,
            payment_method=model.payment_method,
            payment_status=PaymentStatus(model.payment_status),
            fulfillment_status=FulfillmentStatus(model.fulfillment_status),
            created_at=model.created_at,
            paid_at=model.paid_at,
            fulfilled_at=model.fulfilled_at,
            payment_event_id=model.payment_event_id,
        )

    def _copy_to_model(self, order: Order, model: OrderModel) -> OrderModel:
        model.user_id = order.user_id
        model.product_type = order.product_type
        model.tier = order.tier.value
        model.amount = order.amount
        model.currency = order.currency
        model.payment_method = order.payment_method
        model.payment_status = order.payment_status.value
        model.fulfillment_status = order.fulfillment_status.value
        model.created_at = order.created_at
        model.paid_at = order.paid_at
        model.fulfilled_at = order.fulfilled_at
        model.payment_event_id = order.payment_event_id
        return model

    @sync_to_async
    def save(self, order: Order) -> Order:
        """
        Save an order (create or update).

        Args:
            order: Order entity to save

        Returns:
            Saved Order entity, or the stored one if it was already fulfilled
        """
        with transaction.atomic():
            model = (
                OrderModel.objects.select_for_update()  # pylint: disable=no-member
                .filter(id=order.id)
                .first()
            )
            if model is None:
                model = OrderModel(id=order.id)
            elif (
                model.fulfillment_status == FulfillmentStatus.FULFILLED.value
                and not order.is_fulfilled
            ):
                logger.info(
                    "Order already fulfilled, keeping stored state",
                    extra={"order_id": str(order.id)},
                )
                return self._to_domain(model)

            self._copy_to_model(order, model).save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, order_id: uuid.UUID) -> Optional[Order]:
        """
        Find order by ID.

        Args:
            order_id: Order UUID

        Returns:
            Order if found, None otherwise
        """
        try:
            model = OrderModel.objects.get(id=order_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except OrderModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_by_user(self, user_id: str) -> List[Order]:
        models = OrderModel.objects.filter(  # pylint: disable=no-member
            user_id=str(user_id)
        ).order_by("-created_at")
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def find_awaiting_stock(self, tier: Tier) -> List[Order]:
        """
        List out-of-stock orders of a tier, oldest first.

        Args:
            tier: Tier to inspect

        Returns:
            List of Order entities
        """
        models = OrderModel.objects.filter(  # pylint: disable=no-member
            tier=tier.value,
            fulfillment_status=FulfillmentStatus.OUT_OF_STOCK.value,
        ).order_by("created_at")
        return [self._to_domain(model) for model in models]
