"""
Order DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from allocations.application.dto.assignment_dto import AssignmentDTO
from orders.domain.order import Order


@dataclass
class OrderDTO:
    """DTO for order information."""

    id: uuid.UUID
    user_id: str
    product_type: str
    tier: str
    amount: str
    currency: str
    payment_method: str
    payment_status: str
    fulfillment_status: str
    created_at: datetime
    paid_at: Optional[datetime]
    fulfilled_at: Optional[datetime]

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            user_id=order.user_id,
            product_type=order.product_type,
            tier=order.tier.value,
            amount=f"{order.amount:.2f}",
            currency=order.currency,
            payment_method=order.payment_method,
            payment_status=order.payment_status.value,
            fulfillment_status=order.fulfillment_status.value,
            created_at=order.created_at,
            paid_at=order.paid_at,
            fulfilled_at=order.fulfilled_at,
        )


@dataclass
class PaymentResultDTO:
    """DTO for the outcome of a payment event."""

    order: OrderDTO
    assignment: Optional[AssignmentDTO] = None

    @property
    def out_of_stock(self) -> bool:
        return self.order.fulfillment_status == "out_of_stock"


@dataclass
class RetryResultDTO:
    """DTO for a fulfillment re-drive."""

    tier: str
    fulfilled: int
    waiting: int
