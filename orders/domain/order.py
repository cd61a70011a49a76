"""
Order domain entity.

Tracks an order through payment and key fulfillment. Fulfillment moves
pending_payment -> fulfilling -> fulfilled | out_of_stock, and an
out_of_stock order may go back to fulfilling once its tier is restocked.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from core.domain.exceptions import InvalidOrderStateError
from core.domain.value_objects import FulfillmentStatus, PaymentStatus, Tier


@dataclass(frozen=True)
class Order:
    """
    Order domain entity.

    Immutable; every transition returns a new instance.
    """

    id: uuid.UUID
    user_id: str
    product_type: str
    tier: Tier
    amount: Decimal
    currency: str
    payment_method: str
    payment_status: PaymentStatus
    fulfillment_status: FulfillmentStatus
    created_at: datetime
    paid_at: Optional[datetime] = None
    fulfilled_at: Optional[datetime] = None
    payment_event_id: Optional[str] = None

    def __post_init__(self):
        """Validate order entity."""
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.product_type:
            raise ValueError("Product type is required")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter code")

    @classmethod
    def create(
        cls,
        user_id: str,
        product_type: str,
        tier: Tier,
        amount: Decimal,
        currency: str,
        payment_method: str,
        order_id: Optional[uuid.UUID] = None,
    ) -> "Order":
        """
        Create a new order awaiting payment.

        Args:
            user_id: Buyer
            product_type: Product being bought
            tier: Key duration tier
            amount: Price charged
            currency: ISO currency code
            payment_method: Payment rail chosen by the buyer
            order_id: Optional UUID (generated if not provided)

        Returns:
            Order entity instance
        """
        return cls(
            id=order_id or uuid.uuid4(),
            user_id=str(user_id),
            product_type=product_type,
            tier=tier,
            amount=Decimal(amount),
            currency=currency.upper(),
            payment_method=payment_method,
            payment_status=PaymentStatus.PENDING,
            fulfillment_status=FulfillmentStatus.PENDING_PAYMENT,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_fulfilled(self) -> bool:
        return self.fulfillment_status == FulfillmentStatus.FULFILLED

    @property
    def awaits_stock(self) -> bool:
        return self.fulfillment_status == FulfillmentStatus.OUT_OF_STOCK

    def mark_paid(self, event_id: Optional[str] = None) -> "Order":
        """
        Record a confirmed payment and start fulfillment.

        A repeated confirmation leaves a paid order unchanged.

        Returns:
            New Order instance in fulfilling state
        """
        if self.payment_status == PaymentStatus.PAID:
            return self
        if self.payment_status == PaymentStatus.FAILED:
            raise InvalidOrderStateError(f"Order {self.id} payment already failed")
        return replace(
            self,
            payment_status=PaymentStatus.PAID,
            fulfillment_status=FulfillmentStatus.FULFILLING,
            paid_at=datetime.now(timezone.utc),
            payment_event_id=event_id,
        )

    def mark_payment_failed(self, event_id: Optional[str] = None) -> "Order":
        """
        Record a failed payment. The order is never fulfilled afterwards.

        Returns:
            New Order instance with failed payment status
        """
        if self.payment_status == PaymentStatus.FAILED:
            return self
        if self.payment_status == PaymentStatus.PAID:
            raise InvalidOrderStateError(f"Order {self.id} is already paid")
        return replace(self, payment_status=PaymentStatus.FAILED, payment_event_id=event_id)

    def mark_fulfilled(self, fulfilled_at: Optional[datetime] = None) -> "Order":
        """
        Record that a key was issued.

        Returns:
            New Order instance in fulfilled state
        """
        if self.is_fulfilled:
            return self
        if self.fulfillment_status != FulfillmentStatus.FULFILLING:
            raise InvalidOrderStateError(
                f"Order {self.id} cannot be fulfilled from {self.fulfillment_status}"
            )
        return replace(
            self,
            fulfillment_status=FulfillmentStatus.FULFILLED,
            fulfilled_at=fulfilled_at or datetime.now(timezone.utc),
        )

    def mark_out_of_stock(self) -> "Order":
        """
        Record that the tier was empty when fulfillment ran.

        Returns:
            New Order instance in out_of_stock state
        """
        if self.fulfillment_status != FulfillmentStatus.FULFILLING:
            raise InvalidOrderStateError(
                f"Order {self.id} cannot go out of stock from {self.fulfillment_status}"
            )
        return replace(self, fulfillment_status=FulfillmentStatus.OUT_OF_STOCK)

    def retry_fulfillment(self) -> "Order":
        """
        Put an out-of-stock order back into fulfillment.

        Returns:
            New Order instance in fulfilling state
        """
        if not self.awaits_stock:
            raise InvalidOrderStateError(
                f"Order {self.id} is not waiting for stock ({self.fulfillment_status})"
            )
        return replace(self, fulfillment_status=FulfillmentStatus.FULFILLING)
