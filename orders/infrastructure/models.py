"""
Order model.
"""
import uuid

from django.db import models
from django.utils import timezone

from inventory.infrastructure.models import TIER_CHOICES


class Order(models.Model):
    """
    A purchase of one key of a tier.
    """

    PAYMENT_STATUS_CHOICES = [
        ("pending", "Pending"),
        ("paid", "Paid"),
        ("failed", "Failed"),
    ]

    FULFILLMENT_STATUS_CHOICES = [
        ("pending_payment", "Pending payment"),
        ("fulfilling", "Fulfilling"),
        ("fulfilled", "Fulfilled"),
        ("out_of_stock", "Out of stock"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=128, db_index=True)
    product_type = models.CharField(max_length=64)
    tier = models.CharField(max_length=16, choices=TIER_CHOICES)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3)
    payment_method = models.CharField(max_length=32)
    payment_status = models.CharField(
        max_length=16, choices=PAYMENT_STATUS_CHOICES, default="pending"
    )
    fulfillment_status = models.CharField(
        max_length=20, choices=FULFILLMENT_STATUS_CHOICES, default="pending_payment"
    )
    payment_event_id = models.CharField(max_length=128, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    paid_at = models.DateTimeField(null=True, blank=True)
    fulfilled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["tier", "fulfillment_status"], name="orders_tier_fulfillment_idx"),
            models.Index(fields=["user_id", "-created_at"], name="orders_user_recent_idx"),
        ]

    def __str__(self):
        return f"{self.id} ({self.tier}, {self.fulfillment_status})"
