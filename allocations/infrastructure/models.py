"""
Assignment model.
"""
import uuid

from django.db import models

from inventory.infrastructure.models import TIER_CHOICES


class Assignment(models.Model):
    """
    Append-only ledger row binding one order to one key.

    Both the order and the key are unique: a second row for either is
    rejected by the database.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_id = models.CharField(max_length=64, unique=True)
    user_id = models.CharField(max_length=128, db_index=True)
    key_value = models.CharField(max_length=255, unique=True)
    tier = models.CharField(max_length=16, choices=TIER_CHOICES)
    product_type = models.CharField(max_length=64)
    assigned_at = models.DateTimeField()
    expires_at = models.DateTimeField()

    class Meta:
        db_table = "assignments"
        ordering = ["-assigned_at"]
        indexes = [
            models.Index(fields=["user_id", "-assigned_at"], name="assignments_user_recent_idx"),
            models.Index(fields=["tier"], name="assignments_tier_idx"),
        ]

    def __str__(self):
        return f"{self.order_id} -> ****{self.key_value[-4:]}"
