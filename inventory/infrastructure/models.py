"""
KeyPool, PoolKey and SeenKey models.
"""
from django.db import models

TIER_CHOICES = [
    ("1 day", "1 Day"),
    ("7 days", "7 Days"),
    ("30 days", "30 Days"),
]


class KeyPool(models.Model):
    """
    One row per tier.

    The row is locked (SELECT ... FOR UPDATE) by every mutation of the tier.
    """

    tier = models.CharField(max_length=16, primary_key=True, choices=TIER_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "key_pools"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.tier} pool"


class PoolKey(models.Model):
    """
    An activation key stocked in a tier.

    Rows are never deleted: removal and assignment only change the status.
    """

    STATUS_CHOICES = [
        ("available", "Available"),
        ("assigned", "Assigned"),
        ("removed", "Removed"),
    ]

    id = models.BigAutoField(primary_key=True)
    value = models.CharField(max_length=255, unique=True)
    pool = models.ForeignKey(
        KeyPool, on_delete=models.PROTECT, related_name="keys", db_column="tier"
    )
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="available")
    added_at = models.DateTimeField()
    status_changed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "pool_keys"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["pool", "status"], name="pool_keys_tier_status_idx"),
        ]

    def __str__(self):
        return f"{self.pool_id}: ****{self.value[-4:]}"


class SeenKey(models.Model):
    """
    Append-only memory of every key value ever accepted.
    """

    value = models.CharField(max_length=255, primary_key=True)
    first_tier = models.CharField(max_length=16, choices=TIER_CHOICES)
    first_seen_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "seen_keys"
        ordering = ["first_seen_at"]

    def __str__(self):
        return f"****{self.value[-4:]}"
