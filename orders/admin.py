"""
Django admin configuration for orders app.
"""
from django.contrib import admin

from inventory.admin import ReadOnlyAdmin
from orders.infrastructure.models import Order


@admin.register(Order)
class OrderAdmin(ReadOnlyAdmin):
    """Admin interface for Order model."""

    list_display = [
        "id",
        "user_id",
        "tier",
        "amount",
        "currency",
        "payment_status",
        "fulfillment_status",
        "created_at",
    ]
    list_filter = ["tier", "payment_status", "fulfillment_status", "payment_method"]
    search_fields = ["id", "user_id"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "user_id", "product_type", "tier"),
            },
        ),
        (
            "Payment",
            {
                "fields": (
                    "amount",
                    "currency",
                    "payment_method",
                    "payment_status",
                    "payment_event_id",
                ),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("fulfillment_status", "created_at", "paid_at", "fulfilled_at"),
                "classes": ("collapse",),
            },
        ),
    )
