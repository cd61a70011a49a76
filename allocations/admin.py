"""
Django admin configuration for allocations app.
"""
from django.contrib import admin

from allocations.infrastructure.models import Assignment
from inventory.admin import ReadOnlyAdmin


@admin.register(Assignment)
class AssignmentAdmin(ReadOnlyAdmin):
    """Admin interface for the append-only assignment ledger."""

    list_display = ["order_id", "user_id", "tier", "product_type", "assigned_at", "expires_at"]
    list_filter = ["tier", "product_type", "assigned_at"]
    search_fields = ["order_id", "user_id", "key_value"]
    date_hierarchy = "assigned_at"
