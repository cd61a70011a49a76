"""
Django admin configuration for inventory app.

Pools are browsed here; every change goes through the API so it runs in
the tier's critical section.
"""
from django.contrib import admin
from django.utils.html import format_html

from inventory.infrastructure.models import KeyPool, PoolKey, SeenKey


class ReadOnlyAdmin(admin.ModelAdmin):
    """Admin without add, change or delete permissions."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(KeyPool)
class KeyPoolAdmin(ReadOnlyAdmin):
    """Admin interface for KeyPool model."""

    list_display = ["tier", "available_count", "created_at"]

    def available_count(self, obj):
        """Display number of available keys in the tier."""
        return obj.keys.filter(status="available").count()

    available_count.short_description = "Available"


@admin.register(PoolKey)
class PoolKeyAdmin(ReadOnlyAdmin):
    """Admin interface for PoolKey model."""

    list_display = ["masked_value", "pool", "status_display", "added_at", "status_changed_at"]
    list_filter = ["pool", "status", "added_at"]
    search_fields = ["value"]

    def masked_value(self, obj):
        return f"****{obj.value[-4:]}"

    masked_value.short_description = "Key"

    def status_display(self, obj):
        """Display status with color coding."""
        colors = {
            "available": "green",
            "assigned": "blue",
            "removed": "gray",
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors.get(obj.status, "black"),
            obj.status.upper(),
        )

    status_display.short_description = "Status"


@admin.register(SeenKey)
class SeenKeyAdmin(ReadOnlyAdmin):
    """Admin interface for SeenKey model."""

    list_display = ["__str__", "first_tier", "first_seen_at"]
    list_filter = ["first_tier"]
    search_fields = ["value"]
