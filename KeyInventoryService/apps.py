"""
App configuration for Key Inventory Service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class KeyInventoryServiceConfig(AppConfig):
    """App configuration for KeyInventoryService."""

    name = "KeyInventoryService"
    verbose_name = "Key Inventory Service"

    def ready(self):
        """Called when Django starts."""
        from core.infrastructure.event_handlers import register_event_handlers

        # Subscriptions are idempotent; ready() may run more than once
        register_event_handlers()

        if settings.OBSERVABILITY_ENABLED and not getattr(self, "_observability_ready", False):
            from core.instrumentation import setup_opentelemetry

            logger.info("Setting up observability...")
            setup_opentelemetry()
            self._observability_ready = True
