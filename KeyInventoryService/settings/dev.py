"""
Development settings for KeyInventoryService.
"""

import os

from .base import *  # noqa: F403, F401
from .logging import get_logging_config

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Database - PostgreSQL by default, DB_ENGINE=sqlite for a local file
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

ADMIN_API_KEY = os.environ.get("ADMIN_API_KEY", "dev-admin-key")
PAYMENTS_API_KEY = os.environ.get("PAYMENTS_API_KEY", "dev-payments-key")

LOGGING = get_logging_config("development")
