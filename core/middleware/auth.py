"""
Header authentication middleware.

This middleware guards the admin and payment-event APIs with shared service
keys and requires the gateway-provided user id on user-facing APIs.
"""

import hashlib
import logging
import secrets
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/api/v1/admin/"
PAYMENTS_PREFIX = "/api/v1/payments/"
USER_PREFIXES = ("/api/v1/orders", "/api/v1/account/")

MAX_USER_ID_LENGTH = 128


def _digest(value: str) -> bytes:
    return hashlib.sha256(value.encode()).digest()


def _unauthorized(message: str) -> JsonResponse:
    return JsonResponse({"error": {"code": "UNAUTHORIZED", "message": message}}, status=401)


class HeaderAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for header based authentication.

    This middleware:
    1. Validates X-Admin-Key for admin APIs (/api/v1/admin/*)
    2. Validates X-Payments-Key for payment events (/api/v1/payments/*)
    3. Requires X-User-ID for order and account APIs
    4. Returns 401 Unauthorized if authentication fails
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if request.path.startswith(ADMIN_PREFIX):
            return self._authenticate_service(
                request, "X-Admin-Key", settings.ADMIN_API_KEY, "admin"
            )

        if request.path.startswith(PAYMENTS_PREFIX):
            return self._authenticate_service(
                request, "X-Payments-Key", settings.PAYMENTS_API_KEY, "payments"
            )

        if request.path.startswith(USER_PREFIXES):
            return self._authenticate_user(request)

        return None

    def _authenticate_service(
        self, request: HttpRequest, header: str, expected: str, caller: str
    ) -> Optional[HttpResponse]:
        """
        Compare a service key header with its configured value.

        Args:
            request: HTTP request
            header: Header carrying the key
            expected: Configured key
            caller: Caller label for logs

        Returns:
            HttpResponse with 401 if auth fails, None if successful
        """
        provided = request.headers.get(header, "")
        if not provided:
            return _unauthorized(f"Missing {header} header")

        if not expected:
            logger.error("Service key not configured", extra={"caller": caller})
            return _unauthorized("Authentication not configured")

        if not secrets.compare_digest(_digest(provided), _digest(expected)):
            logger.warning(
                "Invalid service key attempted",
                extra={"caller": caller, "path": request.path},
            )
            return _unauthorized(f"Invalid {header}")

        request.service_caller = caller  # type: ignore
        return None

    def _authenticate_user(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Read the user id forwarded by the gateway.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if the header is absent, None if successful
        """
        user_id = request.headers.get("X-User-ID", "").strip()
        if not user_id:
            return _unauthorized("Missing X-User-ID header")
        if len(user_id) > MAX_USER_ID_LENGTH:
            return _unauthorized("Invalid X-User-ID header")

        request.user_id = user_id  # type: ignore
        return None
