"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    AssignmentNotFoundError,
    DomainException,
    InvalidOrderStateError,
    InvalidTierError,
    KeyAlreadyAssignedError,
    KeyNotFoundError,
    OrderNotFoundError,
    OutOfStockError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    ((KeyNotFoundError, AssignmentNotFoundError, OrderNotFoundError), status.HTTP_404_NOT_FOUND),
    (
        (KeyAlreadyAssignedError, OutOfStockError, InvalidOrderStateError),
        status.HTTP_409_CONFLICT,
    ),
    ((InvalidTierError,), status.HTTP_400_BAD_REQUEST),
)


def validation_error_response(errors: Dict[str, Any]) -> Response:
    """Build the 400 response for rejected request payloads."""
    return Response(
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request payload",
                "details": errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        detail = response.data.get("detail", exc.default_detail) if isinstance(
            response.data, dict
        ) else response.data
        response.data = {
            "error": {
                "code": str(getattr(exc, "default_code", "api_error")).upper().replace("-", "_"),
                "message": str(detail),
            }
        }
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _endpoint(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view else "unknown"


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    for exception_types, mapped_status in DOMAIN_STATUS_CODES:
        if isinstance(exc, exception_types):
            status_code = mapped_status
            break

    errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()
    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    errors_total.labels(error_type=type(exc).__name__, endpoint=_endpoint(context)).inc()
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
