"""
Admin inventory API views.

These endpoints are used by store operators to:
- Bulk-load keys into a tier
- Inspect and prune pools
- Read inventory statistics and look up issued keys
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from allocations.application.handlers.get_assignment_handler import GetAssignmentHandler
from allocations.application.queries.get_assignment import GetAssignmentQuery
from allocations.infrastructure.repositories.django_assignment_ledger import (
    DjangoAssignmentLedger,
)
from api.exceptions import validation_error_response
from api.v1.admin.serializers import (
    AddKeysRequestSerializer,
    AssignmentSerializer,
    IngestResultSerializer,
    KeyStatsSerializer,
    PoolSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from inventory.application.commands.add_keys import AddKeysCommand
from inventory.application.commands.remove_key import RemoveKeyCommand
from inventory.application.handlers.add_keys_handler import AddKeysHandler
from inventory.application.handlers.get_key_stats_handler import GetKeyStatsHandler
from inventory.application.handlers.get_pool_handler import GetPoolHandler
from inventory.application.handlers.remove_key_handler import RemoveKeyHandler
from inventory.application.queries.get_key_stats import GetKeyStatsQuery
from inventory.application.queries.get_pool import GetPoolQuery
from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry

# Initialize repositories (in production, use DI container)
_deduplicator = DjangoDeduplicator()
_pool_registry = DjangoPoolRegistry(_deduplicator)
_ledger = DjangoAssignmentLedger(_pool_registry)

tracer = get_tracer(__name__)

ADMIN_KEY_HEADER = OpenApiParameter(
    name="X-Admin-Key",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Admin service key",
)


class KeyStatsView(APIView):
    """View for inventory statistics."""

    @extend_schema(
        operation_id="get_key_stats",
        summary="Key Stats",
        description="Available keys per tier, assigned keys per tier and the assigned total.",
        tags=["Admin API"],
        parameters=[ADMIN_KEY_HEADER],
        responses={200: KeyStatsSerializer, 401: {"description": "Unauthorized"}},
    )
    def get(self, request: Request) -> Response:
        """Get key stats."""
        return async_to_sync(self._handle_get_stats)(request)

    async def _handle_get_stats(self, request: Request) -> Response:
        """Async handler for key stats."""
        with tracer.start_as_current_span("get_key_stats") as span:
            handler = GetKeyStatsHandler(pool_registry=_pool_registry, ledger=_ledger)
            result = await handler.handle(GetKeyStatsQuery())

            span.set_attribute("keys.total_assigned", result.total_assigned)
            span.set_status(Status(StatusCode.OK))
            return Response(KeyStatsSerializer(result).data, status=status.HTTP_200_OK)


class AddKeysView(APIView):
    """View for bulk-loading keys into a tier."""

    @extend_schema(
        operation_id="add_keys",
        summary="Add Keys",
        description=(
            "Add keys to a tier's pool. Blank lines are ignored and surrounding whitespace "
            "is trimmed. Keys ever seen before, in any tier, count as duplicates."
        ),
        tags=["Admin API"],
        parameters=[ADMIN_KEY_HEADER],
        request=AddKeysRequestSerializer,
        responses={
            200: IngestResultSerializer,
            400: {"description": "Bad Request or unknown tier"},
            401: {"description": "Unauthorized"},
        },
    )
    def post(self, request: Request) -> Response:
        """Bulk add keys."""
        return async_to_sync(self._handle_add_keys)(request)

    async def _handle_add_keys(self, request: Request) -> Response:
        """Async handler for bulk add."""
        with tracer.start_as_current_span("add_keys") as span:
            serializer = AddKeysRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            span.set_attribute("tier", serializer.validated_data["tier"])
            span.set_attribute("keys.submitted", len(serializer.validated_data["keys"]))

            handler = AddKeysHandler(pool_registry=_pool_registry)
            result = await handler.handle(
                AddKeysCommand(
                    tier=serializer.validated_data["tier"],
                    keys=serializer.validated_data["keys"],
                )
            )

            span.set_attribute("keys.added", result.added)
            span.set_attribute("keys.duplicates", result.duplicates)
            span.set_status(Status(StatusCode.OK))
            return Response(IngestResultSerializer(result).data, status=status.HTTP_200_OK)


class PoolView(APIView):
    """View for a tier's available keys."""

    @extend_schema(
        operation_id="get_pool",
        summary="Get Pool",
        description="List the available keys of a tier in insertion order.",
        tags=["Admin API"],
        parameters=[
            ADMIN_KEY_HEADER,
            OpenApiParameter(name="tier", type=str, location=OpenApiParameter.PATH),
        ],
        responses={
            200: PoolSerializer,
            400: {"description": "Unknown tier"},
            401: {"description": "Unauthorized"},
        },
    )
    def get(self, request: Request, tier: str) -> Response:
        """Get a tier's pool."""
        return async_to_sync(self._handle_get_pool)(request, tier)

    async def _handle_get_pool(self, request: Request, tier: str) -> Response:
        """Async handler for pool listing."""
        with tracer.start_as_current_span("get_pool") as span:
            span.set_attribute("tier", tier)

            handler = GetPoolHandler(pool_registry=_pool_registry)
            result = await handler.handle(GetPoolQuery(tier=tier))

            span.set_attribute("pool.count", result.count)
            span.set_status(Status(StatusCode.OK))
            return Response(PoolSerializer(result).data, status=status.HTTP_200_OK)


class PoolKeyView(APIView):
    """View for withdrawing a key from a tier."""

    @extend_schema(
        operation_id="remove_key",
        summary="Remove Key",
        description="Remove an available key from a tier. Assigned keys cannot be removed.",
        tags=["Admin API"],
        parameters=[
            ADMIN_KEY_HEADER,
            OpenApiParameter(name="tier", type=str, location=OpenApiParameter.PATH),
            OpenApiParameter(name="key", type=str, location=OpenApiParameter.PATH),
        ],
        responses={
            204: None,
            400: {"description": "Unknown tier"},
            401: {"description": "Unauthorized"},
            404: {"description": "Key not available in this tier"},
            409: {"description": "Key already assigned"},
        },
    )
    def delete(self, request: Request, tier: str, key: str) -> Response:
        """Remove a key."""
        return async_to_sync(self._handle_remove_key)(request, tier, key)

    async def _handle_remove_key(self, request: Request, tier: str, key: str) -> Response:
        """Async handler for key removal."""
        with tracer.start_as_current_span("remove_key") as span:
            span.set_attribute("tier", tier)

            handler = RemoveKeyHandler(pool_registry=_pool_registry)
            removed = await handler.handle(RemoveKeyCommand(tier=tier, key=key))

            span.set_attribute("key.hint", removed.hint)
            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class AssignmentView(APIView):
    """View for looking up the key issued to an order."""

    @extend_schema(
        operation_id="get_assignment",
        summary="Get Assignment",
        tags=["Admin API"],
        parameters=[
            ADMIN_KEY_HEADER,
            OpenApiParameter(name="order_id", type=str, location=OpenApiParameter.PATH),
        ],
        responses={
            200: AssignmentSerializer,
            401: {"description": "Unauthorized"},
            404: {"description": "No assignment for this order"},
        },
    )
    def get(self, request: Request, order_id: str) -> Response:
        """Get an order's assignment."""
        return async_to_sync(self._handle_get_assignment)(request, order_id)

    async def _handle_get_assignment(self, request: Request, order_id: str) -> Response:
        """Async handler for assignment lookup."""
        with tracer.start_as_current_span("get_assignment") as span:
            span.set_attribute("order_id", order_id)

            handler = GetAssignmentHandler(ledger=_ledger)
            result = await handler.handle(GetAssignmentQuery(order_id=order_id))

            span.set_status(Status(StatusCode.OK))
            return Response(AssignmentSerializer(result).data, status=status.HTTP_200_OK)
