"""
Store API views.

These endpoints are used by:
- Signed-in users (through the gateway) to place and read orders and keys
- The payment collaborator to report verified payment outcomes
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from allocations.application.handlers.list_user_keys_handler import ListUserKeysHandler
from allocations.application.queries.list_user_keys import ListUserKeysQuery
from allocations.infrastructure.repositories.django_assignment_ledger import (
    DjangoAssignmentLedger,
)
from api.exceptions import validation_error_response
from api.v1.store.serializers import (
    CreateOrderRequestSerializer,
    OrderSerializer,
    PaymentEventRequestSerializer,
    PaymentResultSerializer,
    UserKeySerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from inventory.infrastructure.repositories.django_deduplicator import DjangoDeduplicator
from inventory.infrastructure.repositories.django_pool_registry import DjangoPoolRegistry
from orders.application.commands.create_order import CreateOrderCommand
from orders.application.commands.record_payment import RecordPaymentCommand
from orders.application.handlers.create_order_handler import CreateOrderHandler
from orders.application.handlers.get_order_handler import GetOrderHandler
from orders.application.handlers.list_orders_handler import ListOrdersHandler
from orders.application.handlers.record_payment_handler import RecordPaymentHandler
from orders.application.queries.get_order import GetOrderQuery
from orders.application.queries.list_orders import ListOrdersQuery
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository

# Initialize repositories (in production, use DI container)
_order_repo = DjangoOrderRepository()
_ledger = DjangoAssignmentLedger(DjangoPoolRegistry(DjangoDeduplicator()))

tracer = get_tracer(__name__)

USER_ID_HEADER = OpenApiParameter(
    name="X-User-ID",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="User id forwarded by the gateway",
)


class OrdersView(APIView):
    """View for placing and listing the user's orders."""

    @extend_schema(
        operation_id="create_order",
        summary="Create Order",
        description="Place an order for one key of a tier. The order awaits payment.",
        tags=["Store API"],
        parameters=[USER_ID_HEADER],
        request=CreateOrderRequestSerializer,
        responses={
            201: OrderSerializer,
            400: {"description": "Bad Request or unknown tier"},
            401: {"description": "Unauthorized"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an order."""
        return async_to_sync(self._handle_create_order)(request)

    async def _handle_create_order(self, request: Request) -> Response:
        """Async handler for order creation."""
        with tracer.start_as_current_span("create_order") as span:
            serializer = CreateOrderRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            data = serializer.validated_data
            span.set_attribute("user_id", request.user_id)
            span.set_attribute("tier", data["tier"])

            handler = CreateOrderHandler(order_repository=_order_repo)
            result = await handler.handle(
                CreateOrderCommand(
                    user_id=request.user_id,
                    product_type=data["productType"],
                    tier=data["tier"],
                    amount=data["amount"],
                    currency=data["currency"],
                    payment_method=data["paymentMethod"],
                )
            )

            span.set_attribute("order.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(OrderSerializer(result).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="list_orders",
        summary="List Orders",
        tags=["Store API"],
        parameters=[USER_ID_HEADER],
        responses={200: OrderSerializer(many=True), 401: {"description": "Unauthorized"}},
    )
    def get(self, request: Request) -> Response:
        """List the user's orders."""
        return async_to_sync(self._handle_list_orders)(request)

    async def _handle_list_orders(self, request: Request) -> Response:
        with tracer.start_as_current_span("list_orders") as span:
            span.set_attribute("user_id", request.user_id)

            handler = ListOrdersHandler(order_repository=_order_repo)
            orders = await handler.handle(ListOrdersQuery(user_id=request.user_id))

            span.set_attribute("orders.count", len(orders))
            return Response(
                {"orders": OrderSerializer(orders, many=True).data}, status=status.HTTP_200_OK
            )


class OrderDetailView(APIView):
    """View for one of the user's orders."""

    @extend_schema(
        operation_id="get_order",
        summary="Get Order",
        tags=["Store API"],
        parameters=[USER_ID_HEADER],
        responses={
            200: OrderSerializer,
            401: {"description": "Unauthorized"},
            404: {"description": "Order not found"},
        },
    )
    def get(self, request: Request, order_id) -> Response:
        """Get an order."""
        return async_to_sync(self._handle_get_order)(request, order_id)

    async def _handle_get_order(self, request: Request, order_id) -> Response:
        with tracer.start_as_current_span("get_order") as span:
            span.set_attribute("order.id", str(order_id))

            handler = GetOrderHandler(order_repository=_order_repo)
            result = await handler.handle(GetOrderQuery(order_id=order_id, user_id=request.user_id))

            span.set_status(Status(StatusCode.OK))
            return Response(OrderSerializer(result).data, status=status.HTTP_200_OK)


class PaymentEventView(APIView):
    """View for verified payment outcomes."""

    @extend_schema(
        operation_id="record_payment_event",
        summary="Record Payment Event",
        description=(
            "Apply a verified payment outcome. A paid order is fulfilled immediately; "
            "when its tier is empty the order waits for stock and 202 is returned. "
            "Replays of a paid event return the key already issued. "
            "Requires the X-Payments-Key header."
        ),
        tags=["Payments API"],
        parameters=[
            OpenApiParameter(
                name="X-Payments-Key",
                type=str,
                location=OpenApiParameter.HEADER,
                required=True,
            )
        ],
        request=PaymentEventRequestSerializer,
        responses={
            200: PaymentResultSerializer,
            202: PaymentResultSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized"},
            404: {"description": "Order not found"},
            409: {"description": "Event contradicts the order's payment state"},
        },
    )
    def post(self, request: Request) -> Response:
        """Record a payment event."""
        return async_to_sync(self._handle_payment_event)(request)

    async def _handle_payment_event(self, request: Request) -> Response:
        """Async handler for payment events."""
        with tracer.start_as_current_span("record_payment_event") as span:
            serializer = PaymentEventRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            data = serializer.validated_data
            span.set_attribute("order.id", str(data["orderId"]))
            span.set_attribute("payment.status", data["status"])

            handler = RecordPaymentHandler(order_repository=_order_repo, ledger=_ledger)
            result = await handler.handle(
                RecordPaymentCommand(
                    order_id=data["orderId"],
                    status=data["status"],
                    event_id=data.get("eventId"),
                )
            )

            span.set_attribute("order.fulfillment_status", result.order.fulfillment_status)
            span.set_status(Status(StatusCode.OK))
            status_code = status.HTTP_202_ACCEPTED if result.out_of_stock else status.HTTP_200_OK
            return Response(PaymentResultSerializer(result).data, status=status_code)


class UserKeysView(APIView):
    """View for the keys issued to the user."""

    @extend_schema(
        operation_id="list_user_keys",
        summary="List My Keys",
        description="Every key issued to the user, newest first.",
        tags=["Store API"],
        parameters=[USER_ID_HEADER],
        responses={200: UserKeySerializer(many=True), 401: {"description": "Unauthorized"}},
    )
    def get(self, request: Request) -> Response:
        """List the user's keys."""
        return async_to_sync(self._handle_list_keys)(request)

    async def _handle_list_keys(self, request: Request) -> Response:
        with tracer.start_as_current_span("list_user_keys") as span:
            span.set_attribute("user_id", request.user_id)

            handler = ListUserKeysHandler(ledger=_ledger)
            keys = await handler.handle(ListUserKeysQuery(user_id=request.user_id))

            span.set_attribute("keys.count", len(keys))
            return Response({"keys": UserKeySerializer(keys, many=True).data}, status=status.HTTP_200_OK)
