"""
Serializers for the store API (orders, payment events, account keys).
"""

from rest_framework import serializers

from api.v1.admin.serializers import AssignmentSerializer


class CreateOrderRequestSerializer(serializers.Serializer):
    """Serializer for create order request."""

    productType = serializers.CharField(required=True, max_length=64)
    tier = serializers.CharField(required=True, max_length=16)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    currency = serializers.CharField(required=True, min_length=3, max_length=3)
    paymentMethod = serializers.CharField(required=True, max_length=32)


class OrderSerializer(serializers.Serializer):
    """Serializer for OrderDTO."""

    id = serializers.UUIDField()
    userId = serializers.CharField(source="user_id")
    productType = serializers.CharField(source="product_type")
    tier = serializers.CharField()
    amount = serializers.CharField()
    currency = serializers.CharField()
    paymentMethod = serializers.CharField(source="payment_method")
    paymentStatus = serializers.CharField(source="payment_status")
    fulfillmentStatus = serializers.CharField(source="fulfillment_status")
    createdAt = serializers.DateTimeField(source="created_at")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)
    fulfilledAt = serializers.DateTimeField(source="fulfilled_at", allow_null=True)


class PaymentEventRequestSerializer(serializers.Serializer):
    """Serializer for a verified payment event."""

    orderId = serializers.UUIDField(required=True)
    status = serializers.ChoiceField(choices=["paid", "failed"])
    eventId = serializers.CharField(required=False, allow_null=True, max_length=128)


class PaymentResultSerializer(serializers.Serializer):
    """Serializer for PaymentResultDTO."""

    order = OrderSerializer()
    key = AssignmentSerializer(source="assignment", allow_null=True)


class UserKeySerializer(serializers.Serializer):
    """Serializer for an issued key in the account view."""

    id = serializers.UUIDField()
    key = serializers.CharField()
    tier = serializers.CharField()
    productType = serializers.CharField(source="product_type")
    orderId = serializers.CharField(source="order_id")
    assignedAt = serializers.DateTimeField(source="assigned_at")
    expiresAt = serializers.DateTimeField(source="expires_at")
