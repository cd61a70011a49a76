"""
Serializers for the admin inventory API.
"""

from rest_framework import serializers

from core.domain.value_objects import MAX_KEY_LENGTH

MAX_KEYS_PER_BATCH = 10000


class AddKeysRequestSerializer(serializers.Serializer):
    """Serializer for a bulk add request."""

    tier = serializers.CharField(required=True, max_length=16)
    keys = serializers.ListField(
        child=serializers.CharField(
            allow_blank=True, trim_whitespace=False, max_length=MAX_KEY_LENGTH + 64
        ),
        required=True,
        max_length=MAX_KEYS_PER_BATCH,
    )

    def validate_keys(self, value):
        """Reject keys that stay too long once trimmed."""
        for key in value:
            if len(key.strip()) > MAX_KEY_LENGTH:
                raise serializers.ValidationError(
                    f"Keys cannot exceed {MAX_KEY_LENGTH} characters"
                )
        return value


class IngestResultSerializer(serializers.Serializer):
    """Serializer for IngestResultDTO."""

    tier = serializers.CharField()
    added = serializers.IntegerField()
    duplicates = serializers.IntegerField()


class PoolSerializer(serializers.Serializer):
    """Serializer for PoolDTO."""

    tier = serializers.CharField()
    count = serializers.IntegerField()
    keys = serializers.ListField(child=serializers.CharField())


class KeyStatsSerializer(serializers.Serializer):
    """Serializer for KeyStatsDTO, in the shape the admin dashboard reads."""

    pools = serializers.SerializerMethodField()
    assignedStats = serializers.DictField(source="assigned", child=serializers.IntegerField())
    totalAssigned = serializers.IntegerField(source="total_assigned")

    def get_pools(self, obj) -> dict:
        return {tier: {"available": count} for tier, count in obj.available.items()}


class AssignmentSerializer(serializers.Serializer):
    """Serializer for AssignmentDTO."""

    id = serializers.UUIDField()
    key = serializers.CharField()
    tier = serializers.CharField()
    productType = serializers.CharField(source="product_type")
    orderId = serializers.CharField(source="order_id")
    userId = serializers.CharField(source="user_id")
    assignedAt = serializers.DateTimeField(source="assigned_at")
    expiresAt = serializers.DateTimeField(source="expires_at")
