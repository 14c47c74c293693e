from rest_framework import serializers

from dispatch import parse_target_status
from orders import errors
from orders.coordinates import INVALID_PAIR_MESSAGE, canonicalize


class CoordinateField(serializers.ListField):
    """
    A [lat, lng] pair of strings. Validates to the canonical "lat,lng" string.
    """
    child = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        # CharField would turn JSON numbers into strings and drop trailing zeros
        if isinstance(data, (list, tuple)) and not all(isinstance(item, str) for item in data):
            raise serializers.ValidationError(INVALID_PAIR_MESSAGE)
        pair = super().to_internal_value(data)
        try:
            return canonicalize(pair)
        except errors.ValidationError:
            raise serializers.ValidationError(INVALID_PAIR_MESSAGE)


class OrderCreateSerializer(serializers.Serializer):
    origin = CoordinateField()
    destination = CoordinateField()


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField()

    def validate_status(self, value):
        try:
            return parse_target_status(value)
        except errors.ValidationError as exc:
            raise serializers.ValidationError(str(exc))


class OrderListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(min_value=1, required=False)


class ResolvedOrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    distance = serializers.IntegerField()
    status = serializers.SerializerMethodField()

    def get_status(self, obj):
        return obj.status.value


class OrderDetailSerializer(ResolvedOrderSerializer):
    origin = serializers.CharField()
    destination = serializers.CharField()
