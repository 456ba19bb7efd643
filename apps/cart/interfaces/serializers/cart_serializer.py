"""
Cart serializers.

Quantities are accepted as raw JSON values: the cart itself resolves
anything that is not a non-negative integer literal to 1.
"""
from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    """Serializer for cart line output."""
    product_id = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    hash = serializers.CharField(source='fingerprint', read_only=True)
    attributes = serializers.JSONField(read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    lines = CartLineSerializer(many=True, read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    total_quantity = serializers.IntegerField(read_only=True)
    total_price = serializers.SerializerMethodField()
    is_empty = serializers.BooleanField(read_only=True)
    max_items = serializers.IntegerField(read_only=True)

    def get_total_price(self, obj) -> str:
        # no digit limit: prices are free-form attributes
        return format(obj.total_price, '.2f')


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding an item to the cart."""
    product_id = serializers.CharField(max_length=255)
    quantity = serializers.JSONField(required=False)
    attributes = serializers.JSONField(required=False)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating a cart line."""
    quantity = serializers.JSONField(required=False)
    attributes = serializers.JSONField(required=False)


class CartItemRemoveSerializer(serializers.Serializer):
    """Serializer for removing a product or one of its variants."""
    attributes = serializers.JSONField(required=False)
