# Serializers
from .cart_serializer import (
    CartSerializer,
    CartLineSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartItemRemoveSerializer,
)

__all__ = [
    'CartSerializer',
    'CartLineSerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'CartItemRemoveSerializer',
]
