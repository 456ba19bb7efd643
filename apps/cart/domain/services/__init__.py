# Domain services
from .cart_blob import serialize_cart, deserialize_cart

__all__ = ['serialize_cart', 'deserialize_cart']
