# Value objects
from .attributes import Attributes, NormalizedAttributes, normalize_attributes, fingerprint_of
from .quantity import parse_quantity, clamp_quantity
from .cart_options import CartOptions

__all__ = [
    'Attributes',
    'NormalizedAttributes',
    'normalize_attributes',
    'fingerprint_of',
    'parse_quantity',
    'clamp_quantity',
    'CartOptions',
]
