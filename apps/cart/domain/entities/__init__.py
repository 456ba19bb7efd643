# Domain entities
from .cart_line import CartLine
from .cart_store import CartGroups, CartStore

__all__ = ['CartLine', 'CartGroups', 'CartStore']
