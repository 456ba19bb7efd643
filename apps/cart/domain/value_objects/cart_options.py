"""
Cart options value object.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from shared.domain import ValueObject

DEFAULT_CART_MAX_ITEM = 0
DEFAULT_ITEM_MAX_QUANTITY = 200000
DEFAULT_COOKIE_TTL = 604800  # 7 days

_OPTION_ALIASES = {
    'cart_max_item': ('cart_max_item', 'cartMaxItem'),
    'item_max_quantity': ('item_max_quantity', 'itemMaxQuantity'),
    'use_cookie': ('use_cookie', 'useCookie'),
    'cookie_ttl': ('cookie_ttl', 'cookieTtl'),
}


def _numeric_option(value: Any, default: int, minimum: int) -> int:
    """Accept ints and numeric strings; fall back to ``default`` otherwise."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(Decimal(str(value).strip()))
    except (ArithmeticError, ValueError):
        return default
    return number if number >= minimum else default


@dataclass(frozen=True)
class CartOptions(ValueObject):
    """
    Cart configuration.

    ``cart_max_item`` is advisory: it is carried and reported but no
    mutation is rejected because of it. ``item_max_quantity`` clamps the
    quantity of every line.
    """
    cart_max_item: int = DEFAULT_CART_MAX_ITEM
    item_max_quantity: int = DEFAULT_ITEM_MAX_QUANTITY
    use_cookie: bool = False
    cookie_ttl: int = DEFAULT_COOKIE_TTL

    def __post_init__(self):
        object.__setattr__(
            self, 'cart_max_item',
            _numeric_option(self.cart_max_item, DEFAULT_CART_MAX_ITEM, minimum=0),
        )
        object.__setattr__(
            self, 'item_max_quantity',
            _numeric_option(self.item_max_quantity, DEFAULT_ITEM_MAX_QUANTITY, minimum=1),
        )
        object.__setattr__(self, 'use_cookie', bool(self.use_cookie))
        object.__setattr__(
            self, 'cookie_ttl',
            _numeric_option(self.cookie_ttl, DEFAULT_COOKIE_TTL, minimum=1),
        )

    @classmethod
    def from_mapping(cls, options: Optional[Mapping] = None) -> 'CartOptions':
        """Build options from a dict using snake_case or camelCase keys."""
        options = options or {}
        values = {}
        for name, aliases in _OPTION_ALIASES.items():
            for alias in aliases:
                if alias in options:
                    values[name] = options[alias]
                    break
        return cls(**values)

    @property
    def persist_ttl(self) -> Optional[int]:
        """TTL handed to the persistence adapter on save."""
        return self.cookie_ttl if self.use_cookie else None
