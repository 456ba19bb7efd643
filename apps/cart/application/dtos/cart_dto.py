"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List

from ...domain.entities.cart_line import CartLine
from ...domain.entities.cart_store import CartStore


@dataclass
class CartItemAddDTO:
    """DTO for adding a product variant."""
    product_id: str
    quantity: Any = 1
    attributes: Any = None


@dataclass
class CartItemUpdateDTO:
    """DTO for setting a line quantity."""
    product_id: str
    quantity: Any = 1
    attributes: Any = None


@dataclass
class CartItemRemoveDTO:
    """DTO for removing a product or one of its variants."""
    product_id: str
    attributes: Any = None


@dataclass
class CartLineDTO:
    """DTO for cart line output."""
    product_id: str
    quantity: int
    fingerprint: str
    attributes: Any

    @classmethod
    def from_entity(cls, product_id: str, line: CartLine) -> 'CartLineDTO':
        return cls(
            product_id=product_id,
            quantity=line.quantity,
            fingerprint=line.fingerprint,
            attributes=line.attributes,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    lines: List[CartLineDTO] = field(default_factory=list)
    total_items: int = 0
    total_quantity: int = 0
    total_price: Decimal = Decimal('0')
    is_empty: bool = True
    max_items: int = 0

    @classmethod
    def from_store(cls, cart: CartStore) -> 'CartDTO':
        """Create DTO from the cart store."""
        lines = [
            CartLineDTO.from_entity(product_id, line)
            for product_id, group in cart.get_items().items()
            for line in group
        ]
        return cls(
            lines=lines,
            total_items=cart.total_items,
            total_quantity=cart.total_quantity,
            total_price=cart.attribute_total('price'),
            is_empty=cart.is_empty,
            max_items=cart.options.cart_max_item,
        )
