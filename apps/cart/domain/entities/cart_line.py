"""
Cart line entity.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..value_objects.attributes import Attributes


@dataclass
class CartLine:
    """One quantity-bearing variant of a product."""
    quantity: int
    fingerprint: str
    attributes: Attributes = field(default_factory=dict)

    def matches(self, fingerprint: str) -> bool:
        return self.fingerprint == fingerprint

    def attribute_value(self, name: str) -> Optional[Any]:
        """Named attribute, or None when absent or attributes are a plain list."""
        if isinstance(self.attributes, Mapping):
            return self.attributes.get(name)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Persisted representation of the line."""
        return {
            'quantity': self.quantity,
            'hash': self.fingerprint,
            'attributes': self.attributes,
        }
