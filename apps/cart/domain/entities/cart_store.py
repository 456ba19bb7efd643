"""
Cart store (Aggregate Root).
"""
import copy
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from ..exceptions import MalformedCartBlobError
from ..repositories.persistence_adapter import PersistenceAdapter
from ..services import cart_blob
from ..value_objects.attributes import normalize_attributes
from ..value_objects.cart_options import CartOptions
from ..value_objects.quantity import clamp_quantity, parse_quantity
from .cart_line import CartLine

logger = logging.getLogger(__name__)

CartGroups = Dict[str, List[CartLine]]


def _to_decimal(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


class CartStore:
    """
    Shopping cart of a single visitor.

    Lines are grouped by product id; within a group each line is a distinct
    attribute variant identified by its fingerprint. The cart is loaded from
    the persistence adapter on construction and written back after every
    mutation. Reads never touch the adapter.

    Two requests mutating the same persisted cart concurrently resolve as
    last-write-wins.
    """

    def __init__(
        self,
        adapter: PersistenceAdapter,
        store_key: str,
        options: Optional[CartOptions] = None,
    ):
        self._adapter = adapter
        self._store_key = store_key
        self._options = options or CartOptions()
        self._items: CartGroups = {}
        self._read()

    @property
    def adapter(self) -> PersistenceAdapter:
        return self._adapter

    @property
    def store_key(self) -> str:
        return self._store_key

    @property
    def options(self) -> CartOptions:
        return self._options

    # Queries

    def get_items(self) -> CartGroups:
        """Copy of the cart groups, empty groups left out."""
        return {
            product_id: copy.deepcopy(lines)
            for product_id, lines in self._items.items()
            if lines
        }

    @property
    def is_empty(self) -> bool:
        return not any(self._items.values())

    @property
    def total_items(self) -> int:
        """Number of distinct lines."""
        return sum(len(lines) for lines in self._items.values())

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in cart_blob.lines_in(self._items))

    def attribute_total(self, attribute: str = 'price') -> Decimal:
        """Sum of ``attribute * quantity`` over the lines carrying it."""
        total = Decimal('0')
        for line in cart_blob.lines_in(self._items):
            value = line.attribute_value(attribute)
            if value is None:
                continue
            amount = _to_decimal(value)
            if amount is None:
                logger.debug(f"Ignoring non-numeric '{attribute}' attribute: {value!r}")
                continue
            total += amount * line.quantity
        return total

    def item_exists(self, product_id, attributes: Any = None) -> bool:
        fingerprint = normalize_attributes(attributes).fingerprint
        return self._find_line(str(product_id), fingerprint) is not None

    # Mutations

    def add(self, product_id, quantity: Any = 1, attributes: Any = None) -> bool:
        """
        Add a quantity of a product variant.

        Merges into the line with the same fingerprint, otherwise appends a
        new line. Quantities are clamped to ``item_max_quantity``.
        """
        quantity = parse_quantity(quantity)
        normalized = normalize_attributes(attributes)
        product_id = str(product_id)

        line = self._find_line(product_id, normalized.fingerprint)
        if line is not None:
            line.quantity = self._clamp(line.quantity + quantity)
        elif quantity > 0:
            self._items.setdefault(product_id, []).append(
                CartLine(
                    quantity=self._clamp(quantity),
                    fingerprint=normalized.fingerprint,
                    attributes=normalized.attributes,
                )
            )

        self._write()
        return True

    def update(self, product_id, quantity: Any = 1, attributes: Any = None) -> bool:
        """Set the quantity of an existing line; 0 removes it."""
        quantity = parse_quantity(quantity)
        if quantity == 0:
            self.remove(product_id, attributes)
            return True

        fingerprint = normalize_attributes(attributes).fingerprint
        line = self._find_line(str(product_id), fingerprint)
        if line is None:
            return False

        line.quantity = self._clamp(quantity)
        self._write()
        return True

    def remove(self, product_id, attributes: Any = None) -> bool:
        """
        Remove a whole product group, or a single variant of it when
        attributes are given.
        """
        product_id = str(product_id)
        if product_id not in self._items:
            return False

        if not attributes:
            del self._items[product_id]
            self._write()
            return True

        fingerprint = normalize_attributes(attributes).fingerprint
        lines = self._items[product_id]
        for index, line in enumerate(lines):
            if line.matches(fingerprint):
                del lines[index]
                self._write()
                return True
        return False

    def clear(self) -> None:
        self._items = {}
        self._write()

    def destroy(self) -> None:
        """Forget the cart and drop its storage entry."""
        self._items = {}
        self._adapter.delete(self._store_key)
        logger.debug(f"Destroyed cart '{self._store_key}'")

    # Internals

    def _find_line(self, product_id: str, fingerprint: str) -> Optional[CartLine]:
        for line in self._items.get(product_id, ()):
            if line.matches(fingerprint):
                return line
        return None

    def _clamp(self, quantity: int) -> int:
        return clamp_quantity(quantity, self._options.item_max_quantity)

    def _read(self) -> None:
        blob = self._adapter.load(self._store_key)
        try:
            items = cart_blob.deserialize_cart(blob)
        except MalformedCartBlobError as e:
            logger.warning(f"Discarding persisted cart '{self._store_key}': {e.message}")
            items = {}

        for line in cart_blob.lines_in(items):
            line.quantity = self._clamp(line.quantity)
        self._items = items

    def _write(self) -> None:
        self._adapter.save(
            self._store_key,
            cart_blob.serialize_cart(self._items),
            self._options.persist_ttl,
        )
        logger.debug(f"Persisted cart '{self._store_key}' ({self.total_items} lines)")
