"""
Cart blob codec.

The persisted blob is a JSON object mapping product ids to arrays of
``{"quantity": int, "hash": str, "attributes": object}``. Older blobs may
hold a group as a JSON object keyed by position (left behind by positional
removals) and quantities as digit strings; both are read transparently.
"""
import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from ..entities.cart_line import CartLine
from ..exceptions import MalformedCartBlobError
from ..value_objects.attributes import fingerprint_of

logger = logging.getLogger(__name__)


def serialize_cart(groups: Mapping) -> str:
    """Encode cart groups, leaving out empty ones."""
    payload = {
        str(product_id): [line.to_dict() for line in lines]
        for product_id, lines in groups.items()
        if lines
    }
    return json.dumps(payload, separators=(',', ':'))


def deserialize_cart(blob: Optional[str]) -> Dict[str, List[CartLine]]:
    """
    Decode a persisted blob.

    Raises MalformedCartBlobError when the blob is not a JSON object.
    Unreadable lines are skipped rather than failing the whole cart.
    """
    if not blob or (isinstance(blob, str) and not blob.strip()):
        return {}

    try:
        payload = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise MalformedCartBlobError(str(e))

    # an empty cart used to be written as an empty JSON list
    if payload == []:
        return {}
    if not isinstance(payload, dict):
        raise MalformedCartBlobError(f"expected a JSON object, got {type(payload).__name__}")

    groups: Dict[str, List[CartLine]] = {}
    for product_id, raw_lines in payload.items():
        lines = _decode_group(product_id, raw_lines)
        if lines:
            groups[str(product_id)] = lines
    return groups


def _decode_group(product_id: str, raw_lines: Any) -> List[CartLine]:
    if isinstance(raw_lines, dict):
        raw_lines = list(raw_lines.values())
    if not isinstance(raw_lines, list):
        logger.debug(f"Skipping cart group '{product_id}': not a list")
        return []

    lines: List[CartLine] = []
    by_fingerprint: Dict[str, CartLine] = {}
    for entry in raw_lines:
        line = _decode_line(entry)
        if line is None:
            logger.debug(f"Skipping unreadable line in cart group '{product_id}'")
            continue
        existing = by_fingerprint.get(line.fingerprint)
        if existing is not None:
            existing.quantity += line.quantity
            continue
        by_fingerprint[line.fingerprint] = line
        lines.append(line)
    return lines


def _decode_line(entry: Any) -> Optional[CartLine]:
    if not isinstance(entry, dict):
        return None

    quantity = entry.get('quantity')
    if isinstance(quantity, str) and re.fullmatch(r'\d+', quantity, re.ASCII):
        quantity = int(quantity)
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        return None

    attributes = entry.get('attributes')
    if attributes is None or attributes == []:
        attributes = {}
    if not isinstance(attributes, (dict, list)):
        return None

    fingerprint = entry.get('hash')
    if not isinstance(fingerprint, str) or not fingerprint:
        fingerprint = fingerprint_of(attributes)

    return CartLine(quantity=quantity, fingerprint=fingerprint, attributes=attributes)


def lines_in(groups: Mapping) -> Sequence[CartLine]:
    """Flatten groups into their lines, in insertion order."""
    return [line for lines in groups.values() for line in lines]
