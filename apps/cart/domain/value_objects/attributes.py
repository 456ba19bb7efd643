"""
Attribute set value object.

Attributes tell variants of one product apart (size, colour, price...).
Two additions land on the same cart line only when their normalized
attributes produce the same fingerprint.

Normalization rules:
- ``None`` means "no attributes" (an empty mapping).
- A mapping loses every blank value: ``None``, ``False``, ``""``, ``"0"``,
  numeric zero and empty collections. Key order is kept as given.
- A list or tuple loses its blank elements; nothing left means an empty
  mapping.
- Any other scalar is wrapped into a one-element list as is.

The fingerprint is the MD5 of a compact JSON rendering. Keys are not
sorted, so ``{'size': 'L', 'color': 'red'}`` and ``{'color': 'red',
'size': 'L'}`` are different lines. This matches the hashes already stored
in carts persisted by earlier deployments.
"""
import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from shared.domain import ValueObject

Attributes = Union[Dict[str, Any], List[Any]]


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return value in ('', '0')
    return not value


def canonical_json(attributes: Attributes) -> str:
    """Render attributes the way their fingerprint is computed."""
    # an empty attribute set has always been hashed as a JSON list
    if isinstance(attributes, Mapping) and not attributes:
        return '[]'
    text = json.dumps(attributes, separators=(',', ':'), ensure_ascii=True, default=str)
    return text.replace('/', '\\/')


def fingerprint_of(attributes: Attributes) -> str:
    """Stable line identity for an already normalized attribute set."""
    return hashlib.md5(canonical_json(attributes).encode('utf-8')).hexdigest()


@dataclass(frozen=True)
class NormalizedAttributes(ValueObject):
    """Cleaned attributes together with their fingerprint."""
    fingerprint: str
    attributes: Attributes = field(default_factory=dict)


def normalize_attributes(attributes: Any = None) -> NormalizedAttributes:
    """Clean an attribute bag and compute its fingerprint."""
    if attributes is None:
        cleaned: Attributes = {}
    elif isinstance(attributes, Mapping):
        cleaned = {
            str(key): value
            for key, value in attributes.items()
            if not _is_blank(value)
        }
    elif isinstance(attributes, (list, tuple)):
        cleaned = [value for value in attributes if not _is_blank(value)]
        if not cleaned:
            cleaned = {}
    else:
        cleaned = [attributes]

    return NormalizedAttributes(fingerprint=fingerprint_of(cleaned), attributes=cleaned)
