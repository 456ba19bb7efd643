"""
Cart store key derivation.
"""
import hashlib
from typing import Optional

FALLBACK_DISCRIMINATOR = 'SimpleCart'
STORE_KEY_SUFFIX = '_cart'


def derive_store_key(host: Optional[str] = None) -> str:
    """
    Key under which a deployment keeps its cart blob.

    Distinct hosts get distinct keys, so carts of several sites served from
    the same cookie domain or session backend never collide.
    """
    discriminator = host or FALLBACK_DISCRIMINATOR
    return hashlib.md5(discriminator.encode('utf-8')).hexdigest() + STORE_KEY_SUFFIX
