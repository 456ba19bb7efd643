"""
Cart store construction for Django requests.
"""
from collections.abc import Mapping
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from ..domain.entities.cart_store import CartStore
from ..domain.value_objects.cart_options import CartOptions
from .adapters import CookiePersistenceAdapter, SessionPersistenceAdapter
from .store_key import derive_store_key


def get_cart_options() -> CartOptions:
    """Read cart options from ``settings.CART``."""
    raw = getattr(settings, 'CART', None) or {}
    if not isinstance(raw, Mapping):
        raise ImproperlyConfigured("settings.CART must be a dict of cart options.")
    return CartOptions.from_mapping(raw)


def build_cart_store(request, options: Optional[CartOptions] = None) -> CartStore:
    """
    Build the cart of the visitor behind ``request``.

    Cookie storage is used when ``use_cookie`` is set, the session otherwise.
    """
    options = options or get_cart_options()

    if options.use_cookie:
        adapter = CookiePersistenceAdapter(request)
    else:
        session = getattr(request, 'session', None)
        if session is None:
            raise ImproperlyConfigured(
                "Session backed carts require "
                "'django.contrib.sessions.middleware.SessionMiddleware'."
            )
        adapter = SessionPersistenceAdapter(session)

    store_key = derive_store_key(request.META.get('HTTP_HOST'))
    return CartStore(adapter=adapter, store_key=store_key, options=options)
