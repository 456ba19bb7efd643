"""
Cookie implementation of PersistenceAdapter.
"""
from typing import Dict, Optional, Tuple

from django.conf import settings

from ...domain.repositories.persistence_adapter import PersistenceAdapter


class CookiePersistenceAdapter(PersistenceAdapter):
    """
    Keeps the cart blob in a client cookie.

    Cookies can only be written through a response, so writes are queued
    and flushed by ``apply_to_response``. Queued writes are visible to
    ``load`` for the rest of the request.
    """

    def __init__(self, request):
        self.request = request
        # key -> (blob, ttl); a None blob means "expire the cookie"
        self._pending: Dict[str, Tuple[Optional[str], Optional[int]]] = {}

    def load(self, key: str) -> Optional[str]:
        if key in self._pending:
            return self._pending[key][0]
        return self.request.COOKIES.get(key)

    def save(self, key: str, blob: str, ttl_seconds: Optional[int] = None) -> None:
        self._pending[key] = (blob, ttl_seconds)

    def delete(self, key: str) -> None:
        self._pending[key] = (None, None)

    def apply_to_response(self, response) -> None:
        samesite = getattr(settings, 'CART_COOKIE_SAMESITE', 'Lax')
        secure = getattr(settings, 'CART_COOKIE_SECURE', False)
        for key, (blob, ttl_seconds) in self._pending.items():
            if blob is None:
                response.delete_cookie(key, samesite=samesite)
            else:
                response.set_cookie(
                    key,
                    blob,
                    max_age=ttl_seconds,
                    secure=secure,
                    httponly=True,
                    samesite=samesite,
                )
        self._pending.clear()
