"""
Django session implementation of PersistenceAdapter.
"""
from typing import Optional

from ...domain.repositories.persistence_adapter import PersistenceAdapter


class SessionPersistenceAdapter(PersistenceAdapter):
    """Keeps the cart blob as a string value in the visitor's session."""

    def __init__(self, session):
        self.session = session

    def load(self, key: str) -> Optional[str]:
        value = self.session.get(key)
        return value if isinstance(value, str) else None

    def save(self, key: str, blob: str, ttl_seconds: Optional[int] = None) -> None:
        # sessions expire on their own schedule; ttl does not apply
        self.session[key] = blob
        self.session.modified = True

    def delete(self, key: str) -> None:
        if key in self.session:
            del self.session[key]
            self.session.modified = True
