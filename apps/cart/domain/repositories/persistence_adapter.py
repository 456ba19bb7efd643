"""
Persistence adapter interface.
"""
from abc import ABC, abstractmethod
from typing import Optional


class PersistenceAdapter(ABC):
    """
    Key/value backend holding the serialized cart blob.

    Implementations are supplied by the host (session, cookie...) and are
    scoped to a single visitor.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored blob, or None when nothing is stored."""
        pass

    @abstractmethod
    def save(self, key: str, blob: str, ttl_seconds: Optional[int] = None) -> None:
        """Store a blob under a key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the storage entry for a key."""
        pass

    def apply_to_response(self, response) -> None:
        """Push pending writes onto an HTTP response, if the backend needs to."""
        return None
