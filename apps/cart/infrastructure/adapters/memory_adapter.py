"""
In-memory implementation of PersistenceAdapter.
"""
from typing import Dict, Optional

from ...domain.repositories.persistence_adapter import PersistenceAdapter


class InMemoryPersistenceAdapter(PersistenceAdapter):
    """Dict backed adapter for scripts and tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.storage: Dict[str, str] = dict(initial or {})
        self.ttls: Dict[str, Optional[int]] = {}
        self.save_count = 0

    def load(self, key: str) -> Optional[str]:
        return self.storage.get(key)

    def save(self, key: str, blob: str, ttl_seconds: Optional[int] = None) -> None:
        self.storage[key] = blob
        self.ttls[key] = ttl_seconds
        self.save_count += 1

    def delete(self, key: str) -> None:
        self.storage.pop(key, None)
        self.ttls.pop(key, None)
