# Persistence adapters
from .session_adapter import SessionPersistenceAdapter
from .cookie_adapter import CookiePersistenceAdapter
from .memory_adapter import InMemoryPersistenceAdapter

__all__ = [
    'SessionPersistenceAdapter',
    'CookiePersistenceAdapter',
    'InMemoryPersistenceAdapter',
]
