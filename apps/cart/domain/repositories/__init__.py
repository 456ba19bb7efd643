# Repository interfaces
from .persistence_adapter import PersistenceAdapter

__all__ = ['PersistenceAdapter']
