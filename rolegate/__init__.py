"""Rolegate: client-side role/ability tracking with optional persisted state."""

from .ability_store import AbilityStore
from .persistence import PersistenceAdapter
from .repositories import FileStorage, MemoryStorage, NullStorage, StorageError
from .schemas import AclConfig, PersistedRecord, StorageMode
from .service import AclService

__all__ = [
    "AbilityStore",
    "AclConfig",
    "AclService",
    "FileStorage",
    "MemoryStorage",
    "NullStorage",
    "PersistedRecord",
    "PersistenceAdapter",
    "StorageError",
    "StorageMode",
]
