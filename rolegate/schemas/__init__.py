"""Pydantic schemas for configuration and persisted state."""

from .records import (
    DEFAULT_DATA_DIR,
    DEFAULT_STORAGE_KEY,
    AclConfig,
    PersistedRecord,
    StorageMode,
)

__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_STORAGE_KEY",
    "AclConfig",
    "PersistedRecord",
    "StorageMode",
]
