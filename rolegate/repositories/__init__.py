"""Storage mediums: abstract interface and implementations."""

from pathlib import Path

from rolegate.schemas import AclConfig, StorageMode

from .base import StorageError, StorageProtocol
from .file_store import FileStorage
from .memory_store import MemoryStorage, NullStorage


def storage_for(config: AclConfig) -> StorageProtocol:
    """Pick the medium matching `config.storage`."""
    if config.storage is StorageMode.PERSISTENT:
        return FileStorage(Path(config.data_dir))
    if config.storage is StorageMode.DISABLED:
        return NullStorage()
    return MemoryStorage()


__all__ = [
    "StorageError",
    "StorageProtocol",
    "FileStorage",
    "MemoryStorage",
    "NullStorage",
    "storage_for",
]
