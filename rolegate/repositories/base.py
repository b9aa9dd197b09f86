"""Storage medium interface shared by every backend."""

from typing import Optional, Protocol, runtime_checkable


class StorageError(Exception):
    """Medium-level failure (bad key, backend refused the write)."""
    def __init__(self, message: str, code: str = "storage_error"):
        self.message = message
        self.code = code
        super().__init__(message)


@runtime_checkable
class StorageProtocol(Protocol):
    """
    Key -> text blob medium.
    `enabled` is False only for the no-op medium; the persistence adapter skips
    writes entirely in that case.
    """

    enabled: bool

    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, blob: str) -> None: ...

    def remove(self, key: str) -> None: ...
