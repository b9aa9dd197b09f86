"""
In-memory mediums.
MemoryStorage is session-scoped: contents vanish with the process.
NullStorage backs the "disabled" mode and keeps nothing at all.
"""

from typing import Optional


class MemoryStorage:
    """Dict-backed medium. Share one instance to share state between services."""

    enabled = True

    def __init__(self):
        self._items: dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def write(self, key: str, blob: str) -> None:
        self._items[key] = blob

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class NullStorage:
    enabled = False

    def read(self, key: str) -> Optional[str]:
        return None

    def write(self, key: str, blob: str) -> None:
        pass

    def remove(self, key: str) -> None:
        pass
