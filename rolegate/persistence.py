"""
Rolegate persistence adapter
Encodes the store state as one JSON blob and keeps it under a single storage key.

Every failure here is logged and reported through the return value, never raised:
  save / flush   -> False when the medium refuses
  load           -> None when the key is missing, unreadable or holds garbage
"""

import logging
from typing import Optional

from pydantic import ValidationError

from rolegate.repositories import StorageError, StorageProtocol
from rolegate.schemas import DEFAULT_STORAGE_KEY, PersistedRecord

logger = logging.getLogger(__name__)


class PersistenceAdapter:
    """Reads and writes the PersistedRecord held under one key of a storage medium."""

    def __init__(self, storage: StorageProtocol, storage_key: str = DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.storage_key = storage_key

    @property
    def enabled(self) -> bool:
        return getattr(self.storage, "enabled", True)

    def save(self, record: PersistedRecord) -> bool:
        """Overwrite the stored record. Returns False if the medium failed."""
        if not self.enabled:
            return True
        try:
            self.storage.write(self.storage_key, record.model_dump_json())
        except (OSError, StorageError) as e:
            logger.warning("Could not persist ACL state under '%s': %s", self.storage_key, e)
            return False
        return True

    def load(self) -> Optional[PersistedRecord]:
        try:
            blob = self.storage.read(self.storage_key)
        except (OSError, UnicodeDecodeError, StorageError) as e:
            logger.warning("Could not read ACL state under '%s': %s", self.storage_key, e)
            return None
        if blob is None:
            return None
        try:
            return PersistedRecord.model_validate_json(blob)
        except ValidationError as e:
            logger.warning(
                "Discarding corrupt ACL state under '%s' (%d errors)",
                self.storage_key,
                e.error_count(),
            )
            return None

    def flush(self) -> bool:
        """Delete the stored record entirely."""
        try:
            self.storage.remove(self.storage_key)
        except (OSError, StorageError) as e:
            logger.warning("Could not remove ACL state under '%s': %s", self.storage_key, e)
            return False
        return True
