"""
File-based implementation of StorageProtocol.
One file per key under a configurable data directory; survives restarts.
"""

import logging
import re
import threading
from pathlib import Path
from typing import Optional

from .base import StorageError

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.\-]+$")


class FileStorage:
    """Persistent medium: `{data_dir}/{key}.json`, written atomically."""

    enabled = True

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._lock = threading.Lock()

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}", code="invalid_key")
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        try:
            with open(self._path(key), "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def write(self, key: str, blob: str) -> None:
        path = self._path(key)
        with self._lock:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            try:
                with open(tmp, "w", encoding="utf-8") as f:
                    f.write(blob)
                tmp.replace(path)
            except OSError:
                tmp.unlink(missing_ok=True)
                raise

    def remove(self, key: str) -> None:
        with self._lock:
            self._path(key).unlink(missing_ok=True)
