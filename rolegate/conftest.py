from typing import Optional

import pytest

from rolegate.repositories import MemoryStorage
from rolegate.service import AclService


class FailingStorage:
    """Medium that serves reads but refuses every write, like a full quota."""

    enabled = True

    def __init__(self, blob: Optional[str] = None):
        self.blob = blob

    def read(self, key: str) -> Optional[str]:
        return self.blob

    def write(self, key: str, blob: str) -> None:
        raise OSError("quota exceeded")

    def remove(self, key: str) -> None:
        raise OSError("medium unavailable")


@pytest.fixture
def sample_abilities() -> dict:
    return {
        "guest": ["login"],
        "member": ["logout", "view_content"],
        "admin": ["logout", "view_content", "manage_content"],
    }


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def acl(memory_storage) -> AclService:
    """Session-mode service over an in-memory medium the test can inspect."""
    return AclService(storage=memory_storage)


@pytest.fixture
def persistent_config(tmp_path) -> dict:
    return {"storage": "persistent", "storage_key": "TestAcl", "data_dir": tmp_path}
