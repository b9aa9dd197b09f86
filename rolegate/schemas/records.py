"""Pydantic models for ACL configuration and the persisted state record."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORAGE_KEY = "AppAcl"
DEFAULT_DATA_DIR = Path("data") / "acl"


class StorageMode(str, Enum):

    SESSION = "session"          # process lifetime
    PERSISTENT = "persistent"    # survives restarts (file-backed)
    DISABLED = "disabled"        # nothing is stored


class AclConfig(BaseModel):
    storage: StorageMode = StorageMode.SESSION
    storage_key: str = DEFAULT_STORAGE_KEY
    data_dir: Path = DEFAULT_DATA_DIR

    @field_validator("storage_key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("storage_key must not be empty")
        return value


class PersistedRecord(BaseModel):
    """What gets written under the storage key: the ability map and attached roles."""

    abilities: dict[str, list[str]] = Field(default_factory=dict)
    roles: list[str] = Field(default_factory=list)
