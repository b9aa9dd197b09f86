"""
Rolegate configuration.
Environment-driven defaults for building an AclService.
"""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv

from rolegate.schemas import DEFAULT_DATA_DIR, DEFAULT_STORAGE_KEY, AclConfig
from rolegate.service import AclService

load_dotenv()


def get_settings():
    """Return settings read from the environment (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """ACL settings loaded from environment."""

    # Storage: "session" | "persistent" | "disabled"
    ROLEGATE_STORAGE: Literal["session", "persistent", "disabled"] = "session"
    ROLEGATE_STORAGE_KEY: str = DEFAULT_STORAGE_KEY
    ROLEGATE_DATA_DIR: Path

    def __init__(self):
        self.ROLEGATE_STORAGE = (os.environ.get("ROLEGATE_STORAGE") or "session").strip().lower()
        if self.ROLEGATE_STORAGE not in ("session", "persistent", "disabled"):
            self.ROLEGATE_STORAGE = "session"
        self.ROLEGATE_STORAGE_KEY = (
            os.environ.get("ROLEGATE_STORAGE_KEY") or DEFAULT_STORAGE_KEY
        ).strip()
        data_dir = os.environ.get("ROLEGATE_DATA_DIR")
        self.ROLEGATE_DATA_DIR = Path(data_dir) if data_dir else DEFAULT_DATA_DIR

    def acl_config(self) -> AclConfig:
        return AclConfig(
            storage=self.ROLEGATE_STORAGE,
            storage_key=self.ROLEGATE_STORAGE_KEY,
            data_dir=self.ROLEGATE_DATA_DIR,
        )


def build_service(settings: Optional[Settings] = None) -> AclService:
    """Construct an AclService from settings. Does not resume; call acl.resume() yourself."""
    settings = settings or get_settings()
    return AclService(settings.acl_config())
