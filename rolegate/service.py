"""
Rolegate ACL service
Public surface: mutations go to the AbilityStore and are saved straight away,
queries read the store only.

Lifecycle:
  acl = AclService({"storage": "persistent", "storage_key": "MyApp"})
  acl.resume()                      # optional, explicit rehydration
  acl.attach_role("member")
  acl.can("view_content")
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from rolegate.ability_store import AbilityStore, RoleOrRoles
from rolegate.persistence import PersistenceAdapter
from rolegate.repositories import StorageProtocol, storage_for
from rolegate.schemas import AclConfig

logger = logging.getLogger(__name__)


class AclService:
    """Owns one AbilityStore and one PersistenceAdapter."""

    def __init__(
        self,
        config: Union[AclConfig, Mapping, None] = None,
        storage: Optional[StorageProtocol] = None,
    ):
        if config is None:
            config = AclConfig()
        elif not isinstance(config, AclConfig):
            config = AclConfig.model_validate(dict(config))
        self.config = config
        self.store = AbilityStore()
        self.persistence = PersistenceAdapter(
            storage if storage is not None else storage_for(config),
            config.storage_key,
        )

    def save(self) -> bool:
        """Write current state to storage. Mutations already do this; False means the write failed."""
        if not self.persistence.enabled:
            return True
        return self.persistence.save(self.store.snapshot())

    # ── Mutations (persisted) ──────────────────────────────────────────

    def set_abilities(self, abilities: Mapping[str, Iterable[str]]) -> None:
        self.store.set_abilities(abilities)
        self.save()

    def add_ability(self, role: str, ability: str) -> None:
        self.store.add_ability(role, ability)
        self.save()

    def attach_role(self, role: str) -> None:
        self.store.attach_role(role)
        self.save()

    def detach_role(self, role: str) -> None:
        self.store.detach_role(role)
        self.save()

    def flush_roles(self) -> None:
        self.store.flush_roles()
        self.save()

    # ── Queries ────────────────────────────────────────────────────────

    def get_roles(self) -> list[str]:
        return self.store.get_roles()

    def get_abilities(self) -> dict[str, list[str]]:
        return self.store.get_abilities()

    def has_role(self, role: RoleOrRoles) -> bool:
        return self.store.has_role(role)

    def has_any_role(self, roles: RoleOrRoles) -> bool:
        return self.store.has_any_role(roles)

    def can(self, ability: str) -> bool:
        return self.store.can(ability)

    # ── Storage ────────────────────────────────────────────────────────

    def resume(self) -> bool:
        """
        Load state saved by an earlier process.
        Returns True and replaces in-memory state when a record exists; otherwise
        leaves everything as it is and returns False.
        """
        record = self.persistence.load()
        if record is None:
            logger.debug("No stored ACL state under '%s'", self.config.storage_key)
            return False
        self.store.restore(record)
        logger.debug(
            "Resumed ACL state under '%s' (%d roles attached)",
            self.config.storage_key,
            len(record.roles),
        )
        return True

    def flush_storage(self) -> None:
        """Remove the stored record. In-memory state is not touched."""
        self.persistence.flush()
