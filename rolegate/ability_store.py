"""
Rolegate ability store
In-memory role -> abilities map plus the set of roles attached to the current user.
No I/O here; persistence lives in persistence.py and is driven by service.AclService.

  abilities  {role: [ability, ...]}   replaced by set_abilities, upserted by add_ability
  roles      [role, ...]              unique, insertion ordered
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Union

from rolegate.schemas import PersistedRecord

logger = logging.getLogger(__name__)

RoleOrRoles = Union[str, Iterable[str]]


def _as_list(value: RoleOrRoles) -> list[str]:
    # A bare string is one label, never a sequence of characters
    if isinstance(value, str):
        return [value]
    return list(value)


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _check_label(value, kind: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{kind} must be a string, got {type(value).__name__}")
    return value


class AbilityStore:
    """Role/ability bookkeeping for a single implicit user."""

    def __init__(self):
        self._abilities: dict[str, list[str]] = {}
        self._roles: list[str] = []

    # ── Abilities ──────────────────────────────────────────────────────

    def set_abilities(self, abilities: Mapping[str, Iterable[str]]) -> None:
        """
        Replace the whole ability map.
        Raises TypeError for a non-mapping or a non-string label; the current map is kept then.
        """
        if not isinstance(abilities, Mapping):
            raise TypeError(
                f"abilities must be a mapping of role -> abilities, got {type(abilities).__name__}"
            )
        # Old map survives if any entry fails to convert
        new_map = {
            _check_label(role, "role"): _unique(_check_label(a, "ability") for a in _as_list(items))
            for role, items in abilities.items()
        }
        self._abilities = new_map
        logger.debug("Ability map replaced (%d roles)", len(new_map))

    def add_ability(self, role: str, ability: str) -> None:
        _check_label(role, "role")
        _check_label(ability, "ability")
        abilities = self._abilities.setdefault(role, [])
        if ability not in abilities:
            abilities.append(ability)
            logger.debug("Ability '%s' added to role '%s'", ability, role)

    def get_abilities(self) -> dict[str, list[str]]:
        """Deep copy of the ability map."""
        return {role: list(items) for role, items in self._abilities.items()}

    # ── Roles ──────────────────────────────────────────────────────────

    def attach_role(self, role: str) -> None:
        _check_label(role, "role")
        if role not in self._roles:
            self._roles.append(role)
            logger.debug("Role '%s' attached", role)

    def detach_role(self, role: str) -> None:
        if role in self._roles:
            self._roles.remove(role)
            logger.debug("Role '%s' detached", role)

    def flush_roles(self) -> None:
        self._roles = []
        logger.debug("Attached roles flushed")

    def get_roles(self) -> list[str]:
        return list(self._roles)

    def has_role(self, role: RoleOrRoles) -> bool:
        """
        One label: is it attached?
        Several labels: are all of them attached? An empty list is True.
        """
        return all(r in self._roles for r in _as_list(role))

    def has_any_role(self, roles: RoleOrRoles) -> bool:
        """True when at least one of `roles` is attached. An empty list is False."""
        return any(r in self._roles for r in _as_list(roles))

    # ── Queries ────────────────────────────────────────────────────────

    def can(self, ability: str) -> bool:
        # Roles without an entry in the map simply grant nothing
        return any(ability in self._abilities.get(role, ()) for role in self._roles)

    # ── Snapshots ──────────────────────────────────────────────────────

    def snapshot(self) -> PersistedRecord:
        return PersistedRecord(abilities=self.get_abilities(), roles=self.get_roles())

    def restore(self, record: PersistedRecord) -> None:
        """Replace abilities and roles with the contents of `record`."""
        self._abilities = {role: _unique(items) for role, items in record.abilities.items()}
        self._roles = _unique(record.roles)
