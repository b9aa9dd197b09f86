"""FastAPI integration: route guards backed by an AclService."""

from .deps import get_acl, require_ability, require_any_role, require_role

__all__ = [
    "get_acl",
    "require_ability",
    "require_any_role",
    "require_role",
]
