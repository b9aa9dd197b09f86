"""FastAPI dependencies and require-helpers for routes guarded by the ACL."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from rolegate.service import AclService


def get_acl(request: Request) -> AclService:
    """Return the AclService stored on app.state.acl. Use in Depends()."""
    acl = getattr(request.app.state, "acl", None)
    if acl is None:
        raise HTTPException(500, "ACL service is not configured")
    return acl


def require_ability(ability: str):
    """
    Dependency that lets the request through only when acl.can(ability).
    Usage: @router.get("/posts", dependencies=[Depends(require_ability("view_content"))])
    """
    def dependency(acl: Annotated[AclService, Depends(get_acl)]) -> AclService:
        if not acl.can(ability):
            raise HTTPException(403, f"Missing ability '{ability}'")
        return acl

    return dependency


def require_role(*roles: str):
    """All of `roles` must be attached."""
    def dependency(acl: Annotated[AclService, Depends(get_acl)]) -> AclService:
        if not acl.has_role(list(roles)):
            raise HTTPException(403, f"Requires roles: {', '.join(roles)}")
        return acl

    return dependency


def require_any_role(*roles: str):
    """At least one of `roles` must be attached."""
    def dependency(acl: Annotated[AclService, Depends(get_acl)]) -> AclService:
        if not acl.has_any_role(list(roles)):
            raise HTTPException(403, f"Requires one of: {', '.join(roles)}")
        return acl

    return dependency
