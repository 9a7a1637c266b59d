"""
Access policy.

Maps every protected operation to the exact set of roles allowed to run it.
No role implies another: super-admin is only allowed where it is listed.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet
from uuid import UUID

from src.domain.entities import UserRole
from src.domain.result import Error, Result, Return

SUPER_ADMIN = UserRole.super_admin
ADMIN = UserRole.admin
EDITOR = UserRole.editor
CONTENT_MANAGER = UserRole.content_manager

ANY_ROLE: FrozenSet[UserRole] = frozenset(UserRole)
ADMINS = frozenset({SUPER_ADMIN, ADMIN})
EDITORS = frozenset({SUPER_ADMIN, ADMIN, EDITOR})
SUPER_ADMIN_ONLY = frozenset({SUPER_ADMIN})


def _crud(resource: str, write: FrozenSet[UserRole], delete: FrozenSet[UserRole]):
    return {
        f"{resource}:create": write,
        f"{resource}:update": write,
        f"{resource}:delete": delete,
    }


POLICIES: Dict[str, FrozenSet[UserRole]] = {
    **_crud("news", EDITORS, ADMINS),
    "news:publish": EDITORS,
    **_crud("publications", EDITORS, ADMINS),
    **_crud("regulations", EDITORS, ADMINS),
    **_crud("media", EDITORS, ADMINS),
    **_crud("portals", EDITORS, ADMINS),
    **_crud("faq", EDITORS, ADMINS),
    **_crud("pages", ANY_ROLE, ADMINS),
    **_crud("board_members", ADMINS, ADMINS),
    "board_members:list_all": EDITORS,
    **_crud("ads", ADMINS, ADMINS),
    "settings:update": ADMINS,
    "contact:list": ADMINS,
    "contact:update": ADMINS,
    "contact:delete": ADMINS,
    "users:list": ADMINS,
    "users:get": ADMINS,
    "users:create": ADMINS,
    "users:update": SUPER_ADMIN_ONLY,
    "users:delete": SUPER_ADMIN_ONLY,
    "dashboard:stats": ANY_ROLE,
    "audit_logs:list": ADMINS,
    "upload:create": ANY_ROLE,
}


@dataclass(frozen=True)
class Identity:
    """The caller resolved from a verified access token and the stored user"""

    user_id: UUID
    email: str
    role: UserRole


def check_access(identity: Identity | None, roles: FrozenSet[UserRole]) -> Result[Identity]:
    """Allow the identity only when its role is in ``roles``."""
    if identity is None:
        return Return.err(Error("UNAUTHENTICATED", "Authentication required"))
    if identity.role not in roles:
        return Return.err(
            Error("FORBIDDEN", "You do not have permission to perform this action")
        )
    return Return.ok(identity)


def roles_for(operation: str) -> FrozenSet[UserRole]:
    """Allowed roles for an operation. Unknown operations raise KeyError."""
    return POLICIES[operation]
