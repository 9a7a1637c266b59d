"""
Access control dependencies.

``authenticate`` resolves the caller from the bearer token and the stored
user, ``authorize``/``require`` add the role check and ``optional_auth``
resolves the caller when it can and never fails.
"""

from typing import FrozenSet, Optional
from uuid import UUID

from fastapi import Depends, Header, status

from src.api.error import ClientError, to_http_error
from src.api.utils.jwt import extract_bearer, verify_access_token
from src.app.policy import Identity, check_access, roles_for
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.domain.entities import UserRole
from src.domain.result import Error, Result, Return


async def resolve_identity(authorization: Optional[str], uow: UnitOfWork) -> Result[Identity]:
    token = extract_bearer(authorization)
    if token is None:
        return Return.err(Error("UNAUTHENTICATED", "No authentication token provided"))

    claims = verify_access_token(token)
    if claims is None:
        return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))
    try:
        user_id = UUID(str(claims["userId"]))
    except ValueError:
        return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

    async with uow:
        user = await uow.users.get_by_id(user_id)

    if user is None:
        return Return.err(Error("INVALID_TOKEN", "User not found"))
    if not user.is_active:
        return Return.err(Error("ACCOUNT_INACTIVE", "User account is inactive"))

    # Role comes from the stored user, not the token
    return Return.ok(Identity(user_id=user.id, email=user.email, role=UserRole(user.role)))


async def authenticate(
    authorization: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Identity:
    """
    Dependency requiring a valid access token for an active user.

    Raises:
        ClientError: 401 if the token is missing, invalid or expired, or the
            user no longer exists or is inactive
    """
    result = await resolve_identity(authorization, uow)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value


async def optional_auth(
    authorization: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Optional[Identity]:
    """Dependency returning the caller's identity, or None instead of failing."""
    result = await resolve_identity(authorization, uow)
    return result.value if result.is_ok() else None


def authorize(roles: FrozenSet[UserRole]):
    """Dependency factory: authenticated and holding one of ``roles``."""

    async def dependency(identity: Identity = Depends(authenticate)) -> Identity:
        result = check_access(identity, roles)
        if result.is_err():
            raise to_http_error(result.error)
        return result.value

    return dependency


def require(operation: str):
    """Dependency factory for a named operation in the policy table."""
    return authorize(roles_for(operation))
