"""
User Management API Routes

Administrator accounts. Only super-admins may change or remove accounts.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import require
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
)
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_users(
    search: Optional[str] = Query(None),
    role: Optional[str] = Query(None),
    identity: Identity = Depends(require("users:list")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    users = unwrap(await ListUsersUseCase(uow).execute(search=search, role=role))
    return envelope(data=users, count=len(users))


@router.get("/{user_id}", status_code=status.HTTP_200_OK)
async def get_user(
    user_id: UUID,
    identity: Identity = Depends(require("users:get")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return envelope(data=unwrap(await GetUserUseCase(uow).execute(user_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    command: CreateUserCommand,
    identity: Identity = Depends(require("users:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    """
    Create an administrator account.

    Raises:
        - 400 Bad Request: Email already registered or invalid payload
    """
    result = await CreateUserUseCase(uow, meta).execute(identity.user_id, command)
    return envelope(data=unwrap(result), message="User created successfully")


@router.put("/{user_id}", status_code=status.HTTP_200_OK)
async def update_user(
    user_id: UUID,
    command: UpdateUserCommand,
    identity: Identity = Depends(require("users:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    result = await UpdateUserUseCase(uow, meta).execute(identity.user_id, user_id, command)
    return envelope(data=unwrap(result), message="User updated successfully")


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
    user_id: UUID,
    identity: Identity = Depends(require("users:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    """
    Raises:
        - 400 Bad Request: Caller tried to delete their own account
    """
    unwrap(await DeleteUserUseCase(uow, meta).execute(identity.user_id, user_id))
    return envelope(data={}, message="User deleted successfully")
