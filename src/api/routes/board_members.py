"""
Board Member API Routes
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from src.api.utils.access import optional_auth, require
from src.api.utils.content import (
    create_item,
    delete_item,
    get_item,
    list_items,
    query_of,
    update_item,
)
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import BOARD_MEMBERS
from src.app.use_cases.content.commands import BoardMemberCommand
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/board-members", tags=["Board Members"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_active_board_members(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Active members only, for everyone."""
    return await list_items(uow, BOARD_MEMBERS, query_of(), identity=None, paginate=False)


@router.get("/all", status_code=status.HTTP_200_OK)
async def list_all_board_members(
    identity: Identity = Depends(require("board_members:list_all")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await list_items(uow, BOARD_MEMBERS, query_of(), identity, paginate=False)


@router.get("/{item_id}", status_code=status.HTTP_200_OK)
async def get_board_member(
    item_id: UUID,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, BOARD_MEMBERS, identity, item_id=item_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_board_member(
    command: BoardMemberCommand,
    identity: Identity = Depends(require("board_members:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, BOARD_MEMBERS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_board_member(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("board_members:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, BOARD_MEMBERS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_board_member(
    item_id: UUID,
    identity: Identity = Depends(require("board_members:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(
        uow, BOARD_MEMBERS, identity, item_id, meta, "Board member deleted successfully"
    )
