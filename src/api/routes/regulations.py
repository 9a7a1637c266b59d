"""
Regulation API Routes
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

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
from src.app.use_cases.content import REGULATIONS
from src.app.use_cases.content.commands import RegulationCommand
from src.depends import get_request_meta, get_unit_of_work
from src.domain.entities import ContentStatus, RegulationCategory

router = APIRouter(prefix="/regulations", tags=["Regulations"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_regulations(
    category: Optional[RegulationCategory] = Query(None),
    regulation_status: Optional[ContentStatus] = Query(None, alias="status"),
    tag: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List regulations. The status filter is honoured for signed-in staff
    only; anonymous callers see published regulations.
    """
    query = query_of(search=search, tag=tag, category=category, status=regulation_status)
    return await list_items(uow, REGULATIONS, query, identity, page, limit)


@router.get("/{item_id}", status_code=status.HTTP_200_OK)
async def get_regulation(
    item_id: UUID,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, REGULATIONS, identity, item_id=item_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_regulation(
    command: RegulationCommand,
    identity: Identity = Depends(require("regulations:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, REGULATIONS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_regulation(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("regulations:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, REGULATIONS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_regulation(
    item_id: UUID,
    identity: Identity = Depends(require("regulations:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(
        uow, REGULATIONS, identity, item_id, meta, "Regulation deleted successfully"
    )
