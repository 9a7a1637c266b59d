"""
Media API Routes

Photo and video gallery.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from src.api.utils.access import require
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
from src.app.use_cases.content import MEDIA
from src.app.use_cases.content.commands import MediaCommand
from src.depends import get_request_meta, get_unit_of_work
from src.domain.entities import MediaType

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_media(
    media_type: Optional[MediaType] = Query(None, alias="type"),
    category: Optional[str] = Query(None),
    album: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    query = query_of(search=search, tag=tag, type=media_type, category=category, album=album)
    return await list_items(uow, MEDIA, query, page=page, limit=limit)


@router.get("/{item_id}", status_code=status.HTTP_200_OK)
async def get_media(item_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    return await get_item(uow, MEDIA, item_id=item_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_media(
    command: MediaCommand,
    identity: Identity = Depends(require("media:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, MEDIA, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_media(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("media:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, MEDIA, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_media(
    item_id: UUID,
    identity: Identity = Depends(require("media:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(uow, MEDIA, identity, item_id, meta, "Media deleted successfully")
