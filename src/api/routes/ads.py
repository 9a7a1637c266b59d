"""
Ad API Routes

Home-page grid tiles.
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
from src.app.use_cases.content import ADS
from src.app.use_cases.content.commands import AdCommand
from src.depends import get_request_meta, get_unit_of_work
from src.domain.entities import AdStatus

router = APIRouter(prefix="/ads", tags=["Ads"])


@router.get("/published", status_code=status.HTTP_200_OK)
async def list_published_ads(uow: UnitOfWork = Depends(get_unit_of_work)):
    return await list_items(uow, ADS, query_of(), identity=None, paginate=False)


@router.get("", status_code=status.HTTP_200_OK)
async def list_ads(
    ad_status: Optional[AdStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    query = query_of(search=search, status=ad_status)
    return await list_items(uow, ADS, query, identity, page, limit)


@router.get("/{item_id}", status_code=status.HTTP_200_OK)
async def get_ad(
    item_id: UUID,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, ADS, identity, item_id=item_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ad(
    command: AdCommand,
    identity: Identity = Depends(require("ads:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, ADS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_ad(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("ads:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, ADS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_ad(
    item_id: UUID,
    identity: Identity = Depends(require("ads:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(uow, ADS, identity, item_id, meta, "Ad deleted successfully")
