"""
Static Page API Routes
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
from src.app.use_cases.content import PAGES
from src.app.use_cases.content.commands import PageCommand
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_pages(
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await list_items(uow, PAGES, query_of(), identity, paginate=False)


@router.get("/id/{item_id}", status_code=status.HTTP_200_OK)
async def get_page_by_id(
    item_id: UUID,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, PAGES, identity, item_id=item_id)


@router.get("/{slug}", status_code=status.HTTP_200_OK)
async def get_page_by_slug(
    slug: str,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, PAGES, identity, slug=slug)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_page(
    command: PageCommand,
    identity: Identity = Depends(require("pages:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, PAGES, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_page(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("pages:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, PAGES, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_page(
    item_id: UUID,
    identity: Identity = Depends(require("pages:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(uow, PAGES, identity, item_id, meta, "Page deleted successfully")
