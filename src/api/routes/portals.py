"""
Portal API Routes

Links to external and internal service portals.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from src.api.utils.access import optional_auth, require
from src.api.utils.content import create_item, delete_item, list_items, query_of, update_item
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import PORTALS
from src.app.use_cases.content.commands import PortalCommand
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/portals", tags=["Portals"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_portals(
    category: Optional[str] = Query(None),
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active portals for visitors; signed-in staff also see inactive ones."""
    return await list_items(uow, PORTALS, query_of(category=category), identity, paginate=False)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_portal(
    command: PortalCommand,
    identity: Identity = Depends(require("portals:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, PORTALS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_portal(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("portals:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, PORTALS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_portal(
    item_id: UUID,
    identity: Identity = Depends(require("portals:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(uow, PORTALS, identity, item_id, meta, "Portal deleted successfully")
