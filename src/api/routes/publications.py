"""
Publication API Routes

Reports and magazines: public listing and download, editorial CRUD.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from src.api.error import unwrap
from src.api.responses import envelope
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
from src.app.use_cases.content import PUBLICATIONS, RecordDownloadUseCase
from src.app.use_cases.content.commands import PublicationCommand
from src.depends import get_request_meta, get_unit_of_work
from src.domain.entities import PublicationCategory

router = APIRouter(prefix="/publications", tags=["Publications"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_publications(
    category: Optional[PublicationCategory] = Query(None),
    year: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Publications are all public, so the caller is never resolved."""
    query = query_of(search=search, category=category, publish_year=year)
    return await list_items(uow, PUBLICATIONS, query, page=page, limit=limit)


@router.get("/{item_id}", status_code=status.HTTP_200_OK)
async def get_publication(item_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    return await get_item(uow, PUBLICATIONS, item_id=item_id)


@router.get("/{item_id}/download", status_code=status.HTTP_200_OK)
async def download_publication(item_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Count a download and hand back the file URL."""
    result = await RecordDownloadUseCase(uow).execute(item_id)
    return envelope(data={"downloadUrl": unwrap(result)})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_publication(
    command: PublicationCommand,
    identity: Identity = Depends(require("publications:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, PUBLICATIONS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_publication(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("publications:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, PUBLICATIONS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_publication(
    item_id: UUID,
    identity: Identity = Depends(require("publications:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(
        uow, PUBLICATIONS, identity, item_id, meta, "Publication deleted successfully"
    )
