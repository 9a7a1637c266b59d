"""
Contact API Routes

The public contact form and the admin inbox behind it.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import require
from src.api.utils.content import delete_item, list_items, query_of, update_item
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.contact import SubmitContactUseCase
from src.app.use_cases.content import CONTACTS
from src.app.use_cases.content.commands import ContactCommand
from src.depends import get_request_meta, get_unit_of_work
from src.domain.entities import ContactStatus

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact(
    command: ContactCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    result = await SubmitContactUseCase(uow).execute(command, ip_address=meta.ip_address)
    return envelope(
        data=unwrap(result),
        message="Your message has been received. We will get back to you shortly.",
    )


@router.get("/submissions", status_code=status.HTTP_200_OK)
async def list_submissions(
    submission_status: Optional[ContactStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    identity: Identity = Depends(require("contact:list")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    query = query_of(search=search, status=submission_status)
    return await list_items(uow, CONTACTS, query, identity, page, limit)


@router.patch("/submissions/{item_id}", status_code=status.HTTP_200_OK)
async def update_submission_status(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("contact:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, CONTACTS, identity, item_id, patch, meta)


@router.delete("/submissions/{item_id}", status_code=status.HTTP_200_OK)
async def delete_submission(
    item_id: UUID,
    identity: Identity = Depends(require("contact:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(
        uow, CONTACTS, identity, item_id, meta, "Submission deleted successfully"
    )
