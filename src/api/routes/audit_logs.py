"""
Audit Log API Routes

Read access to the audit trail for administrators.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import require
from src.app.policy import Identity
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import ListAuditLogsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/audit-logs", tags=["Audit"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_audit_logs(
    actor_id: Optional[UUID] = Query(None, alias="actorId"),
    resource_type: Optional[str] = Query(None, alias="resourceType"),
    resource_id: Optional[UUID] = Query(None, alias="resourceId"),
    limit: int = Query(50, ge=1, le=200),
    identity: Identity = Depends(require("audit_logs:list")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Audit entries, newest first.

    Query Parameters:
        - actorId: entries written by one user
        - resourceType + resourceId: entries about one resource (both required)
        - limit: maximum number of entries (1-200, default 50)

    With no filter the latest entries across all users are returned.
    """
    result = await ListAuditLogsUseCase(uow).execute(
        actor_id=actor_id, resource_type=resource_type, resource_id=resource_id, limit=limit
    )
    entries = unwrap(result)
    return envelope(data=entries, count=len(entries))
