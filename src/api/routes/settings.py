"""
Site Settings API Routes
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import require
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.settings import GetSettingsUseCase, UpdateSettingsUseCase
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", status_code=status.HTTP_200_OK)
async def get_settings(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Site settings; data is null until they are first saved."""
    result = await GetSettingsUseCase(uow).execute()
    return envelope(data=unwrap(result))


@router.put("", status_code=status.HTTP_200_OK)
async def update_settings(
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("settings:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    result = await UpdateSettingsUseCase(uow, meta).execute(identity.user_id, patch)
    return envelope(data=unwrap(result), message="Settings updated successfully")
