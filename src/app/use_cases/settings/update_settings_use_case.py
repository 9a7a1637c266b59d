"""
Update Settings Use Case
"""

from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import ValidationError

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content.commands import SettingsCommand
from src.app.use_cases.schema import alias_keys, validation_error
from src.domain.base import utcnow
from src.domain.entities import AuditAction, Settings
from src.domain.result import Result, Return


class UpdateSettingsUseCase:
    """
    Use case for saving the site settings.

    Business Rules:
    - The single settings row is created on first save
    - Fields not in the patch keep their stored value
    - Audit action is create on the first save, update afterwards
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, actor_id: UUID, patch: Dict[str, Any]) -> Result[Settings]:
        patch = alias_keys(SettingsCommand, patch)
        async with self.uow:
            settings, created = await self.uow.settings.get_or_create()

            merged = {
                field.alias or name: getattr(settings, name)
                for name, field in SettingsCommand.model_fields.items()
            }
            merged.update(patch)
            try:
                command = SettingsCommand.model_validate(merged)
            except ValidationError as exc:
                return Return.err(validation_error(exc))

            for column, value in command.model_dump().items():
                setattr(settings, column, value)
            settings.last_updated_by = actor_id
            settings.updated_at = utcnow()

            settings = await self.uow.settings.update(settings)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id,
                AuditAction.create if created else AuditAction.update,
                "Settings",
                settings.id,
                changes=patch,
            )

            return Return.ok(settings)
