"""
Get Dashboard Stats Use Case
"""

from dataclasses import dataclass
from typing import Dict, List

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditLog
from src.domain.result import Result, Return

RECENT_ACTIVITY_LIMIT = 10


@dataclass
class DashboardStats:
    counts: Dict[str, int]
    recent_activity: List[AuditLog]


class GetDashboardStatsUseCase:
    """Record counts per resource plus the latest audit entries."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DashboardStats]:
        async with self.uow:
            counts = {
                "users": await self.uow.users.count(),
                "news": await self.uow.news.count(),
                "publications": await self.uow.publications.count(),
                "regulations": await self.uow.regulations.count(),
                "media": await self.uow.media.count(),
                "messages": await self.uow.contacts.count(),
            }
            recent = await self.uow.audit_logs.recent(limit=RECENT_ACTIVITY_LIMIT)

        return Return.ok(DashboardStats(counts=counts, recent_activity=recent))
