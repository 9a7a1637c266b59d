from fastapi import APIRouter, Depends, status

from src.api.error import unwrap
from src.api.responses import envelope, to_wire
from src.api.utils.access import require
from src.app.policy import Identity
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import GetDashboardStatsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", status_code=status.HTTP_200_OK)
async def get_dashboard_stats(
    identity: Identity = Depends(require("dashboard:stats")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    stats = unwrap(await GetDashboardStatsUseCase(uow).execute())
    return envelope(
        data={"counts": stats.counts, "recentActivity": to_wire(stats.recent_activity)}
    )
