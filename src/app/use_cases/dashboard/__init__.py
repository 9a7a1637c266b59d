from .get_dashboard_stats_use_case import DashboardStats, GetDashboardStatsUseCase

__all__ = ["DashboardStats", "GetDashboardStatsUseCase"]
