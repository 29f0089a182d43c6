"""
Dashboard statistics module.

Computes the dashboard headline numbers and keeps them current through the
change notifier.
"""

from .live import LiveDashboard
from .models import ActivityEntry, DashboardSnapshot, DashboardStats
from .stats import compute_dashboard_stats, stats_for_snapshot, weekly_growth

__all__ = [
    "ActivityEntry",
    "DashboardSnapshot",
    "DashboardStats",
    "LiveDashboard",
    "compute_dashboard_stats",
    "stats_for_snapshot",
    "weekly_growth",
]
