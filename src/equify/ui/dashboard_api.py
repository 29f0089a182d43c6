"""
Dashboard stats API.
"""

import logging

from fastapi import APIRouter

from ..config import get_config
from ..dashboard import DashboardSnapshot, DashboardStats, stats_for_snapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.post("/stats", response_model=DashboardStats)
async def dashboard_stats(snapshot: DashboardSnapshot) -> DashboardStats:
    """
    Compute dashboard stats from a snapshot of the user's data.
    """
    stats = stats_for_snapshot(
        snapshot, window_days=get_config().dashboard.window_days
    )
    logger.debug(f"Dashboard stats for {snapshot.user_id}: {stats.model_dump()}")
    return stats
