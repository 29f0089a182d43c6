"""
Dashboard statistics calculation.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from ..health_score.models import FavorDirection, FavorRecord, Relationship
from .models import ActivityEntry, DashboardSnapshot, DashboardStats


def weekly_growth(recent: int, previous: int) -> int:
    """
    Percent change of this week's activity over last week's.

    Without a previous week to compare against, any activity counts as 100%.
    """
    if previous:
        # half-up rounding
        return math.floor((recent - previous) / previous * 100 + 0.5)
    return 100 if recent > 0 else 0


def compute_dashboard_stats(
    relationships: Sequence[Relationship],
    favors: Sequence[FavorRecord],
    activity: Sequence[ActivityEntry],
    now: Optional[datetime] = None,
    window_days: int = 7,
) -> DashboardStats:
    """
    Compute dashboard stats for one user.

    Args:
        relationships: The user's relationships
        favors: The user's favors
        activity: The user's activity feed
        now: Evaluation time (defaults to current UTC time)
        window_days: Length of a "week"

    Returns:
        Dashboard stats
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    week_ago = now - timedelta(days=window_days)
    two_weeks_ago = now - timedelta(days=2 * window_days)

    recent = sum(1 for a in activity if a.created_at >= week_ago)
    previous = sum(1 for a in activity if two_weeks_ago <= a.created_at < week_ago)

    return DashboardStats(
        total_relationships=len(relationships),
        favors_given=sum(1 for f in favors if f.direction == FavorDirection.GIVEN),
        favors_received=sum(1 for f in favors if f.direction == FavorDirection.RECEIVED),
        recent_activity=recent,
        weekly_growth=weekly_growth(recent, previous),
    )


def stats_for_snapshot(
    snapshot: DashboardSnapshot,
    now: Optional[datetime] = None,
    window_days: int = 7,
) -> DashboardStats:
    """Compute stats from a snapshot model."""
    return compute_dashboard_stats(
        snapshot.relationships,
        snapshot.favors,
        snapshot.activity,
        now=now,
        window_days=window_days,
    )
