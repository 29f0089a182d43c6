"""
Live dashboard: keeps a user's stats current as their data changes.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..events import ChangeEvent, ChangeNotifier, Subscription, Table
from .models import DashboardSnapshot, DashboardStats
from .stats import stats_for_snapshot

logger = logging.getLogger(__name__)

SnapshotProvider = Callable[[], DashboardSnapshot]
StatsListener = Callable[[DashboardStats], None]


class LiveDashboard:
    """
    Recomputes dashboard stats whenever the notifier reports a change to
    the user's relationships, favors or activity feed.

    Usage:
        dashboard = LiveDashboard("user-1", load_snapshot, notifier)
        dashboard.add_listener(push_to_client)
        dashboard.refresh()
        ...
        dashboard.close()
    """

    WATCHED_TABLES = (Table.RELATIONSHIPS, Table.FAVORS, Table.ACTIVITY_FEED)

    def __init__(
        self,
        user_id: str,
        snapshot_provider: SnapshotProvider,
        notifier: ChangeNotifier,
        window_days: int = 7,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize live dashboard and subscribe to changes.

        Args:
            user_id: User whose dashboard this is
            snapshot_provider: Loads the user's current data
            notifier: Change notifier to subscribe to
            window_days: Length of a "week" for activity stats
            clock: Returns the evaluation time (default: current UTC time)
        """
        self.user_id = user_id
        self.snapshot_provider = snapshot_provider
        self.notifier = notifier
        self.window_days = window_days
        self.clock = clock

        self.stats = DashboardStats()
        self._listeners: List[StatsListener] = []
        self._subscriptions: List[Subscription] = [
            notifier.subscribe(table, self._on_change, user_id=user_id)
            for table in self.WATCHED_TABLES
        ]

    def add_listener(self, listener: StatsListener) -> None:
        """Register a callback receiving every recomputed stats object."""
        self._listeners.append(listener)

    def refresh(self) -> DashboardStats:
        """
        Reload the snapshot and recompute stats.

        On a provider failure the previous stats are kept.

        Returns:
            Current stats
        """
        try:
            snapshot = self.snapshot_provider()
            now = self.clock() if self.clock else None
            self.stats = stats_for_snapshot(snapshot, now=now, window_days=self.window_days)
        except Exception as e:
            logger.error(
                f"Error refreshing dashboard stats for user {self.user_id}: {e}",
                exc_info=True,
            )
            return self.stats

        for listener in list(self._listeners):
            listener(self.stats)
        return self.stats

    def _on_change(self, event: ChangeEvent) -> None:
        logger.debug(f"Dashboard {self.user_id} refreshing on {event.summary()}")
        self.refresh()

    def close(self) -> None:
        """Stop receiving change events."""
        for subscription in self._subscriptions:
            self.notifier.unsubscribe(subscription)
        self._subscriptions = []
