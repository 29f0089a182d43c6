"""
In-process publish/subscribe for data changes.

The data layer calls ``publish`` after every mutation; consumers register
callbacks per table, optionally restricted to one user.
"""

import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from .models import ChangeEvent, Table

logger = logging.getLogger(__name__)

ALL_TABLES = "*"

ChangeCallback = Callable[[ChangeEvent], None]


@dataclass(frozen=True)
class Subscription:
    """Handle returned by ``subscribe``, used to unsubscribe."""

    id: int
    table: str
    callback: ChangeCallback
    user_id: Optional[str] = None

    def matches(self, event: ChangeEvent) -> bool:
        if self.table != ALL_TABLES and self.table != event.table.value:
            return False
        if self.user_id is not None and event.user_id != self.user_id:
            return False
        return True


class ChangeNotifier:
    """
    Fans change events out to subscribers.

    Usage:
        notifier = ChangeNotifier()
        sub = notifier.subscribe(Table.FAVORS, on_change, user_id="u1")
        notifier.publish(ChangeEvent(table=Table.FAVORS, change_type=ChangeType.INSERT,
                                     user_id="u1", record={...}))
        notifier.unsubscribe(sub)
    """

    def __init__(self):
        self._subscriptions: Dict[int, Subscription] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(
        self,
        table: Union[Table, str],
        callback: ChangeCallback,
        user_id: Optional[str] = None,
    ) -> Subscription:
        """
        Register a callback for changes to a table.

        Args:
            table: Table to watch, or "*" for every table
            callback: Called with each matching ChangeEvent
            user_id: Only deliver events for this user

        Returns:
            Subscription handle
        """
        table_name = table.value if isinstance(table, Table) else table
        if table_name != ALL_TABLES:
            Table(table_name)

        with self._lock:
            subscription = Subscription(
                id=next(self._ids),
                table=table_name,
                callback=callback,
                user_id=user_id,
            )
            self._subscriptions[subscription.id] = subscription

        logger.debug(
            f"Subscribed #{subscription.id} to {table_name}"
            + (f" for user {user_id}" if user_id else "")
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """
        Remove a subscription.

        Returns:
            True if it was registered
        """
        with self._lock:
            removed = self._subscriptions.pop(subscription.id, None)
        return removed is not None

    def publish(self, event: ChangeEvent) -> int:
        """
        Deliver an event to every matching subscriber.

        A failing subscriber is logged and skipped.

        Returns:
            Number of subscribers that handled the event
        """
        with self._lock:
            targets = [s for s in self._subscriptions.values() if s.matches(event)]

        delivered = 0
        for subscription in targets:
            try:
                subscription.callback(event)
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Subscriber #{subscription.id} failed on {event.summary()}: {e}",
                    exc_info=True,
                )

        logger.debug(f"Published {event.summary()} to {delivered}/{len(targets)} subscriber(s)")
        return delivered

    def subscriber_count(self, table: Optional[Union[Table, str]] = None) -> int:
        """Number of subscriptions, optionally for a single table."""
        with self._lock:
            subs: List[Subscription] = list(self._subscriptions.values())
        if table is None:
            return len(subs)
        table_name = table.value if isinstance(table, Table) else table
        return sum(1 for s in subs if s.table == table_name)


# Global notifier instance
_notifier: Optional[ChangeNotifier] = None


def get_notifier() -> ChangeNotifier:
    """
    Get or create the global change notifier.

    Returns:
        ChangeNotifier instance
    """
    global _notifier
    if _notifier is None:
        _notifier = ChangeNotifier()
    return _notifier
