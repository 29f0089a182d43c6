"""
Change notification spine.

The data layer publishes a ChangeEvent on every mutation; consumers such as
the live dashboard subscribe to the tables they care about.
"""

from .models import ChangeEvent, ChangeType, Table
from .notifier import ALL_TABLES, ChangeNotifier, Subscription, get_notifier

__all__ = [
    "ALL_TABLES",
    "ChangeEvent",
    "ChangeNotifier",
    "ChangeType",
    "Subscription",
    "Table",
    "get_notifier",
]
