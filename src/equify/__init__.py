"""
Equify - relationship and reciprocal favor tracking

This package provides the server-side logic of Equify: relationship health
scoring, insight generation, change notification and dashboard statistics.

Main modules:
- health_score: Relationship health scores and insights
- events: Change notifier (publish/subscribe for data mutations)
- dashboard: Dashboard statistics and live updates
- ui: HTTP APIs (insights function, dashboard stats)
- cli: equifyctl operational CLI
"""

__version__ = "0.1.0"
__author__ = "Equify Team"

__all__ = ["__version__", "__author__"]
