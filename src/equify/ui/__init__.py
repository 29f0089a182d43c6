"""
HTTP APIs for Equify.

- insights_api: generate-ai-insights function
- dashboard_api: dashboard statistics
"""

__all__ = ["insights_api", "dashboard_api", "http_server", "context"]
