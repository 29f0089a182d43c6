"""
Change event model for the Equify notification spine.

The data layer publishes one ChangeEvent per mutation. Consumers (live
dashboards, push channels) subscribe by table.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ChangeType(str, Enum):
    """Kinds of mutation."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Table(str, Enum):
    """Tables whose mutations are published."""

    RELATIONSHIPS = "relationships"
    FAVORS = "favors"
    ACTIVITY_FEED = "activity_feed"
    AI_INSIGHTS = "ai_insights"


class ChangeEvent(BaseModel):
    """
    A single mutation of a user-owned record.
    """

    table: Table = Field(description="Table that changed")
    change_type: ChangeType = Field(description="INSERT, UPDATE or DELETE")
    user_id: Optional[str] = Field(
        None, description="Owner of the changed record, if known"
    )
    record: Dict[str, Any] = Field(
        default_factory=dict, description="New row (old row for DELETE)"
    )
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> str:
        """One-line summary suitable for logging."""
        parts = [f"{self.change_type.value}", f"{self.table.value}"]
        if self.user_id:
            parts.append(f"user={self.user_id}")
        record_id = self.record.get("id")
        if record_id:
            parts.append(f"id={record_id}")
        return " ".join(parts)
