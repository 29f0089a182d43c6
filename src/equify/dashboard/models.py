"""
Dashboard data models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..health_score.models import FavorRecord, Relationship


class ActivityEntry(BaseModel):
    """
    One row of the activity feed.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: Optional[str] = None
    activity_type: Optional[str] = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive timestamps are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class DashboardSnapshot(BaseModel):
    """
    Everything needed to compute dashboard stats for one user.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    relationships: List[Relationship] = Field(default_factory=list)
    favors: List[FavorRecord] = Field(default_factory=list)
    activity: List[ActivityEntry] = Field(default_factory=list)


class DashboardStats(BaseModel):
    """
    Headline numbers shown on the dashboard.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_relationships: int = Field(0, alias="totalRelationships")
    favors_given: int = Field(0, alias="favorsGiven")
    favors_received: int = Field(0, alias="favorsReceived")
    recent_activity: int = Field(0, alias="recentActivity")
    weekly_growth: int = Field(0, alias="weeklyGrowth", description="Percent vs previous week")
