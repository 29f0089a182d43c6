"""
Relationship health data models.
"""

import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FavorDirection(str, Enum):
    """Which side of the relationship did the favor."""

    GIVEN = "given"
    RECEIVED = "received"


class InsightType(str, Enum):
    """Kinds of insight the scorer can emit."""

    HEALTH_SCORE = "health_score"
    PREDICTION = "prediction"
    TREND = "trend"
    PATTERN = "pattern"
    GOAL = "goal"


class InsightPriority(str, Enum):
    """Insight priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Relationship(BaseModel):
    """
    A tracked relationship, as stored in the relationships table.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    importance_level: Optional[int] = None
    relationship_type: Optional[str] = None


class FavorRecord(BaseModel):
    """
    A single favor given to or received from a relationship.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    relationship_id: str
    direction: FavorDirection
    date_occurred: datetime
    category: Optional[str] = None
    description: Optional[str] = None

    @field_validator("date_occurred", mode="before")
    @classmethod
    def parse_date_occurred(cls, v):
        """Accept plain dates from the store as midnight UTC."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
        if isinstance(v, str) and len(v) == 10:
            return datetime.fromisoformat(v).replace(tzinfo=timezone.utc)
        return v

    @field_validator("date_occurred")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive timestamps are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class RelationshipHealth(BaseModel):
    """
    Derived health of one relationship. Recomputed on every call.
    """

    relationship_id: str
    name: str
    score: int = Field(..., ge=0, le=100, description="Health score 0-100")
    balance: int = Field(0, description="Favors given minus favors received")
    activity: int = Field(0, ge=0, description="Total favors for the relationship")


class Insight(BaseModel):
    """
    A natural-language observation about the user's relationships.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: InsightType
    title: str
    description: str
    score: Optional[float] = Field(None, ge=0.0, le=10.0)
    confidence: int = Field(..., ge=0, le=100)
    priority: InsightPriority
    actionable: bool = False
    relationship_id: Optional[str] = Field(None, alias="relationshipId")
    relationship_name: Optional[str] = Field(None, alias="relationshipName")


class InsightMetrics(BaseModel):
    """
    Summary metrics returned next to the insights.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_relationships: int = Field(0, alias="totalRelationships")
    avg_importance: Optional[float] = Field(None, alias="avgImportance")
    overall_balance: int = Field(0, alias="overallBalance")
    recent_activity: int = Field(0, alias="recentActivity")


class InsightReport(BaseModel):
    """
    Full scorer output for one invocation.
    """

    insights: List[Insight] = Field(default_factory=list)
    overall_health_score: float = 0.0
    relationship_health: List[RelationshipHealth] = Field(default_factory=list)
    metrics: InsightMetrics = Field(default_factory=InsightMetrics)


class InsightsRequest(BaseModel):
    """
    Request body of the generate-ai-insights function.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userId": "5b0c0f0e-8a8e-4c55-9a43-2d1c8f9e1a10",
                "relationships": [
                    {"id": "rel-1", "name": "Alex", "importance_level": 4},
                ],
                "favors": [
                    {
                        "id": "fav-1",
                        "relationship_id": "rel-1",
                        "direction": "given",
                        "date_occurred": "2025-01-15T10:30:00Z",
                    },
                ],
            }
        },
    )

    user_id: str = Field(..., alias="userId")
    relationships: List[Relationship]
    favors: List[FavorRecord]


class InsightsResponse(BaseModel):
    """
    Response body of the generate-ai-insights function.

    On failure ``success`` is False, ``error`` carries the message and the
    insights are empty with a zero score.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    error: Optional[str] = None
    insights: List[Insight] = Field(default_factory=list)
    overall_health_score: float = Field(0.0, alias="overallHealthScore")
    metrics: Optional[InsightMetrics] = None

    @classmethod
    def failure(cls, error: str) -> "InsightsResponse":
        """Build the empty failure shape."""
        return cls(success=False, error=error, insights=[], overall_health_score=0.0)

    def to_wire(self) -> dict:
        """
        Serialize with wire names, omitting unset optional fields.

        avgImportance is always present in metrics, null when there are no
        relationships.
        """
        wire = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.metrics is not None:
            wire["metrics"]["avgImportance"] = self.metrics.avg_importance
        return wire
