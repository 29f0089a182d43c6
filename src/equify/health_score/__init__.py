"""
Relationship health score module.

Scores each relationship (0-100) on reciprocity and activity, and turns the
scores and favor patterns into insights.
"""

from .calculator import RelationshipHealthScorer
from .models import (
    FavorDirection,
    FavorRecord,
    Insight,
    InsightMetrics,
    InsightPriority,
    InsightReport,
    InsightsRequest,
    InsightsResponse,
    InsightType,
    Relationship,
    RelationshipHealth,
)
from .service import InsightsService

__all__ = [
    "FavorDirection",
    "FavorRecord",
    "Insight",
    "InsightMetrics",
    "InsightPriority",
    "InsightReport",
    "InsightType",
    "InsightsRequest",
    "InsightsResponse",
    "InsightsService",
    "Relationship",
    "RelationshipHealth",
    "RelationshipHealthScorer",
]
