"""
Relationship health score calculation logic.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from .models import (
    FavorDirection,
    FavorRecord,
    Insight,
    InsightMetrics,
    InsightPriority,
    InsightReport,
    InsightType,
    Relationship,
    RelationshipHealth,
)

logger = logging.getLogger(__name__)

# Fixed confidence per insight rule (percent). Not derived from sample size.
CONFIDENCE_STRONGEST = 85
CONFIDENCE_NEEDS_ATTENTION = 78
CONFIDENCE_RECEIVING_MORE = 82
CONFIDENCE_GENEROUS = 80
CONFIDENCE_LOW_ACTIVITY = 75
CONFIDENCE_EXPAND_NETWORK = 70


class RelationshipHealthScorer:
    """
    Scores relationships on reciprocity and activity, and derives insights.

    Each relationship starts at 50 and is adjusted by:
    - Favor balance (-15 to +20)
    - Favor activity (-20 to +15)
    - Importance level ((importance - 3) * 5)

    The result is clamped to 0-100.
    """

    BASE_SCORE = 50

    # Insight thresholds
    ATTENTION_THRESHOLD = 60
    HIGH_PRIORITY_THRESHOLD = 40
    BALANCE_TREND_THRESHOLD = 5
    MIN_NETWORK_SIZE = 3

    def __init__(self, recent_window_days: int = 7):
        """
        Initialize scorer.

        Args:
            recent_window_days: Trailing window used for recent activity
        """
        self.recent_window_days = recent_window_days

    def score_relationship(
        self, relationship: Relationship, favors: Sequence[FavorRecord]
    ) -> RelationshipHealth:
        """
        Compute the health of a single relationship.

        Favors belonging to other relationships are ignored.

        Args:
            relationship: Relationship to score
            favors: All favors of the user

        Returns:
            Relationship health with score, balance and activity
        """
        own = [f for f in favors if f.relationship_id == relationship.id]
        given = sum(1 for f in own if f.direction == FavorDirection.GIVEN)
        received = sum(1 for f in own if f.direction == FavorDirection.RECEIVED)
        balance = given - received
        activity = given + received

        score = self.BASE_SCORE
        score += self._balance_adjustment(balance)
        score += self._activity_adjustment(activity)
        # a null importance counts as 0, unbounded otherwise
        importance = relationship.importance_level or 0
        score += (importance - 3) * 5

        return RelationshipHealth(
            relationship_id=relationship.id,
            name=relationship.name,
            score=max(0, min(100, score)),
            balance=balance,
            activity=activity,
        )

    def _balance_adjustment(self, balance: int) -> int:
        """
        Reward even exchanges, penalize lopsided ones.

        A difference of exactly 3 gets no adjustment.
        """
        if balance == 0:
            return 20
        elif abs(balance) <= 2:
            return 10
        elif balance < -3:
            return -15
        elif balance > 3:
            return -10
        return 0

    def _activity_adjustment(self, activity: int) -> int:
        """Reward frequent exchanges, penalize none at all."""
        if activity >= 10:
            return 15
        elif activity >= 5:
            return 10
        elif activity >= 3:
            return 5
        elif activity == 0:
            return -20
        return 0

    def overall_score(self, healths: Sequence[RelationshipHealth]) -> float:
        """Mean of all relationship scores, 0 when there are none."""
        if not healths:
            return 0.0
        return sum(h.score for h in healths) / len(healths)

    def count_recent_activity(
        self, favors: Sequence[FavorRecord], now: Optional[datetime] = None
    ) -> int:
        """Count favors inside the trailing window ending at ``now``."""
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        since = now - timedelta(days=self.recent_window_days)
        return sum(1 for f in favors if f.date_occurred >= since)

    def generate_insights(
        self,
        healths: Sequence[RelationshipHealth],
        overall_balance: int,
        recent_activity: int,
    ) -> List[Insight]:
        """
        Derive insights from relationship health and favor patterns.

        Args:
            healths: Per-relationship health, in input order
            overall_balance: Given minus received across all favors
            recent_activity: Favors in the trailing window

        Returns:
            Insights in rule order
        """
        insights: List[Insight] = []

        # sorted() is stable, ties keep input order
        strongest = sorted(healths, key=lambda h: h.score, reverse=True)
        weakest = sorted(strongest, key=lambda h: h.score)

        if strongest:
            top = strongest[0]
            insights.append(
                Insight(
                    type=InsightType.HEALTH_SCORE,
                    title="Your Strongest Relationships",
                    description=(
                        f"{top.name} ({top.score:.0f}%) is your healthiest relationship. "
                        "Keep nurturing these strong connections."
                    ),
                    score=top.score / 10,
                    confidence=CONFIDENCE_STRONGEST,
                    priority=InsightPriority.LOW,
                    actionable=False,
                    relationship_id=top.relationship_id,
                    relationship_name=top.name,
                )
            )

        if weakest and weakest[0].score < self.ATTENTION_THRESHOLD:
            low = weakest[0]
            insights.append(
                Insight(
                    type=InsightType.PREDICTION,
                    title="Relationship Needs Attention",
                    description=(
                        f"{low.name} ({low.score:.0f}%) may need more attention. "
                        "Consider reaching out soon."
                    ),
                    score=low.score / 10,
                    confidence=CONFIDENCE_NEEDS_ATTENTION,
                    priority=(
                        InsightPriority.HIGH
                        if low.score < self.HIGH_PRIORITY_THRESHOLD
                        else InsightPriority.MEDIUM
                    ),
                    actionable=True,
                    relationship_id=low.relationship_id,
                    relationship_name=low.name,
                )
            )

        if overall_balance < -self.BALANCE_TREND_THRESHOLD:
            insights.append(
                Insight(
                    type=InsightType.TREND,
                    title="Receiving More Than Giving",
                    description=(
                        "You've received significantly more favors than given. "
                        "Consider looking for opportunities to help others."
                    ),
                    confidence=CONFIDENCE_RECEIVING_MORE,
                    priority=InsightPriority.MEDIUM,
                    actionable=True,
                )
            )
        elif overall_balance > self.BALANCE_TREND_THRESHOLD:
            insights.append(
                Insight(
                    type=InsightType.TREND,
                    title="Very Generous Pattern",
                    description=(
                        "You give more than you receive. Make sure you're also "
                        "comfortable asking for help when needed."
                    ),
                    confidence=CONFIDENCE_GENEROUS,
                    priority=InsightPriority.LOW,
                    actionable=True,
                )
            )

        if recent_activity == 0 and healths:
            insights.append(
                Insight(
                    type=InsightType.PATTERN,
                    title="Low Recent Activity",
                    description=(
                        "No relationship activities in the past week. "
                        "Consider reaching out to someone you care about."
                    ),
                    confidence=CONFIDENCE_LOW_ACTIVITY,
                    priority=InsightPriority.MEDIUM,
                    actionable=True,
                )
            )

        if len(healths) < self.MIN_NETWORK_SIZE:
            insights.append(
                Insight(
                    type=InsightType.GOAL,
                    title="Expand Your Network",
                    description=(
                        "Having more diverse relationships can enrich your life. "
                        "Consider adding 2-3 more meaningful connections."
                    ),
                    confidence=CONFIDENCE_EXPAND_NETWORK,
                    priority=InsightPriority.LOW,
                    actionable=True,
                )
            )

        return insights

    def analyze(
        self,
        relationships: Sequence[Relationship],
        favors: Sequence[FavorRecord],
        now: Optional[datetime] = None,
    ) -> InsightReport:
        """
        Score every relationship and generate insights.

        Args:
            relationships: The user's relationships
            favors: The user's favors, possibly referencing unknown relationships
            now: Evaluation time (defaults to current UTC time)

        Returns:
            Insight report with scores, insights and metrics
        """
        healths = [self.score_relationship(rel, favors) for rel in relationships]
        overall = self.overall_score(healths)

        given = sum(1 for f in favors if f.direction == FavorDirection.GIVEN)
        received = sum(1 for f in favors if f.direction == FavorDirection.RECEIVED)
        overall_balance = given - received
        recent_activity = self.count_recent_activity(favors, now)

        avg_importance = None
        if relationships:
            avg_importance = sum(r.importance_level or 3 for r in relationships) / len(
                relationships
            )

        insights = self.generate_insights(healths, overall_balance, recent_activity)

        logger.debug(
            f"Scored {len(healths)} relationship(s): overall={overall:.1f}, "
            f"balance={overall_balance}, recent={recent_activity}"
        )

        return InsightReport(
            insights=insights,
            overall_health_score=overall,
            relationship_health=healths,
            metrics=InsightMetrics(
                total_relationships=len(relationships),
                avg_importance=avg_importance,
                overall_balance=overall_balance,
                recent_activity=recent_activity,
            ),
        )
