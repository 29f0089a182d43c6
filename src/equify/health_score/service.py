"""
Insights service: the request boundary around the health scorer.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..events import ChangeEvent, ChangeNotifier, ChangeType, Table
from .calculator import RelationshipHealthScorer
from .models import InsightsRequest, InsightsResponse

logger = logging.getLogger(__name__)


class InsightsService:
    """
    Generates insights for one user's relationships and favors.

    Each call:
    1. Validates the request body
    2. Scores relationships and derives insights
    3. Publishes an ai_insights change (if a notifier is attached)

    Any fault is reported as an empty failure response, never raised.
    """

    def __init__(
        self,
        scorer: Optional[RelationshipHealthScorer] = None,
        notifier: Optional[ChangeNotifier] = None,
    ):
        """
        Initialize insights service.

        Args:
            scorer: Health scorer (default: 7-day recent window)
            notifier: Change notifier to publish generated insights to
        """
        self.scorer = scorer or RelationshipHealthScorer()
        self.notifier = notifier

    def generate(
        self, payload: Dict[str, Any], now: Optional[datetime] = None
    ) -> InsightsResponse:
        """
        Generate insights from a JSON-shaped request body.

        Args:
            payload: ``{"userId", "relationships", "favors"}``
            now: Evaluation time for the recent-activity window

        Returns:
            Success response, or the failure shape on any fault
        """
        try:
            request = InsightsRequest.model_validate(payload)
            logger.info(f"Generating insights for user {request.user_id}")

            report = self.scorer.analyze(request.relationships, request.favors, now=now)

            logger.info(
                f"Generated {len(report.insights)} insight(s) for user {request.user_id} "
                f"(overall health {report.overall_health_score:.1f})"
            )

            response = InsightsResponse(
                success=True,
                insights=report.insights,
                overall_health_score=report.overall_health_score,
                metrics=report.metrics,
            )
        except Exception as e:
            logger.error(f"Error generating insights: {e}", exc_info=True)
            return InsightsResponse.failure(str(e))

        self._publish(request.user_id, response)
        return response

    def _publish(self, user_id: str, response: InsightsResponse) -> None:
        """Announce the generated insights to subscribers."""
        if self.notifier is None:
            return
        self.notifier.publish(
            ChangeEvent(
                table=Table.AI_INSIGHTS,
                change_type=ChangeType.INSERT,
                user_id=user_id,
                record={
                    "insight_count": len(response.insights),
                    "overall_health_score": response.overall_health_score,
                },
            )
        )
