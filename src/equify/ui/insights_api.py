"""
Insights API.

Serves the generate-ai-insights function: the caller posts the user's
relationships and favors and receives scored insights.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import get_config
from ..events import get_notifier
from ..health_score import InsightsResponse, InsightsService, RelationshipHealthScorer
from .context import RequestContext, get_request_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions", tags=["insights"])

_service: Optional[InsightsService] = None


def get_insights_service() -> InsightsService:
    """
    Get or create the shared insights service.

    Returns:
        InsightsService wired to the global notifier
    """
    global _service
    if _service is None:
        config = get_config()
        _service = InsightsService(
            scorer=RelationshipHealthScorer(
                recent_window_days=config.insights.recent_window_days
            ),
            notifier=get_notifier(),
        )
    return _service


@router.post("/generate-ai-insights")
async def generate_ai_insights(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    service: InsightsService = Depends(get_insights_service),
) -> JSONResponse:
    """
    Generate insights for a user.

    Body: ``{"userId": str, "relationships": [...], "favors": [...]}``.
    Failures return ``success: false`` with empty insights and status 500.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.error(f"Invalid JSON body: {e}")
        response = InsightsResponse.failure(f"Invalid JSON body: {e}")
    else:
        if context.user_id and isinstance(payload, dict) and "userId" not in payload:
            payload["userId"] = context.user_id
        response = service.generate(payload)

    return JSONResponse(
        content=response.to_wire(),
        status_code=200 if response.success else 500,
    )
