"""
Per-request context for the HTTP layer.

Language, theme and the caller's identity live here and stay out of the
scoring logic.
"""

import logging
from typing import Optional

from fastapi import Header
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("en", "id")
SUPPORTED_THEMES = ("light", "dark", "system")


class RequestContext(BaseModel):
    """Caller context derived from request headers."""

    user_id: Optional[str] = None
    language: str = "en"
    theme: str = "system"


def _primary_language(accept_language: Optional[str]) -> str:
    """Pick the first supported language from an Accept-Language header."""
    if not accept_language:
        return "en"
    for part in accept_language.split(","):
        code = part.split(";")[0].strip().lower()[:2]
        if code in SUPPORTED_LANGUAGES:
            return code
    return "en"


async def get_request_context(
    x_user_id: Optional[str] = Header(None),
    accept_language: Optional[str] = Header(None),
    x_theme: Optional[str] = Header(None),
) -> RequestContext:
    """FastAPI dependency building the RequestContext."""
    theme = (x_theme or "system").lower()
    if theme not in SUPPORTED_THEMES:
        theme = "system"

    context = RequestContext(
        user_id=x_user_id,
        language=_primary_language(accept_language),
        theme=theme,
    )
    logger.debug(f"Request context: {context.model_dump()}")
    return context
