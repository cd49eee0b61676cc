import logging
from typing import Optional

from fastapi import Request

from .config import Settings
from .errors import UpstreamServiceError
from .services.gemini_service import AnalysisRequester

logger = logging.getLogger(__name__)


def build_analysis_requester(settings: Settings) -> Optional[AnalysisRequester]:
    """Create the Gemini-backed requester, or None when it cannot be configured."""
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set - resume analysis disabled")
        return None
    try:
        requester = AnalysisRequester.from_settings(settings)
    except Exception as e:
        logger.error("Failed to initialize Gemini client: %s", e)
        return None
    logger.info("Gemini client initialized (model=%s)", settings.gemini_model)
    return requester


def get_analysis_requester(request: Request) -> AnalysisRequester:
    requester = getattr(request.app.state, "analysis_requester", None)
    if requester is None:
        raise UpstreamServiceError(status_code=503, detail="Gemini not configured.")
    return requester
