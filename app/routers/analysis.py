import logging

from fastapi import APIRouter, Request

from app.dependencies import get_analysis_requester
from app.errors import ValidationError
from app.models import (
    AnalyzeRequest,
    ErrorResponse,
    MatchAnalysisResponse,
    ResumeAnalysisResponse,
    ResumeAnalyzeRequest,
)
from app.services.normalizer import normalize_match_analysis, normalize_resume_analysis

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _is_blank(value) -> bool:
    return not value or not value.strip()


@router.post("/analyze", response_model=MatchAnalysisResponse, responses=_ERROR_RESPONSES)
async def analyze_match(request_data: AnalyzeRequest, request: Request):
    """
    Compare resume text against a job description.
    """
    if _is_blank(request_data.resume_text) or _is_blank(request_data.job_description):
        raise ValidationError("Resume text and job description are required")

    # Looked up after validation: a bad request is a 400 even without a Gemini key.
    requester = get_analysis_requester(request)
    raw = await requester.request_analysis(
        request_data.resume_text, request_data.job_description
    )
    response = normalize_match_analysis(raw, request_data.resume_text)
    logger.info("Match analysis complete (score=%d)", response.analysis.overall_score)
    return response


@router.post(
    "/analyze/resume", response_model=ResumeAnalysisResponse, responses=_ERROR_RESPONSES
)
async def analyze_resume(request_data: ResumeAnalyzeRequest, request: Request):
    """
    Score resume text on its own for a software engineering role.
    """
    if _is_blank(request_data.resume_text):
        raise ValidationError("Resume text is required")

    requester = get_analysis_requester(request)
    raw = await requester.request_analysis(request_data.resume_text)
    response = normalize_resume_analysis(raw, request_data.resume_text)
    logger.info("Resume analysis complete (score=%d)", response.analysis.overall_score)
    return response
