from typing import Any

from app.models import MatchAnalysis, MatchAnalysisResponse, ResumeAnalysis, ResumeAnalysisResponse
from app.parsers import extract_contact, extract_sections


def _as_mapping(raw: Any) -> dict:
    return raw if isinstance(raw, dict) else {}


def normalize_match_analysis(raw: Any, resume_text: str) -> MatchAnalysisResponse:
    """
    Build the comparative-mode response from parsed model output.

    Each leaf list defaults to [] on its own and the score to 0, so partial
    output still yields a complete response. Never raises.
    """
    return MatchAnalysisResponse(
        analysis=MatchAnalysis.model_validate(_as_mapping(raw)),
        contact=extract_contact(resume_text),
        **extract_sections(resume_text),
    )


def normalize_resume_analysis(raw: Any, resume_text: str) -> ResumeAnalysisResponse:
    """Resume-only counterpart of normalize_match_analysis (flat lists)."""
    return ResumeAnalysisResponse(
        analysis=ResumeAnalysis.model_validate(_as_mapping(raw)),
        contact=extract_contact(resume_text),
        **extract_sections(resume_text),
    )
