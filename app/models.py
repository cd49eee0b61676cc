import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from app.constants import MAX_SCORE, MIN_SCORE, NOT_FOUND


# --- Coercion helpers for model output ---
# The language model is free to omit keys, return null, nest objects in
# lists or send scores as strings. Every helper below absorbs that instead
# of failing, so one bad field never voids the rest of the analysis.


def coerce_string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []

    items: List[str] = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, str):
            items.append(item)
        elif isinstance(item, dict):
            # e.g. {"skill": "Docker", "reason": "used across the team"}
            parts = [str(v) for v in item.values() if v is not None and str(v).strip()]
            if parts:
                items.append(": ".join(parts))
        else:
            items.append(str(item))
    return items


def coerce_score(value: Any) -> int:
    if isinstance(value, bool):
        return MIN_SCORE
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return MIN_SCORE
    if not isinstance(value, (int, float)) or math.isnan(value) or math.isinf(value):
        return MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, int(round(value))))


def coerce_mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class _StringListsModel(BaseModel):
    """Base for models whose every field is a list of strings."""

    @field_validator("*", mode="before")
    @classmethod
    def _default_to_list(cls, value: Any) -> List[str]:
        return coerce_string_list(value)

    class Config:
        populate_by_name = True


# --- Comparative (resume vs job description) analysis ---


class KeyStrengths(_StringListsModel):
    technical: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


class MissingPoints(_StringListsModel):
    technical: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(alias="softSkills", default_factory=list)


class SkillsToAdd(_StringListsModel):
    priority: List[str] = Field(default_factory=list)
    recommended: List[str] = Field(default_factory=list)


class Recommendations(_StringListsModel):
    short_term: List[str] = Field(alias="shortTerm", default_factory=list)
    long_term: List[str] = Field(alias="longTerm", default_factory=list)


class MatchAnalysis(BaseModel):
    overall_score: int = Field(alias="overallScore", default=0)
    key_strengths: KeyStrengths = Field(alias="keyStrengths", default_factory=KeyStrengths)
    missing_points: MissingPoints = Field(alias="missingPoints", default_factory=MissingPoints)
    skills_to_add: SkillsToAdd = Field(alias="skillsToAdd", default_factory=SkillsToAdd)
    recommendations: Recommendations = Field(default_factory=Recommendations)

    @field_validator("overall_score", mode="before")
    @classmethod
    def _score(cls, value: Any) -> int:
        return coerce_score(value)

    @field_validator(
        "key_strengths", "missing_points", "skills_to_add", "recommendations", mode="before"
    )
    @classmethod
    def _category(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value
        return coerce_mapping(value)

    class Config:
        populate_by_name = True


# --- Resume-only analysis (flat lists) ---


class ResumeAnalysis(BaseModel):
    overall_score: int = Field(alias="overallScore", default=0)
    key_strengths: List[str] = Field(alias="keyStrengths", default_factory=list)
    missing_points: List[str] = Field(alias="missingPoints", default_factory=list)
    skills_to_add: List[str] = Field(alias="skillsToAdd", default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator("overall_score", mode="before")
    @classmethod
    def _score(cls, value: Any) -> int:
        return coerce_score(value)

    @field_validator(
        "key_strengths", "missing_points", "skills_to_add", "recommendations", mode="before"
    )
    @classmethod
    def _default_to_list(cls, value: Any) -> List[str]:
        return coerce_string_list(value)

    class Config:
        populate_by_name = True


# --- Response envelopes ---


class ContactInfo(BaseModel):
    email: str = NOT_FOUND
    phone: str = NOT_FOUND
    linkedin: str = NOT_FOUND


class _AnalysisEnvelope(BaseModel):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    education: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[str] = Field(default_factory=list)


class MatchAnalysisResponse(_AnalysisEnvelope):
    analysis: MatchAnalysis = Field(default_factory=MatchAnalysis)


class ResumeAnalysisResponse(_AnalysisEnvelope):
    analysis: ResumeAnalysis = Field(default_factory=ResumeAnalysis)


# --- Requests ---


class AnalyzeRequest(BaseModel):
    resume_text: Optional[str] = Field(alias="resumeText", default=None)
    job_description: Optional[str] = Field(alias="jobDescription", default=None)

    class Config:
        populate_by_name = True


class ResumeAnalyzeRequest(BaseModel):
    resume_text: Optional[str] = Field(alias="resumeText", default=None)

    class Config:
        populate_by_name = True


class UploadResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
