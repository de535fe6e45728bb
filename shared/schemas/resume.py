from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from .result import GenerationResult


class ResumeRequest(BaseModel):
    """Request to tailor a candidate's resume for a job description."""

    job_description: str = Field(..., description="Full text of the target job posting")
    candidate_id: Optional[str] = Field(None, description="Candidate profile id; unknown ids use the default profile")
    additional_keywords: Optional[List[str]] = Field(
        None,
        description="Extra keywords to emphasize when regenerating a resume",
    )
    request_id: Optional[str] = Field(None, description="Caller-chosen id echoed back on the result")


class TailoredExperience(BaseModel):
    company: str
    location: str
    role: str
    dates: str
    summary: Optional[str] = None
    achievements: List[str]


class TailoredEducation(BaseModel):
    degree: str
    institution: str
    location: Optional[str] = None


class TailoredKeyProject(BaseModel):
    name: str
    description: str
    technologies: List[str] = Field(default_factory=list)
    impact: Optional[str] = None


class TailoredResume(BaseModel):
    """Resume content returned by the model, checked against the expected shape."""

    professional_summary: str
    highlights_of_qualifications: Optional[List[str]] = None
    skills: Dict[str, List[str]] = Field(..., description="Skill category key to skills; any subset of categories")
    key_projects: Optional[List[TailoredKeyProject]] = None
    experience: List[TailoredExperience]
    education: List[TailoredEducation]


class ATSBreakdown(BaseModel):
    keywords_match: float = Field(0, ge=0, le=100)
    skills_match: float = Field(0, ge=0, le=100)
    experience_relevance: float = Field(0, ge=0, le=100)
    formatting_score: float = Field(0, ge=0, le=100)


class OptimizationNotes(BaseModel):
    """The model's own account of how it tailored the resume."""

    ats_score: float = Field(0, ge=0, le=100)
    ats_breakdown: Optional[ATSBreakdown] = None
    keywords_incorporated: List[str] = Field(default_factory=list)
    keywords_missing: List[str] = Field(default_factory=list)
    skills_highlighted: List[str] = Field(default_factory=list)
    experience_reordered: bool = False
    match_score: Optional[Literal["High", "Medium", "Low"]] = None
    suggestions: str = ""


class ResumeResponse(BaseModel):
    """Validated resume payload handed to callers and exporters."""

    tailored_resume: TailoredResume
    optimization_notes: Optional[OptimizationNotes] = None


class ResumeResult(GenerationResult):
    """Outcome of a resume tailoring request."""

    data: Optional[ResumeResponse] = Field(None, description="Tailored resume when successful")
