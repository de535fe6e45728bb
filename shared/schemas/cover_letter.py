from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .result import GenerationResult


class CoverLetterRequest(BaseModel):
    """Request to write a cover letter for one company and job posting."""

    company_name: str = Field(..., description="Company the letter is addressed to")
    why_this_company: str = Field(..., description="The candidate's own reason for wanting to work there")
    job_description: str = Field(..., description="Full text of the target job posting")
    company_mission: Optional[str] = Field(None, description="Mission or values statement, if known")
    candidate_id: Optional[str] = Field(None, description="Candidate profile id; unknown ids use the default profile")
    request_id: Optional[str] = Field(None, description="Caller-chosen id echoed back on the result")


class CoverLetterParagraphs(BaseModel):
    greeting: str
    opening_paragraph: str
    body_paragraph_1: str
    body_paragraph_2: str
    closing_paragraph: str
    signature: str

    @property
    def paragraphs(self) -> List[str]:
        """Body paragraphs in reading order."""
        return [
            self.opening_paragraph,
            self.body_paragraph_1,
            self.body_paragraph_2,
            self.closing_paragraph,
        ]


class CoverLetterMetadata(BaseModel):
    tone_used: Literal["conversational", "professional"]
    tone_reason: str
    key_points_addressed: List[str] = Field(default_factory=list)
    company_specific_mentions: List[str] = Field(default_factory=list)


class CoverLetterDocument(BaseModel):
    """Validated cover letter payload handed to callers and exporters."""

    cover_letter: CoverLetterParagraphs
    metadata: CoverLetterMetadata


class CoverLetterResult(GenerationResult):
    """Outcome of a cover letter request."""

    data: Optional[CoverLetterDocument] = Field(None, description="Cover letter when successful")
