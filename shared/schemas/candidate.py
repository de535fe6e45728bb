from typing import Dict, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from shared.variants import ProfessionVariant, VARIANTS


class ExperienceEntry(BaseModel):
    """One role in a candidate's base work history."""

    company: str
    location: str
    role: str
    dates: str = Field(..., description="Date range, e.g. 'Jan 2023 – Present'")
    achievements: Tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True


class EducationEntry(BaseModel):
    """A credential and the institution that granted it."""

    degree: str
    institution: str
    location: Optional[str] = None

    class Config:
        frozen = True


class KeyProject(BaseModel):
    """A notable project worth surfacing on a resume."""

    name: str
    description: str
    technologies: Tuple[str, ...] = Field(default_factory=tuple)
    impact: Optional[str] = None

    class Config:
        frozen = True


class CandidateProfile(BaseModel):
    """
    Static, resume-relevant facts about one candidate.

    Profiles are immutable input to prompt construction. The skill record is a
    mapping of category key to skill list whose key set must match the
    profession variant exactly.
    """

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: str
    phone: str
    location: str
    linkedin: str = ""
    years_of_experience: str = Field(..., description="Display string, e.g. '7+'")
    professional_title: str
    profession_variant: ProfessionVariant
    summary: str = Field(..., description="Base professional summary")
    highlights: Tuple[str, ...] = Field(default_factory=tuple)
    skills: Dict[str, Tuple[str, ...]]
    experience: Tuple[ExperienceEntry, ...] = Field(..., min_length=1)
    education: Tuple[EducationEntry, ...] = Field(default_factory=tuple)
    key_projects: Optional[Tuple[KeyProject, ...]] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_skill_categories(self) -> "CandidateProfile":
        expected = set(VARIANTS[self.profession_variant].skill_keys)
        actual = set(self.skills)
        if actual != expected:
            missing = sorted(expected - actual)
            unexpected = sorted(actual - expected)
            raise ValueError(
                f"skills for variant '{self.profession_variant}' do not match its categories "
                f"(missing={missing}, unexpected={unexpected})"
            )
        return self

    @property
    def contact_line(self) -> str:
        parts = [self.email, self.phone, self.location]
        if self.linkedin:
            parts.append(self.linkedin)
        return " | ".join(parts)
