from datetime import date, datetime
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


ApplicationStatus = Literal["applied", "screening", "interview", "offer", "rejected", "withdrawn"]

STATUS_LABELS: Dict[str, str] = {
    "applied": "Applied",
    "screening": "Screening",
    "interview": "Interview",
    "offer": "Offer",
    "rejected": "Rejected",
    "withdrawn": "Withdrawn",
}


def status_label(status: str) -> str:
    """Display label for an application status."""
    return STATUS_LABELS[status]


class ApplicationCreate(BaseModel):
    """Fields a user supplies when logging a new application."""

    company_name: str = Field(..., min_length=1, description="Company applied to")
    position: str = Field(..., min_length=1, description="Role applied for")
    status: ApplicationStatus = Field("applied", description="Current pipeline stage")
    date_applied: date = Field(default_factory=date.today, description="When the application was sent")
    salary: Optional[str] = None
    notes: Optional[str] = None
    career_page_url: Optional[str] = None
    follow_up_date: Optional[date] = None
    contact_person: Optional[str] = None
    interview_dates: List[date] = Field(default_factory=list)


class ApplicationUpdate(BaseModel):
    """Partial update; only fields that are set are written."""

    company_name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    status: Optional[ApplicationStatus] = None
    date_applied: Optional[date] = None
    salary: Optional[str] = None
    notes: Optional[str] = None
    career_page_url: Optional[str] = None
    follow_up_date: Optional[date] = None
    contact_person: Optional[str] = None
    interview_dates: Optional[List[date]] = None


class ApplicationRecord(ApplicationCreate):
    """A stored application."""

    id: str = Field(..., description="Unique application id")
    created_at: datetime
    updated_at: datetime

    class Config:
        json_encoders = {
            datetime: lambda v: v.isoformat()
        }


class ApplicationStats(BaseModel):
    total: int = 0
    applied: int = 0
    screening: int = 0
    interview: int = 0
    offer: int = 0
    rejected: int = 0
    withdrawn: int = 0
    labels: Dict[str, str] = Field(default_factory=dict, description="Display label per status")
