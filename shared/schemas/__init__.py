from .candidate import CandidateProfile, ExperienceEntry, EducationEntry, KeyProject
from .result import GenerationResult, TailoringErrorInfo, ErrorCategory, UpstreamKind
from .resume import ResumeRequest, TailoredResume, OptimizationNotes, ResumeResponse, ResumeResult
from .cover_letter import (
    CoverLetterRequest,
    CoverLetterParagraphs,
    CoverLetterMetadata,
    CoverLetterDocument,
    CoverLetterResult,
)
from .application import (
    ApplicationStatus,
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationRecord,
    ApplicationStats,
    status_label,
)

__all__ = [
    "CandidateProfile",
    "ExperienceEntry",
    "EducationEntry",
    "KeyProject",
    "GenerationResult",
    "TailoringErrorInfo",
    "ErrorCategory",
    "UpstreamKind",
    "ResumeRequest",
    "TailoredResume",
    "OptimizationNotes",
    "ResumeResponse",
    "ResumeResult",
    "CoverLetterRequest",
    "CoverLetterParagraphs",
    "CoverLetterMetadata",
    "CoverLetterDocument",
    "CoverLetterResult",
    "ApplicationStatus",
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationRecord",
    "ApplicationStats",
    "status_label",
]
