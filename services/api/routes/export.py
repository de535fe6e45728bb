"""
Document download endpoints.

The client posts back a document it received from a generation endpoint and
gets a DOCX or PDF file. Documents are validated by their request models;
the exporters themselves do no validation.
"""
import logging
from datetime import date
from typing import Literal, Optional
from fastapi import APIRouter, Query, Response
from pydantic import BaseModel, Field

from shared.candidates import get_candidate_or_default
from shared.export import (
    export_cover_letter_docx,
    export_cover_letter_pdf,
    export_filename,
    export_resume_docx,
    export_resume_pdf,
)
from shared.schemas.cover_letter import CoverLetterParagraphs
from shared.schemas.resume import ResumeResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/export", tags=["export"])

ExportFormat = Literal["docx", "pdf"]

MEDIA_TYPES = {
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "pdf": "application/pdf",
}


class ResumeExportRequest(BaseModel):
    resume: ResumeResponse
    candidate_id: Optional[str] = None


class CoverLetterExportRequest(BaseModel):
    cover_letter: CoverLetterParagraphs
    company_name: str = Field(..., min_length=1)
    candidate_id: Optional[str] = None
    letter_date: Optional[date] = None


def _download(content: bytes, filename: str, fmt: str) -> Response:
    logger.info(f"Exported {filename} ({len(content)} bytes)")
    return Response(
        content=content,
        media_type=MEDIA_TYPES[fmt],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/resume")
def export_resume(
    request: ResumeExportRequest,
    format: ExportFormat = Query("docx", description="docx or pdf"),
):
    """Download a tailored resume as DOCX or PDF."""
    candidate = get_candidate_or_default(request.candidate_id)
    if format == "pdf":
        content = export_resume_pdf(request.resume, candidate)
    else:
        content = export_resume_docx(request.resume, candidate)
    return _download(content, export_filename(candidate, "resume", None, format), format)


@router.post("/cover-letter")
def export_cover_letter(
    request: CoverLetterExportRequest,
    format: ExportFormat = Query("docx", description="docx or pdf"),
):
    """Download a cover letter as DOCX or PDF."""
    candidate = get_candidate_or_default(request.candidate_id)
    if format == "pdf":
        content = export_cover_letter_pdf(request.cover_letter, candidate, request.company_name, request.letter_date)
    else:
        content = export_cover_letter_docx(request.cover_letter, candidate, request.company_name, request.letter_date)
    filename = export_filename(candidate, "cover_letter", request.company_name, format)
    return _download(content, filename, format)
