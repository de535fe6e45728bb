"""Word (.docx) rendering of tailored resumes and cover letters using python-docx."""

import io
import logging
from datetime import date
from typing import Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from shared.schemas.candidate import CandidateProfile
from shared.schemas.cover_letter import CoverLetterParagraphs
from shared.schemas.resume import ResumeResponse
from shared.variants import get_variant
from .common import format_letter_date, signature_lines, skill_rows

logger = logging.getLogger(__name__)

FONT_NAME = "Calibri"
BODY_SIZE = 11


def _tight(p, before=0, after=0):
    p.paragraph_format.space_before = Pt(before)
    p.paragraph_format.space_after = Pt(after)


def _add_run(paragraph, text: str, *, size: int = BODY_SIZE, bold: bool = False, italic: bool = False):
    run = paragraph.add_run(text)
    run.font.name = FONT_NAME
    run.font.size = Pt(size)
    run.bold = bold
    run.italic = italic
    return run


def _heading(doc, text: str):
    p = doc.add_paragraph()
    _tight(p, before=8, after=2)
    run = _add_run(p, text.upper(), size=12, bold=True)
    run.underline = True
    return p


def _bullet(doc, text: str):
    p = doc.add_paragraph(style="List Bullet")
    _tight(p, after=1)
    _add_run(p, text)
    return p


def _set_margins(doc, inches: float):
    for section in doc.sections:
        section.top_margin = Inches(inches)
        section.bottom_margin = Inches(inches)
        section.left_margin = Inches(inches)
        section.right_margin = Inches(inches)


def _to_bytes(doc) -> bytes:
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def export_resume_docx(resume: ResumeResponse, candidate: CandidateProfile) -> bytes:
    """Render a tailored resume as a .docx document."""
    tailored = resume.tailored_resume
    variant = get_variant(candidate.profession_variant)
    doc = Document()
    _set_margins(doc, 0.7)

    # --- HEADER ---
    p = doc.add_paragraph()
    _tight(p)
    p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_run(p, candidate.name, size=20, bold=True)

    p = doc.add_paragraph()
    _tight(p)
    p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_run(p, candidate.professional_title, size=12, italic=True)

    p = doc.add_paragraph()
    _tight(p, after=4)
    p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_run(p, candidate.contact_line, size=10)

    # --- BODY ---
    _heading(doc, "Professional Summary")
    p = doc.add_paragraph()
    _tight(p, after=2)
    _add_run(p, tailored.professional_summary)

    if tailored.highlights_of_qualifications:
        _heading(doc, "Highlights of Qualifications")
        for highlight in tailored.highlights_of_qualifications:
            _bullet(doc, highlight)

    rows = skill_rows(tailored, candidate)
    if rows:
        _heading(doc, "Skills")
        for label, skills in rows:
            p = doc.add_paragraph()
            _tight(p, after=1)
            _add_run(p, f"{label}: ", bold=True)
            _add_run(p, skills)

    if tailored.key_projects:
        _heading(doc, "Key Projects")
        for project in tailored.key_projects:
            p = doc.add_paragraph()
            _tight(p, before=2)
            _add_run(p, project.name, bold=True)
            if project.technologies:
                _add_run(p, f" | {', '.join(project.technologies)}", italic=True)
            _bullet(doc, project.description)
            if project.impact:
                _bullet(doc, project.impact)

    _heading(doc, "Professional Experience")
    for role in tailored.experience:
        p = doc.add_paragraph()
        _tight(p, before=4)
        _add_run(p, role.role, bold=True)
        _add_run(p, f" | {role.dates}")

        p = doc.add_paragraph()
        _tight(p, after=1)
        _add_run(p, f"{role.company}, {role.location}", italic=True)

        if role.summary:
            p = doc.add_paragraph()
            _tight(p, after=1)
            _add_run(p, role.summary)
        for achievement in role.achievements:
            _bullet(doc, achievement)

    _heading(doc, variant.education_heading)
    for entry in tailored.education:
        p = doc.add_paragraph()
        _tight(p, after=1)
        _add_run(p, entry.degree, bold=True)
        place = entry.institution + (f", {entry.location}" if entry.location else "")
        _add_run(p, f" | {place}")

    logger.debug(f"Rendered resume DOCX for {candidate.id}")
    return _to_bytes(doc)


def export_cover_letter_docx(
    cover_letter: CoverLetterParagraphs,
    candidate: CandidateProfile,
    company_name: str,
    letter_date: Optional[date] = None,
) -> bytes:
    """Render a cover letter as a .docx document."""
    doc = Document()
    _set_margins(doc, 1.0)

    p = doc.add_paragraph()
    _tight(p, after=3)
    _add_run(p, candidate.name, size=16, bold=True)

    p = doc.add_paragraph()
    _tight(p, after=12)
    _add_run(p, candidate.contact_line, size=10)

    p = doc.add_paragraph()
    _tight(p, after=12)
    _add_run(p, format_letter_date(letter_date))

    p = doc.add_paragraph()
    _tight(p, after=12)
    _add_run(p, f"{company_name} Hiring Team")

    p = doc.add_paragraph()
    _tight(p, after=10)
    _add_run(p, cover_letter.greeting)

    for paragraph in cover_letter.paragraphs:
        p = doc.add_paragraph()
        _tight(p, after=10)
        _add_run(p, paragraph)

    for index, line in enumerate(signature_lines(cover_letter.signature)):
        p = doc.add_paragraph()
        _tight(p)
        _add_run(p, line, bold=index > 0)

    logger.debug(f"Rendered cover letter DOCX for {candidate.id} -> {company_name}")
    return _to_bytes(doc)
