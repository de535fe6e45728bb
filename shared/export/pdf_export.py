"""PDF rendering of tailored resumes and cover letters using reportlab."""

import io
import logging
from datetime import date
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib.colors import black
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer

from shared.schemas.candidate import CandidateProfile
from shared.schemas.cover_letter import CoverLetterParagraphs
from shared.schemas.resume import ResumeResponse
from shared.variants import get_variant
from .common import format_letter_date, signature_lines, skill_rows

logger = logging.getLogger(__name__)


def make_styles():
    name = ParagraphStyle("Name", fontName="Helvetica-Bold", fontSize=18, alignment=TA_CENTER, leading=22)
    title = ParagraphStyle("Title", fontName="Helvetica-Oblique", fontSize=11, alignment=TA_CENTER, leading=14)
    contact = ParagraphStyle("Contact", fontName="Helvetica", fontSize=9, alignment=TA_CENTER, leading=12)
    section = ParagraphStyle("Section", fontName="Helvetica-Bold", fontSize=11, alignment=TA_LEFT, leading=14)
    body = ParagraphStyle("Body", fontName="Helvetica", fontSize=10, alignment=TA_JUSTIFY, leading=13)
    bullet = ParagraphStyle("Bullet", parent=body, leftIndent=12, firstLineIndent=-8, spaceAfter=1)
    return name, title, contact, section, body, bullet


def _render(story: List, margin: float) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4,
        leftMargin=margin, rightMargin=margin, topMargin=margin, bottomMargin=margin,
    )
    doc.build(story)
    return buffer.getvalue()


def export_resume_pdf(resume: ResumeResponse, candidate: CandidateProfile) -> bytes:
    """Render a tailored resume as a PDF."""
    tailored = resume.tailored_resume
    variant = get_variant(candidate.profession_variant)
    ns, ts, cs, ss, bs, bls = make_styles()
    story = []

    def sh(text):
        story.append(Spacer(1, 6))
        story.append(Paragraph(escape(text.upper()), ss))
        story.append(HRFlowable(width="100%", thickness=0.5, color=black, spaceAfter=3, spaceBefore=1))

    def b(text):
        story.append(Paragraph(f"• {escape(text)}", bls))

    story.append(Paragraph(escape(candidate.name), ns))
    story.append(Paragraph(escape(candidate.professional_title), ts))
    story.append(Paragraph(escape(candidate.contact_line), cs))

    sh("Professional Summary")
    story.append(Paragraph(escape(tailored.professional_summary), bs))

    if tailored.highlights_of_qualifications:
        sh("Highlights of Qualifications")
        for highlight in tailored.highlights_of_qualifications:
            b(highlight)

    rows = skill_rows(tailored, candidate)
    if rows:
        sh("Skills")
        for label, skills in rows:
            story.append(Paragraph(f"<b>{escape(label)}:</b> {escape(skills)}", bs))

    if tailored.key_projects:
        sh("Key Projects")
        for project in tailored.key_projects:
            line = f"<b>{escape(project.name)}</b>"
            if project.technologies:
                line += f" | <i>{escape(', '.join(project.technologies))}</i>"
            story.append(Paragraph(line, bs))
            b(project.description)
            if project.impact:
                b(project.impact)

    sh("Professional Experience")
    for i, role in enumerate(tailored.experience):
        story.append(Paragraph(f"<b>{escape(role.role)}</b> | {escape(role.dates)}", bs))
        story.append(Paragraph(f"<i>{escape(role.company)}, {escape(role.location)}</i>", bs))
        if role.summary:
            story.append(Paragraph(escape(role.summary), bs))
        for achievement in role.achievements:
            b(achievement)
        if i < len(tailored.experience) - 1:
            story.append(Spacer(1, 4))

    sh(variant.education_heading)
    for entry in tailored.education:
        place = entry.institution + (f", {entry.location}" if entry.location else "")
        story.append(Paragraph(f"<b>{escape(entry.degree)}</b> | {escape(place)}", bs))

    logger.debug(f"Rendered resume PDF for {candidate.id}")
    return _render(story, 0.6 * inch)


def export_cover_letter_pdf(
    cover_letter: CoverLetterParagraphs,
    candidate: CandidateProfile,
    company_name: str,
    letter_date: Optional[date] = None,
) -> bytes:
    """Render a cover letter as a PDF."""
    ns, _, _, _, bs, _ = make_styles()
    left_name = ParagraphStyle("LetterName", parent=ns, alignment=TA_LEFT, fontSize=16, leading=20)
    left_contact = ParagraphStyle("LetterContact", parent=bs, fontSize=9, alignment=TA_LEFT)
    letter_body = ParagraphStyle("LetterBody", parent=bs, spaceAfter=10)

    story = [
        Paragraph(escape(candidate.name), left_name),
        Paragraph(escape(candidate.contact_line), left_contact),
        Spacer(1, 16),
        Paragraph(escape(format_letter_date(letter_date)), letter_body),
        Paragraph(escape(f"{company_name} Hiring Team"), letter_body),
        Paragraph(escape(cover_letter.greeting), letter_body),
    ]
    for paragraph in cover_letter.paragraphs:
        story.append(Paragraph(escape(paragraph), letter_body))

    for index, line in enumerate(signature_lines(cover_letter.signature)):
        text = f"<b>{escape(line)}</b>" if index > 0 else escape(line)
        story.append(Paragraph(text, bs))

    logger.debug(f"Rendered cover letter PDF for {candidate.id} -> {company_name}")
    return _render(story, inch)
