from .common import export_filename, format_letter_date
from .docx_export import export_resume_docx, export_cover_letter_docx
from .pdf_export import export_resume_pdf, export_cover_letter_pdf

__all__ = [
    "export_filename",
    "format_letter_date",
    "export_resume_docx",
    "export_cover_letter_docx",
    "export_resume_pdf",
    "export_cover_letter_pdf",
]
