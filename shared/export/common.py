"""Helpers shared by the DOCX and PDF exporters."""

import re
import unicodedata
from datetime import date
from typing import List, Optional, Tuple

from shared.schemas.candidate import CandidateProfile
from shared.schemas.resume import TailoredResume
from shared.variants import get_variant

DOCUMENT_KINDS = {
    "resume": "Resume",
    "cover_letter": "CoverLetter",
}


def _slug(text: str) -> str:
    # Header-safe: accents are folded to ASCII, other scripts are dropped
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"\(.*?\)", "", text).strip()
    text = re.sub(r"[^\w\s-]", "", text)
    return re.sub(r"\s+", "_", text)


def export_filename(
    candidate: CandidateProfile,
    kind: str,
    company: Optional[str],
    ext: str,
    on: Optional[date] = None,
) -> str:
    """
    Download name such as `Maya_Chen_CoverLetter_Acme_Corp_2024-05-01.docx`.

    The company part is left out when no company is given.
    """
    parts = [_slug(candidate.name), DOCUMENT_KINDS[kind]]
    if company and _slug(company):
        parts.append(_slug(company))
    parts.append((on or date.today()).isoformat())
    return "_".join(parts) + "." + ext.lstrip(".")


def format_letter_date(on: Optional[date] = None) -> str:
    """Date line for a cover letter, e.g. `May 1, 2024`."""
    on = on or date.today()
    return f"{on.strftime('%B')} {on.day}, {on.year}"


def skill_rows(resume: TailoredResume, candidate: CandidateProfile) -> List[Tuple[str, str]]:
    """(label, comma-joined skills) pairs for non-empty skill categories."""
    variant = get_variant(candidate.profession_variant)
    return [
        (variant.skill_label(key), ", ".join(skills))
        for key, skills in resume.skills.items()
        if skills
    ]


def signature_lines(signature: str) -> List[str]:
    """Split a signature block; the model sometimes sends a literal backslash-n."""
    return [line.strip() for line in signature.replace("\\n", "\n").splitlines() if line.strip()]
