"""
Profession variant table.

Each candidate is tagged with a profession variant. The variant decides which
skill categories a profile must carry, which categories the tailored resume
groups skills under, and how many achievement bullets each role should get.
Prompt construction, profile validation and document export all look the
variant up here instead of branching on it, so supporting a new profession
means adding one entry to VARIANTS.
"""

from dataclasses import dataclass
from typing import Dict, List, Literal, Tuple

ProfessionVariant = Literal["developer", "payroll", "grc"]

BulletRange = Tuple[int, int]


@dataclass(frozen=True)
class VariantProfile:
    """Prompt and layout settings for one profession variant."""

    name: str
    audience: str
    # (key, label) pairs for the candidate's base skill record, in display order
    skill_categories: Tuple[Tuple[str, str], ...]
    # (key, label) pairs the tailored resume groups skills under
    resume_skill_categories: Tuple[Tuple[str, str], ...]
    # Bullet ranges for the most recent roles, newest first
    role_bullets: Tuple[BulletRange, ...]
    # Range used for any role older than those covered by role_bullets
    default_role_bullets: BulletRange
    highlights_count: BulletRange = (5, 6)
    page_target: str = "exactly 2 A4 pages"
    education_heading: str = "Education"

    @property
    def skill_keys(self) -> List[str]:
        return [key for key, _ in self.skill_categories]

    @property
    def resume_skill_keys(self) -> List[str]:
        return [key for key, _ in self.resume_skill_categories]

    def bullets_for_role(self, index: int) -> BulletRange:
        """Bullet range for the role at `index` in newest-first order."""
        if index < len(self.role_bullets):
            return self.role_bullets[index]
        return self.default_role_bullets

    def skill_label(self, key: str) -> str:
        """Display label for a skill category key, preferring the resume category set."""
        for known_key, label in self.resume_skill_categories + self.skill_categories:
            if known_key == key:
                return label
        return key.replace("_", " ").title()


VARIANTS: Dict[str, VariantProfile] = {
    "developer": VariantProfile(
        name="developer",
        audience="software developers",
        skill_categories=(
            ("languages", "Languages"),
            ("frameworks_libraries", "Frameworks/Libraries"),
            ("architecture", "Architecture"),
            ("css", "CSS"),
            ("tools", "Tools"),
            ("testing", "Testing"),
            ("methodologies", "Methodologies"),
            ("design", "Design"),
            ("other", "Other"),
        ),
        resume_skill_categories=(
            ("languages", "Languages"),
            ("frameworks_libraries", "Frameworks & Libraries"),
            ("architecture", "Architecture"),
            ("tools_platforms", "Tools & Platforms"),
            ("methodologies", "Methodologies"),
        ),
        role_bullets=((6, 8), (5, 6)),
        default_role_bullets=(3, 4),
    ),
    "payroll": VariantProfile(
        name="payroll",
        audience="payroll and HR professionals",
        skill_categories=(
            ("payroll_systems", "Payroll Systems"),
            ("hris_applications", "HRIS Applications"),
            ("legislative_knowledge", "Legislative Knowledge"),
            ("software_tools", "Software Tools"),
            ("methodologies", "Methodologies"),
            ("certifications", "Certifications"),
        ),
        resume_skill_categories=(
            ("payroll_systems", "Payroll Systems"),
            ("hris_applications", "HRIS Applications"),
            ("legislative_knowledge", "Legislative Knowledge"),
            ("software_tools", "Software Tools"),
            ("methodologies", "Methodologies"),
            ("certifications", "Certifications"),
        ),
        role_bullets=((5, 7), (4, 5)),
        default_role_bullets=(2, 3),
        highlights_count=(5, 7),
    ),
    "grc": VariantProfile(
        name="grc",
        audience="governance, risk and compliance professionals",
        skill_categories=(
            ("frameworks_standards", "Frameworks & Standards"),
            ("grc_platforms", "GRC Platforms"),
            ("cloud_security", "Cloud Security"),
            ("audit_compliance", "Audit & Compliance"),
            ("methodologies", "Methodologies"),
            ("certifications", "Certifications"),
        ),
        resume_skill_categories=(
            ("frameworks_standards", "Frameworks & Standards"),
            ("grc_platforms", "GRC Platforms"),
            ("cloud_security", "Cloud Security"),
            ("audit_compliance", "Audit & Compliance"),
            ("methodologies", "Methodologies"),
            ("certifications", "Certifications"),
        ),
        role_bullets=((6, 8), (4, 6)),
        default_role_bullets=(3, 4),
        highlights_count=(6, 8),
        education_heading="Education & Certifications",
    ),
}


def get_variant(name: str) -> VariantProfile:
    """Look up a variant; an unknown name is a programming error."""
    return VARIANTS[name]
