"""
Prompt construction for resume and cover letter generation.

Everything here is a pure function of (CandidateProfile, request fields): no
I/O, no clock, no randomness. Calling a formatter twice with the same inputs
yields byte-identical strings.

The candidate's profession variant supplies the skill categories, bullet
guidance and headings through shared.variants.VARIANTS.
"""

import json
from typing import List, NamedTuple, Optional, Sequence

from shared.schemas.candidate import CandidateProfile
from shared.schemas.cover_letter import CoverLetterRequest
from shared.schemas.resume import ResumeRequest
from shared.variants import VariantProfile, get_variant


class PromptPair(NamedTuple):
    system: str
    user: str


def _range(bounds) -> str:
    low, high = bounds
    return f"{low}-{high}"


def _tag(name: str, body: str) -> str:
    return f"<{name}>\n{body}\n</{name}>"


# ============================================================================
# Candidate experience block
# ============================================================================

def format_candidate_experience(candidate: CandidateProfile) -> str:
    """Flatten a profile into the labelled plain-text block sent to the model."""
    variant = get_variant(candidate.profession_variant)

    skills_text = "\n".join(
        f"- {label}: {', '.join(candidate.skills[key])}"
        for key, label in variant.skill_categories
    )

    highlights_text = "\n".join(f"- {item}" for item in candidate.highlights)

    projects_text = ""
    if candidate.key_projects:
        lines = []
        for project in candidate.key_projects:
            line = f"- {project.name}: {project.description} (Technologies: {', '.join(project.technologies)})"
            if project.impact:
                line += f" | Impact: {project.impact}"
            lines.append(line)
        projects_text = "\n".join(lines)

    experience_text = "\n\n".join(
        f"{job.company} | {job.location}\n"
        f"{job.role} | {job.dates}\n"
        + "\n".join(f"- {achievement}" for achievement in job.achievements)
        for job in candidate.experience
    )

    education_lines = []
    for entry in candidate.education:
        line = f"- {entry.degree} | {entry.institution}"
        if entry.location:
            line += f", {entry.location}"
        education_lines.append(line)

    sections = [
        f"**Name:** {candidate.name}",
        f"**Title:** {candidate.professional_title} ({candidate.years_of_experience} years of experience)",
        f"**Contact:** {candidate.contact_line}",
        "",
        "**Professional Summary:**",
        candidate.summary,
        "",
        "**Highlights of Qualifications:**",
        highlights_text,
        "",
        "**Skills:**",
        skills_text,
    ]
    if projects_text:
        sections += ["", "**Key Projects:**", projects_text]
    sections += [
        "",
        "**Experience:**",
        "",
        experience_text,
        "",
        f"**{variant.education_heading}:**",
        "\n".join(education_lines),
    ]
    return "\n".join(sections)


# ============================================================================
# Resume prompts
# ============================================================================

def _bullet_guidance(candidate: CandidateProfile, variant: VariantProfile) -> List[str]:
    lines = []
    for index, job in enumerate(candidate.experience):
        lines.append(
            f"- {job.company} ({job.role}): {_range(variant.bullets_for_role(index))} achievement bullets"
        )
    return lines


def _resume_output_schema(candidate: CandidateProfile, variant: VariantProfile) -> str:
    experience = []
    for index, job in enumerate(candidate.experience):
        low, high = variant.bullets_for_role(index)
        experience.append({
            "company": job.company,
            "location": "City, Province/State",
            "role": "Job Title",
            "dates": "Start Date – End Date",
            "summary": "One sentence describing the role, tailored to the target job",
            "achievements": [f"{low}-{high} concise, quantified, relevant achievement bullets"],
        })

    schema = {
        "tailored_resume": {
            "professional_summary": "A 3-4 sentence summary tailored to this specific role",
            "highlights_of_qualifications": [
                f"{_range(variant.highlights_count)} key qualifications relevant to the job"
            ],
            "skills": {key: ["skill1", "skill2"] for key in variant.resume_skill_keys},
            "experience": experience,
            "key_projects": [
                {
                    "name": "Project Name",
                    "description": "Brief 1-sentence description tailored to the target role",
                    "technologies": ["Tech1", "Tech2"],
                    "impact": "Quantified business impact",
                }
            ],
            "education": [
                {"degree": "Degree Name", "institution": "School Name", "location": "City, Country (optional)"}
            ],
        },
        "optimization_notes": {
            "ats_score": 85,
            "ats_breakdown": {
                "keywords_match": 90,
                "skills_match": 85,
                "experience_relevance": 80,
                "formatting_score": 95,
            },
            "keywords_incorporated": ["keyword1", "keyword2"],
            "keywords_missing": ["keyword the candidate does not have"],
            "skills_highlighted": ["skill1", "skill2"],
            "experience_reordered": True,
            "match_score": "High | Medium | Low",
            "suggestions": "Any additional suggestions for the candidate",
        },
    }
    return json.dumps(schema, indent=2, ensure_ascii=False)


def build_resume_system_prompt(candidate: CandidateProfile) -> str:
    """System instruction for resume tailoring, specialised to the candidate's variant."""
    variant = get_variant(candidate.profession_variant)
    skill_labels = ", ".join(label for _, label in variant.resume_skill_categories)
    bullet_lines = "\n".join(_bullet_guidance(candidate, variant))

    return f"""You are an expert resume writer and career coach with 15 years of experience helping {variant.audience} land jobs at top companies. Your specialty is tailoring resumes to specific job descriptions while keeping them authentic and truthful.

## CRITICAL REQUIREMENT: LENGTH
This candidate has {candidate.years_of_experience} years of experience. The resume MUST fit on {variant.page_target}:
- Professional Summary: 3-4 sentences
- Highlights of Qualifications: {_range(variant.highlights_count)} bullet points
{bullet_lines}
- Keep each bullet to 1-2 lines

## Your Task
Given a job description and the candidate's base experience, generate a tailored resume that:
1. Highlights the experience most relevant to this role
2. Incorporates keywords from the job description naturally
3. Reorders and emphasizes achievements that match the role's requirements
4. Never fabricates or exaggerates experience
5. Reads well for both applicant tracking systems and human recruiters

## Input Format
The user message contains these sections, each wrapped in tags:
- <job_description>: the full job posting
- <candidate_experience>: the candidate's complete history, skills and achievements
- <additional_keywords> (optional): keywords the candidate asked to emphasize, used only where the candidate's experience supports them

## Output Format
Return ONLY a JSON object with this structure, with no markdown and no text before or after it:

{_resume_output_schema(candidate, variant)}

## Tailoring Rules
- Skills: group under these categories only: {skill_labels}. Put the most relevant skills first and drop irrelevant ones.
- Experience: keep every role, reorder bullets so the most relevant come first, and rewrite them in the job description's language.
- Key projects: include the 2-3 most relevant projects, if the candidate has any.
- Education: degree and institution only.

## Truthfulness Rules (CRITICAL)
- NEVER add skills the candidate does not have
- NEVER fabricate achievements or metrics
- NEVER exaggerate scope or impact
- Reframing existing achievements is fine; inventing new ones is not
- Use ONLY information in <candidate_experience>. When in doubt, leave it out.

## ATS Score
ats_score = keywords_match * 0.35 + skills_match * 0.30 + experience_relevance * 0.25 + formatting_score * 0.10
List important job keywords the candidate lacks in keywords_missing.

## Edge Cases
- If the job requires skills the candidate lacks, do not add them; note the gaps in optimization_notes.suggestions.
- If the text is not a job description, return exactly: {{"error": "The provided text does not appear to be a job description. Please paste the full job posting."}}"""


def format_resume_user_message(
    job_description: str,
    candidate: CandidateProfile,
    additional_keywords: Optional[Sequence[str]] = None,
) -> str:
    """User message for resume tailoring, with each input in its own tagged section."""
    sections = [
        "## Job Description",
        "",
        _tag("job_description", job_description),
        "",
        "## Candidate Experience",
        "",
        _tag("candidate_experience", format_candidate_experience(candidate)),
    ]
    if additional_keywords:
        sections += [
            "",
            "## Additional Keywords",
            "",
            _tag("additional_keywords", "\n".join(f"- {keyword}" for keyword in additional_keywords)),
        ]
    sections += [
        "",
        "## Instructions",
        "",
        "Generate a tailored resume for this specific job. Return the response as a JSON object "
        "following the output format specified in your instructions.",
    ]
    if additional_keywords:
        sections.append(
            "Work the additional keywords into the resume wherever the candidate's experience genuinely supports them."
        )
    return "\n".join(sections)


def build_resume_prompt(candidate: CandidateProfile, request: ResumeRequest) -> PromptPair:
    return PromptPair(
        system=build_resume_system_prompt(candidate),
        user=format_resume_user_message(request.job_description, candidate, request.additional_keywords),
    )


# ============================================================================
# Cover letter prompts
# ============================================================================

COVER_LETTER_OUTPUT_SCHEMA = """{
  "cover_letter": {
    "greeting": "Dear Hiring Manager, (or the named hiring manager)",
    "opening_paragraph": "Specific hook about the role or company plus the candidate's title and years of experience",
    "body_paragraph_1": "Most relevant achievement, with metrics, tied to the job's requirements",
    "body_paragraph_2": "Second achievement or skill set, plus why this company in the candidate's own words",
    "closing_paragraph": "Enthusiasm, forward-looking statement and thanks",
    "signature": "Sincerely,\\n<candidate name>"
  },
  "metadata": {
    "tone_used": "conversational | professional",
    "tone_reason": "Why this tone fits the company",
    "key_points_addressed": ["requirement from the job that the letter addresses"],
    "company_specific_mentions": ["company detail referenced in the letter"]
  }
}"""


def build_cover_letter_system_prompt(candidate: CandidateProfile) -> str:
    """System instruction for cover letter writing."""
    variant = get_variant(candidate.profession_variant)

    return f"""You are an expert cover letter writer with 15 years of experience helping {variant.audience} land jobs at top companies. You write compelling, personal cover letters that complement a tailored resume.

## Your Task
Write a cover letter for {candidate.name}, a {candidate.professional_title} with {candidate.years_of_experience} years of experience, that:
1. Opens with a specific hook about the role or company (never "I am writing to apply...")
2. Highlights 2-3 achievements that directly match the role's requirements
3. Uses the candidate's own reason for wanting to join the company, in <why_this_company>
4. Refers to the company mission in <company_mission> when one is given
5. Is 250-350 words in total

## Input Format
The user message contains tagged sections: <company_name>, <why_this_company>, <job_description>, <candidate_experience> and optionally <company_mission>.

## Tone
Choose "conversational" for startups and companies whose posting reads informally, otherwise "professional". Explain the choice in tone_reason.

## Output Format
Return ONLY a JSON object with this structure, with no markdown and no text before or after it:

{COVER_LETTER_OUTPUT_SCHEMA}

## Truthfulness Rules (CRITICAL)
- Only reference achievements present in <candidate_experience>
- Do not invent company facts beyond what the user provided or the job description states
- Do not over-promise or exaggerate capabilities"""


def format_cover_letter_user_message(
    company_name: str,
    why_this_company: str,
    job_description: str,
    candidate: CandidateProfile,
    company_mission: Optional[str] = None,
) -> str:
    """User message for cover letter generation, with each input in its own tagged section."""
    sections = [
        "## Company Name",
        "",
        _tag("company_name", company_name),
        "",
        "## Why This Company",
        "",
        _tag("why_this_company", why_this_company),
    ]
    if company_mission and company_mission.strip():
        sections += [
            "",
            "## Company Mission",
            "",
            _tag("company_mission", company_mission),
        ]
    sections += [
        "",
        "## Job Description",
        "",
        _tag("job_description", job_description),
        "",
        "## Candidate Experience",
        "",
        _tag("candidate_experience", format_candidate_experience(candidate)),
        "",
        "## Instructions",
        "",
        "Write a compelling cover letter for this specific job. Return the response as a JSON object "
        "following the output format specified in your instructions.",
    ]
    return "\n".join(sections)


def build_cover_letter_prompt(candidate: CandidateProfile, request: CoverLetterRequest) -> PromptPair:
    return PromptPair(
        system=build_cover_letter_system_prompt(candidate),
        user=format_cover_letter_user_message(
            request.company_name,
            request.why_this_company,
            request.job_description,
            candidate,
            request.company_mission,
        ),
    )
