"""Shared fixtures: canned model output, a test candidate and job postings."""

import json

import pytest

from shared.candidates import store as candidate_store
from shared.schemas.candidate import CandidateProfile


FRONTEND_JOB = (
    "Senior Frontend Engineer, React, TypeScript. Join our product team to build accessible, "
    "high-performance web applications. You will own component architecture, mentor engineers and "
    "ship features weekly with a strong testing culture."
)


def resume_payload(experience_count: int = 2) -> dict:
    return {
        "tailored_resume": {
            "professional_summary": "Front-end engineer with 8 years of React and TypeScript experience.",
            "highlights_of_qualifications": ["Led React migrations", "Built design systems"],
            "skills": {
                "languages": ["TypeScript", "JavaScript"],
                "frameworks_libraries": ["React", "Next.js"],
                "tools_platforms": [],
            },
            "experience": [
                {
                    "company": f"Company {i}",
                    "location": "Toronto, ON",
                    "role": "Front-End Engineer",
                    "dates": "2020 – 2024",
                    "achievements": [f"Shipped feature {i}", "Cut bundle size by 30%"],
                }
                for i in range(1, experience_count + 1)
            ],
            "education": [{"degree": "B.Sc. Computer Science", "institution": "University of Waterloo"}],
        },
        "optimization_notes": {
            "ats_score": 86,
            "ats_breakdown": {
                "keywords_match": 90,
                "skills_match": 85,
                "experience_relevance": 80,
                "formatting_score": 95,
            },
            "keywords_incorporated": ["React", "TypeScript"],
            "keywords_missing": ["GraphQL"],
            "skills_highlighted": ["React"],
            "experience_reordered": True,
            "match_score": "High",
            "suggestions": "Mention GraphQL exposure if any.",
        },
    }


def cover_letter_payload() -> dict:
    return {
        "cover_letter": {
            "greeting": "Dear Hiring Manager,",
            "opening_paragraph": "Acme's accessibility work is why I am excited about this role.",
            "body_paragraph_1": "At Northwind I led a microfrontend migration across 5 apps.",
            "body_paragraph_2": "I want to build tools that millions of people rely on.",
            "closing_paragraph": "Thank you for your time; I would love to talk.",
            "signature": "Sincerely,\\nJane Doe",
        },
        "metadata": {
            "tone_used": "professional",
            "tone_reason": "Enterprise posting with formal language.",
            "key_points_addressed": ["React", "mentoring"],
            "company_specific_mentions": ["accessibility work"],
        },
    }


@pytest.fixture
def make_resume_payload():
    return resume_payload


@pytest.fixture
def make_cover_letter_payload():
    return cover_letter_payload


@pytest.fixture
def frontend_job() -> str:
    return FRONTEND_JOB


@pytest.fixture
def resume_json() -> str:
    """Two-role resume wrapped in prose, as models often return it."""
    return "Here is your tailored resume:\n```json\n" + json.dumps(resume_payload(2)) + "\n```\nGood luck!"


@pytest.fixture
def cover_letter_json() -> str:
    return json.dumps(cover_letter_payload())


@pytest.fixture
def jane_doe(monkeypatch) -> CandidateProfile:
    """A developer candidate with two jobs, registered in the candidate store."""
    profile = CandidateProfile(
        id="jane-doe",
        name="Jane Doe",
        email="jane.doe@example.com",
        phone="(555) 555-0100",
        location="Toronto, ON",
        years_of_experience="8+",
        professional_title="Senior Front-End Engineer",
        profession_variant="developer",
        summary="Front-end engineer focused on React and TypeScript.",
        highlights=("Led React migrations",),
        skills={
            "languages": ("TypeScript", "JavaScript"),
            "frameworks_libraries": ("React",),
            "architecture": ("Microfrontends",),
            "css": ("SASS",),
            "tools": ("Webpack",),
            "testing": ("Jest",),
            "methodologies": ("Agile",),
            "design": ("Figma",),
            "other": ("Accessibility",),
        },
        experience=(
            {
                "company": "Globex",
                "location": "Toronto, ON",
                "role": "Senior Front-End Engineer",
                "dates": "2021 – Present",
                "achievements": ("Led a React 18 migration",),
            },
            {
                "company": "Initech",
                "location": "Ottawa, ON",
                "role": "Front-End Developer",
                "dates": "2016 – 2021",
                "achievements": ("Built the component library",),
            },
        ),
        education=({"degree": "B.Sc. Computer Science", "institution": "University of Waterloo"},),
    )
    monkeypatch.setitem(candidate_store.CANDIDATES, profile.id, profile)
    return profile
