import logging
from typing import Any, Mapping, Optional, Union

from shared.candidates import get_candidate_or_default
from shared.schemas.cover_letter import CoverLetterRequest, CoverLetterResult
from .client import BaseGenerationClient, COVER_LETTER_GENERATION, get_generation_client
from .errors import TailoringError
from .extraction import parse_cover_letter_response
from .pipeline import (
    RetryPolicy,
    TailoringRun,
    coerce_request,
    request_id_of,
    require_text,
    validate_job_description,
    JOB_DESCRIPTION_REQUIRED,
)
from .prompts import build_cover_letter_prompt

logger = logging.getLogger(__name__)

COMPANY_NAME_REQUIRED = "Company name is required"
WHY_THIS_COMPANY_REQUIRED = "Please tell us why you want to work at this company"

COVER_LETTER_FIELD_MESSAGES = {
    "company_name": COMPANY_NAME_REQUIRED,
    "why_this_company": WHY_THIS_COMPANY_REQUIRED,
    "job_description": JOB_DESCRIPTION_REQUIRED,
    "company_mission": "Company mission must be text",
    "candidate_id": "Candidate id must be text",
    "request_id": "Request id must be text",
}


async def generate_cover_letter(
    request: Union[CoverLetterRequest, Mapping[str, Any]],
    client: Optional[BaseGenerationClient] = None,
    retry_policy: Optional[RetryPolicy] = None,
) -> CoverLetterResult:
    """
    Generate a cover letter for one company and job posting.

    Args:
        request: CoverLetterRequest or the raw request mapping
        client: Generation client (defaults to the environment-configured one)
        retry_policy: Backoff for rate-limited calls (defaults to no retries)

    Returns:
        CoverLetterResult carrying either the validated letter or the error
    """
    run = TailoringRun("cover letter", request_id_of(request), retry_policy)
    try:
        letter_request = coerce_request(CoverLetterRequest, request, COVER_LETTER_FIELD_MESSAGES)
        require_text(letter_request.company_name, COMPANY_NAME_REQUIRED)
        require_text(letter_request.why_this_company, WHY_THIS_COMPANY_REQUIRED)
        validate_job_description(letter_request.job_description)

        generation_client = client or get_generation_client()
        generation_client.ensure_configured()

        candidate = get_candidate_or_default(letter_request.candidate_id)
        logger.info(f"[{run.request_id}] Writing cover letter for {candidate.id} -> {letter_request.company_name}")

        prompt = build_cover_letter_prompt(candidate, letter_request)
        raw_text = await run.generate(generation_client, prompt, COVER_LETTER_GENERATION)
        cover_letter = parse_cover_letter_response(raw_text)

    except TailoringError as e:
        return run.failed(CoverLetterResult, e)
    except Exception as e:
        logger.exception(f"[{run.request_id}] Unexpected error generating cover letter: {e}")
        return run.failed(CoverLetterResult, TailoringError())

    return run.succeeded(CoverLetterResult, cover_letter)
