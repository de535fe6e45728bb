import logging
from typing import Any, Mapping, Optional, Union

from shared.candidates import get_candidate_or_default
from shared.schemas.resume import ResumeRequest, ResumeResult
from .client import BaseGenerationClient, RESUME_GENERATION, get_generation_client
from .errors import TailoringError
from .extraction import parse_resume_response
from .pipeline import (
    RetryPolicy,
    TailoringRun,
    clean_keywords,
    coerce_request,
    request_id_of,
    validate_job_description,
    JOB_DESCRIPTION_REQUIRED,
)
from .prompts import build_resume_prompt

logger = logging.getLogger(__name__)

RESUME_FIELD_MESSAGES = {
    "job_description": JOB_DESCRIPTION_REQUIRED,
    "candidate_id": "Candidate id must be text",
    "additional_keywords": "Additional keywords must be a list of text values",
    "request_id": "Request id must be text",
}


async def tailor_resume(
    request: Union[ResumeRequest, Mapping[str, Any]],
    client: Optional[BaseGenerationClient] = None,
    retry_policy: Optional[RetryPolicy] = None,
) -> ResumeResult:
    """
    Generate a resume tailored to a job description.

    Args:
        request: ResumeRequest or the raw request mapping
        client: Generation client (defaults to the environment-configured one)
        retry_policy: Backoff for rate-limited calls (defaults to no retries)

    Returns:
        ResumeResult carrying either the validated resume or the error
    """
    run = TailoringRun("resume", request_id_of(request), retry_policy)
    try:
        resume_request = coerce_request(ResumeRequest, request, RESUME_FIELD_MESSAGES)
        validate_job_description(resume_request.job_description)
        keywords = clean_keywords(resume_request.additional_keywords)
        resume_request = resume_request.model_copy(update={"additional_keywords": keywords or None})

        generation_client = client or get_generation_client()
        generation_client.ensure_configured()

        candidate = get_candidate_or_default(resume_request.candidate_id)
        logger.info(
            f"[{run.request_id}] Tailoring resume for {candidate.id} "
            f"({len(resume_request.job_description)} chars, {len(keywords)} extra keywords)"
        )

        prompt = build_resume_prompt(candidate, resume_request)
        raw_text = await run.generate(generation_client, prompt, RESUME_GENERATION)
        resume = parse_resume_response(raw_text)

    except TailoringError as e:
        return run.failed(ResumeResult, e)
    except Exception as e:
        logger.exception(f"[{run.request_id}] Unexpected error tailoring resume: {e}")
        return run.failed(ResumeResult, TailoringError())

    return run.succeeded(ResumeResult, resume)
