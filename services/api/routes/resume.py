import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from shared.ai import BaseGenerationClient, RetryPolicy, tailor_resume as run_tailor_resume
from shared.schemas.resume import ResumeResult
from ..dependencies import get_generation_client, get_retry_policy
from ..errors import raise_for_result

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/resume", tags=["resume"])


@router.post("/tailor", response_model=ResumeResult)
async def tailor_resume(
    payload: Dict[str, Any] = Body(..., description="ResumeRequest fields"),
    client: BaseGenerationClient = Depends(get_generation_client),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
):
    """
    Tailor the candidate's resume for a job description.

    Body fields: job_description, optional candidate_id, additional_keywords
    and request_id. Failures map to an HTTP status by error category.
    """
    result = await run_tailor_resume(payload, client=client, retry_policy=retry_policy)
    raise_for_result(result)
    return result
