import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from shared.ai import BaseGenerationClient, RetryPolicy, generate_cover_letter as run_generate_cover_letter
from shared.schemas.cover_letter import CoverLetterResult
from ..dependencies import get_generation_client, get_retry_policy
from ..errors import raise_for_result

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cover-letter", tags=["cover-letter"])


@router.post("/generate", response_model=CoverLetterResult)
async def generate_cover_letter(
    payload: Dict[str, Any] = Body(..., description="CoverLetterRequest fields"),
    client: BaseGenerationClient = Depends(get_generation_client),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
):
    """Write a cover letter for one company and job posting."""
    result = await run_generate_cover_letter(payload, client=client, retry_policy=retry_policy)
    raise_for_result(result)
    return result
