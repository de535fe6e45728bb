"""
Orchestration shared by the resume and cover letter services.

A tailoring request moves through Validating -> Generating -> Extracting and
ends in Succeeded or Failed. TailoringRun tracks one request through those
states and builds the final result object; nothing it owns outlives the
request.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from shared.schemas.result import GenerationResult
from .client import BaseGenerationClient, GenerationSettings
from .errors import InputError, TailoringError, UpstreamError
from .prompts import PromptPair

logger = logging.getLogger(__name__)

MIN_JOB_DESCRIPTION_LENGTH = 50

JOB_DESCRIPTION_REQUIRED = "Job description is required"
JOB_DESCRIPTION_TOO_SHORT = "Job description seems too short. Please paste the full job posting."

RequestT = TypeVar("RequestT", bound=BaseModel)
ResultT = TypeVar("ResultT", bound=GenerationResult)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Backoff applied to rate-limited calls only.

    The default makes no retries: a rate-limited call fails immediately.
    """

    max_rate_limit_retries: int = 0
    backoff_seconds: float = 2.0

    def delay_for(self, attempt: int) -> float:
        """Delay before retrying after the given (1-based) attempt."""
        return self.backoff_seconds * (2 ** (attempt - 1))


# ============================================================================
# Input validation
# ============================================================================

def request_id_of(request: Any) -> str:
    """The caller's request id if it supplied one, else a fresh UUID."""
    if isinstance(request, BaseModel):
        candidate = getattr(request, "request_id", None)
    elif isinstance(request, Mapping):
        candidate = request.get("request_id")
    else:
        candidate = None
    if isinstance(candidate, str) and candidate.strip():
        return candidate
    return str(uuid.uuid4())


def coerce_request(
    model: Type[RequestT],
    request: Union[RequestT, Mapping[str, Any]],
    field_messages: Dict[str, str],
) -> RequestT:
    """
    Build a request model from a model instance or a raw mapping.

    Missing or wrongly typed fields raise InputError with the message
    registered for the first offending field.
    """
    if isinstance(request, model):
        return request
    if not isinstance(request, Mapping):
        raise InputError("Request body must be a JSON object")
    try:
        return model.model_validate(dict(request))
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else ""
        message = field_messages.get(field, f"Invalid value for '{field}'")
        raise InputError(f"{field}: {first.get('msg')}", user_message=message) from e


def require_text(value: Optional[str], message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InputError(message)
    return value


def validate_job_description(job_description: Optional[str]) -> str:
    """Reject job descriptions too short to be worth a paid API call."""
    require_text(job_description, JOB_DESCRIPTION_REQUIRED)
    if len(job_description.strip()) < MIN_JOB_DESCRIPTION_LENGTH:
        raise InputError(JOB_DESCRIPTION_TOO_SHORT)
    return job_description


def clean_keywords(keywords: Optional[List[str]]) -> List[str]:
    """Strip, drop blanks and de-duplicate keywords, keeping first-seen order."""
    cleaned: List[str] = []
    for keyword in keywords or []:
        keyword = keyword.strip()
        if keyword and keyword not in cleaned:
            cleaned.append(keyword)
    return cleaned


# ============================================================================
# Run state
# ============================================================================

class TailoringRun:
    """One request's trip through the pipeline."""

    def __init__(self, document_type: str, request_id: str, retry_policy: Optional[RetryPolicy] = None):
        self.document_type = document_type
        self.request_id = request_id
        self.retry_policy = retry_policy or RetryPolicy()
        self.attempts = 0
        self.state = "validating"

    async def generate(
        self,
        client: BaseGenerationClient,
        prompt: PromptPair,
        settings: GenerationSettings,
    ) -> str:
        """Call the generation API, backing off on rate limits if the policy allows it."""
        self.state = "generating"
        while True:
            self.attempts += 1
            try:
                raw_text = await client.generate(prompt.system, prompt.user, settings)
            except UpstreamError as e:
                if e.kind != "rate_limited" or self.attempts > self.retry_policy.max_rate_limit_retries:
                    raise
                delay = self.retry_policy.delay_for(self.attempts)
                logger.warning(
                    f"[{self.request_id}] {self.document_type} rate limited on attempt {self.attempts}, "
                    f"retrying in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                continue
            self.state = "extracting"
            logger.debug(f"[{self.request_id}] received {len(raw_text)} characters")
            return raw_text

    def succeeded(self, result_type: Type[ResultT], document: BaseModel) -> ResultT:
        self.state = "succeeded"
        logger.info(f"[{self.request_id}] {self.document_type} generated after {self.attempts} call(s)")
        return result_type(
            success=True,
            data=document,
            request_id=self.request_id,
            attempts=self.attempts,
        )

    def failed(self, result_type: Type[ResultT], error: TailoringError) -> ResultT:
        failed_in = self.state
        self.state = "failed"
        info = error.to_info()
        logger.warning(
            f"[{self.request_id}] {self.document_type} failed while {failed_in}: "
            f"{info.category}{'/' + info.kind if info.kind else ''}: {error}"
        )
        return result_type(
            success=False,
            error=info,
            request_id=self.request_id,
            attempts=self.attempts,
        )
