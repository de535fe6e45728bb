"""
Generation client for the external text-generation API.

The client sends one system instruction and one user message with fixed
sampling parameters per document type, and returns the raw text of the first
text-bearing response. Provider errors are translated into UpstreamError
kinds. The client never retries; retry policy belongs to the caller.
"""

import os
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import openai
from openai import AsyncOpenAI

from .errors import UNEXPECTED_STATUS_MESSAGE, ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

OPENAI_KEY_ENV_VARS = (
    "API_OPENAI_API_KEY",
    "OPENAI_API_KEY",
    "AI_INTEGRATIONS_OPENAI_API_KEY",
)

MODEL_NAME = os.environ.get("OPENAI_MODEL", "gpt-4o")
DEFAULT_TIMEOUT_SECONDS = 60.0

QUOTA_MARKERS = ("insufficient_quota", "quota", "credit balance", "billing")


@dataclass(frozen=True)
class GenerationSettings:
    """Sampling parameters fixed per document type."""

    max_tokens: int
    temperature: float


# Lower temperature for resumes than for cover letters
RESUME_GENERATION = GenerationSettings(max_tokens=4096, temperature=0.3)
COVER_LETTER_GENERATION = GenerationSettings(max_tokens=2048, temperature=0.4)


def resolve_openai_api_key() -> Tuple[Optional[str], Optional[str]]:
    """
    Find the OpenAI API key in the environment.

    Returns:
        Tuple of (api_key, source_env_var_name) or (None, None) if not found
    """
    for var_name in OPENAI_KEY_ENV_VARS:
        key = os.environ.get(var_name)
        if key and key.strip():
            return key.strip(), var_name
    return None, None


class BaseGenerationClient(ABC):
    """Abstract base class for generation clients."""

    @abstractmethod
    async def generate(self, system: str, user: str, settings: GenerationSettings) -> str:
        """Return the raw text produced for one system + user message pair."""

    def ensure_configured(self) -> None:
        """Raise ConfigurationError if the client cannot make calls."""


class OpenAIGenerationClient(BaseGenerationClient):
    """Generation client backed by the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = MODEL_NAME,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[AsyncOpenAI] = None

    @classmethod
    def from_env(cls) -> "OpenAIGenerationClient":
        api_key, _ = resolve_openai_api_key()
        return cls(
            api_key=api_key,
            base_url=os.environ.get("AI_INTEGRATIONS_OPENAI_BASE_URL"),
        )

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                "OpenAI API key not set. Checked: " + ", ".join(OPENAI_KEY_ENV_VARS)
            )

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def generate(self, system: str, user: str, settings: GenerationSettings) -> str:
        self.ensure_configured()
        client = self._get_client()

        logger.info(
            f"Calling generation API: model={self.model}, max_tokens={settings.max_tokens}, "
            f"temperature={settings.temperature}"
        )
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                max_completion_tokens=settings.max_tokens,
                temperature=settings.temperature,
            )
        except openai.APIError as e:
            upstream = translate_api_error(e)
            logger.error(f"Generation API call failed ({upstream.kind}): {e}")
            raise upstream from e

        return first_text_content(response)


def first_text_content(response) -> str:
    """Text of the first choice whose message carries non-empty text."""
    for choice in getattr(response, "choices", None) or []:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if isinstance(content, str) and content.strip():
            return content
    raise UpstreamError("no_content", "No text content in response")


def _is_quota_error(error: openai.APIError) -> bool:
    code = str(getattr(error, "code", "") or "").lower()
    message = str(getattr(error, "message", "") or error).lower()
    return code == "insufficient_quota" or any(marker in message for marker in QUOTA_MARKERS)


def translate_api_error(error: openai.APIError) -> UpstreamError:
    """Map an OpenAI SDK exception onto an UpstreamError kind."""
    # APITimeoutError subclasses APIConnectionError, so it is checked first
    if isinstance(error, openai.APITimeoutError):
        return UpstreamError("timeout", str(error))
    if isinstance(error, openai.APIConnectionError):
        return UpstreamError("network", str(error))
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return UpstreamError("auth", str(error))
    if isinstance(error, openai.RateLimitError):
        return UpstreamError("quota" if _is_quota_error(error) else "rate_limited", str(error))
    if isinstance(error, openai.BadRequestError) and _is_quota_error(error):
        return UpstreamError("quota", str(error))
    if isinstance(error, openai.APIStatusError):
        return UpstreamError("network", str(error), user_message=UNEXPECTED_STATUS_MESSAGE)
    return UpstreamError("network", str(error))


Outcome = Union[str, BaseException]


class StaticGenerationClient(BaseGenerationClient):
    """
    Generation client that replays canned outcomes instead of calling an API.

    Useful for local development and tests. Each call consumes the next
    outcome; the last one repeats once the list is exhausted. An outcome that
    is an exception is raised instead of returned.
    """

    def __init__(self, *outcomes: Outcome, configured: bool = True):
        if not outcomes:
            raise ValueError("StaticGenerationClient needs at least one outcome")
        self._outcomes: List[Outcome] = list(outcomes)
        self.configured = configured
        self.calls: List[Tuple[str, str, GenerationSettings]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError()

    async def generate(self, system: str, user: str, settings: GenerationSettings) -> str:
        self.calls.append((system, user, settings))
        index = min(len(self.calls), len(self._outcomes)) - 1
        outcome = self._outcomes[index]
        logger.info(f"[STATIC] generation call #{len(self.calls)}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


_client: Optional[BaseGenerationClient] = None


def get_generation_client() -> BaseGenerationClient:
    """Get or create the process-wide generation client from the environment."""
    global _client
    if _client is None:
        _client = OpenAIGenerationClient.from_env()
    return _client
