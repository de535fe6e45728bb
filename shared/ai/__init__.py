from .resume_generator import tailor_resume
from .cover_letter_generator import generate_cover_letter
from .client import (
    BaseGenerationClient,
    OpenAIGenerationClient,
    StaticGenerationClient,
    GenerationSettings,
    RESUME_GENERATION,
    COVER_LETTER_GENERATION,
    get_generation_client,
)
from .errors import (
    TailoringError,
    InputError,
    ConfigurationError,
    UpstreamError,
    ParseError,
    ResponseValidationError,
)
from .pipeline import RetryPolicy, MIN_JOB_DESCRIPTION_LENGTH

__all__ = [
    "tailor_resume",
    "generate_cover_letter",
    "BaseGenerationClient",
    "OpenAIGenerationClient",
    "StaticGenerationClient",
    "GenerationSettings",
    "RESUME_GENERATION",
    "COVER_LETTER_GENERATION",
    "get_generation_client",
    "TailoringError",
    "InputError",
    "ConfigurationError",
    "UpstreamError",
    "ParseError",
    "ResponseValidationError",
    "RetryPolicy",
    "MIN_JOB_DESCRIPTION_LENGTH",
]
