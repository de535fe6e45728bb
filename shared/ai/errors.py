"""
Errors raised inside the tailoring pipeline.

Every stage raises a TailoringError subclass. The tailoring services catch
them at their boundary and convert them into a TailoringErrorInfo, so callers
only ever see a result object, never an exception.
"""

from typing import List, Optional

from shared.schemas.result import ErrorCategory, TailoringErrorInfo, UpstreamKind


class TailoringError(Exception):
    """Base class for pipeline failures."""

    category: ErrorCategory = "internal"
    default_message = "An unexpected error occurred. Please try again."

    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        self.user_message = user_message or message or self.default_message
        super().__init__(message or self.user_message)

    @property
    def retryable(self) -> bool:
        return False

    @property
    def kind(self) -> Optional[UpstreamKind]:
        return None

    def to_info(self) -> TailoringErrorInfo:
        return TailoringErrorInfo(
            category=self.category,
            kind=self.kind,
            message=self.user_message,
            retryable=self.retryable,
        )


class InputError(TailoringError):
    """Caller-supplied data failed local validation. No network call was made."""

    category = "input"


class ConfigurationError(TailoringError):
    """A required setting, such as the API credential, is missing."""

    category = "configuration"
    default_message = (
        "API key not configured. Please set OPENAI_API_KEY in your environment variables."
    )


UPSTREAM_MESSAGES = {
    "auth": "Invalid API key. Please check the OPENAI_API_KEY credential configuration.",
    "quota": "The generation API account has run out of credits. Please check billing for the API account.",
    "rate_limited": "Rate limit exceeded. Please try again in a moment.",
    "no_content": "The generation API returned no text content. Please try again.",
    "network": "Could not reach the generation API. Please check your connection and try again.",
    "timeout": "The generation API took too long to respond. Please try again.",
}

# API status errors that fit no other kind
UNEXPECTED_STATUS_MESSAGE = "The generation API could not complete the request. Please try again later."

RETRYABLE_KINDS = frozenset({"rate_limited", "timeout"})


class UpstreamError(TailoringError):
    """The external generation API rejected or failed the call."""

    category = "upstream"

    def __init__(self, kind: UpstreamKind, message: Optional[str] = None, user_message: Optional[str] = None):
        self._kind = kind
        user_message = user_message or UPSTREAM_MESSAGES[kind]
        super().__init__(message or user_message, user_message=user_message)

    @property
    def kind(self) -> Optional[UpstreamKind]:
        return self._kind

    @property
    def retryable(self) -> bool:
        return self._kind in RETRYABLE_KINDS


class ParseError(TailoringError):
    """The raw model output did not contain a decodable JSON object."""

    category = "parse"
    default_message = "Failed to parse AI response. Please try again."

    def __init__(self, message: str, raw_text: str = ""):
        self.raw_text = raw_text
        super().__init__(message, user_message=self.default_message)


class ResponseValidationError(TailoringError):
    """The model returned JSON that does not match the requested document shape."""

    category = "validation"
    default_message = "The AI response was incomplete. Please try again."

    def __init__(self, message: str, errors: Optional[List[str]] = None, user_message: Optional[str] = None):
        self.errors = errors or []
        super().__init__(message, user_message=user_message or self.default_message)
