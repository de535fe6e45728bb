import uuid
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, model_validator


ErrorCategory = Literal["input", "configuration", "upstream", "parse", "validation", "internal"]
UpstreamKind = Literal["auth", "quota", "rate_limited", "no_content", "network", "timeout"]


class TailoringErrorInfo(BaseModel):
    """What a caller is told when a tailoring request fails."""

    category: ErrorCategory = Field(..., description="Which stage of the pipeline failed")
    kind: Optional[UpstreamKind] = Field(None, description="Upstream failure kind (upstream errors only)")
    message: str = Field(..., description="Human-readable message safe to show to the user")
    retryable: bool = Field(False, description="Whether retrying the same request later is sensible")


class GenerationResult(BaseModel):
    """
    Discriminated outcome of one generation request.

    Exactly one of `data` (success) or `error` (failure) is set. Subclasses
    narrow the type of `data`.
    """

    success: bool = Field(..., description="Whether generation succeeded")
    data: Optional[Any] = Field(None, description="Validated document when successful")
    error: Optional[TailoringErrorInfo] = Field(None, description="Failure details when unsuccessful")
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Identifies the originating request")
    attempts: int = Field(0, ge=0, description="Number of calls made to the generation API")

    @model_validator(mode="after")
    def check_exclusive(self) -> "GenerationResult":
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("a successful result carries data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("a failed result carries an error and no data")
        return self
