"""Map failed generation results onto HTTP responses."""
import logging

from fastapi import HTTPException

from shared.schemas.result import GenerationResult, TailoringErrorInfo

logger = logging.getLogger(__name__)

CATEGORY_STATUS = {
    "input": 400,
    "configuration": 500,
    "parse": 500,
    "validation": 500,
    "internal": 500,
}

UPSTREAM_STATUS = {
    "auth": 401,
    "quota": 402,
    "rate_limited": 429,
    "timeout": 504,
    "network": 502,
    "no_content": 502,
}


def status_for_error(error: TailoringErrorInfo) -> int:
    """HTTP status code for a failed tailoring request."""
    if error.category == "upstream":
        return UPSTREAM_STATUS.get(error.kind, 502)
    return CATEGORY_STATUS.get(error.category, 500)


def raise_for_result(result: GenerationResult) -> None:
    """Raise HTTPException if the result is a failure."""
    if result.success:
        return
    error = result.error
    status_code = status_for_error(error)
    logger.info(f"[{result.request_id}] responding {status_code} ({error.category})")
    raise HTTPException(
        status_code=status_code,
        detail={
            "error": error.message,
            "category": error.category,
            "kind": error.kind,
            "retryable": error.retryable,
            "request_id": result.request_id,
            "attempts": result.attempts,
        },
    )
