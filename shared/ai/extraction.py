"""
Turn raw model output into validated documents.

The model is told to return bare JSON but sometimes wraps it in prose or a
code fence. Extraction scans for balanced `{...}` spans (tracking nesting
depth and JSON string state) and decodes the first one that is an object.

Two failure modes are kept apart:
- ParseError: no decodable JSON object in the text (malformed transport)
- ResponseValidationError: JSON decoded but does not match the document shape
"""

import json
import logging
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from shared.schemas.cover_letter import CoverLetterDocument
from shared.schemas.resume import OptimizationNotes, ResumeResponse
from .errors import ParseError, ResponseValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

NOT_A_JOB_DESCRIPTION_MESSAGE = (
    "The provided text does not appear to be a job description. Please paste the full job posting."
)

# Max characters of raw output in the warning log line
LOGGED_RAW_CHARS = 2000


def _match_braces(text: str, start: int) -> Dict[int, Optional[int]]:
    """
    Scan from the brace at `start` and map each opening brace seen outside a
    string to the end of its balanced span, or None if it never closes.

    Stops as soon as the brace at `start` closes.
    """
    matches: Dict[int, Optional[int]] = {}
    stack: List[int] = []
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            stack.append(index)
        elif char == "}":
            matches[stack.pop()] = index + 1
            if not stack:
                return matches

    for open_index in stack:
        matches[open_index] = None
    return matches


def find_json_object(text: str) -> Iterator[str]:
    """
    Yield balanced `{...}` spans of `text` in order of their opening brace.

    Braces inside JSON strings are ignored. An opening brace that is never
    closed is skipped and scanning resumes at the next one. A brace already
    reached by an earlier scan reuses that scan's result.
    """
    known: Dict[int, Optional[int]] = {}
    position = 0
    while True:
        start = text.find("{", position)
        if start == -1:
            return

        if start not in known:
            known.update(_match_braces(text, start))
        end = known[start]

        if end is None:
            position = start + 1
            continue

        yield text[start:end]
        position = end


def _log_raw(reason: str, text: str) -> None:
    logger.warning(f"{reason}; raw response ({len(text)} chars): {text[:LOGGED_RAW_CHARS]}")
    logger.debug(f"Full raw response: {text}")


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Return the first JSON object embedded in `text`.

    Raises:
        ParseError: if no balanced span exists or none decodes to an object
    """
    text = text or ""
    last_error = None
    found_span = False

    for span in find_json_object(text):
        found_span = True
        try:
            value = json.loads(span)
        except json.JSONDecodeError as e:
            last_error = e
            continue
        if isinstance(value, dict):
            return value

    if not found_span:
        _log_raw("No JSON found in response", text)
        raise ParseError("No JSON found in response", raw_text=text)

    _log_raw(f"Failed to decode JSON from response: {last_error}", text)
    raise ParseError(f"Failed to decode JSON from response: {last_error}", raw_text=text)


def format_validation_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        messages.append(f"{location}: {item.get('msg', 'invalid')}")
    return messages


def validate_document(model: Type[ModelT], payload: Dict[str, Any], document_type: str) -> ModelT:
    """Validate a decoded payload against a document model."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.warning(f"{document_type} response failed validation: {errors}")
        raise ResponseValidationError(
            f"{document_type} response does not match the expected schema",
            errors=errors,
        ) from e


def _reject_model_error(payload: Dict[str, Any], document_key: str) -> None:
    """The model answers {"error": "..."} when the input is not a job description."""
    if document_key not in payload and isinstance(payload.get("error"), str):
        logger.warning(f"Model declined the request: {payload['error'][:200]}")
        raise ResponseValidationError(
            "Model returned an error object instead of a document",
            errors=["error: model declined the request"],
            user_message=NOT_A_JOB_DESCRIPTION_MESSAGE,
        )


def parse_resume_response(text: str) -> ResumeResponse:
    """Extract and validate a tailored resume from raw model output."""
    payload = extract_json_object(text)
    _reject_model_error(payload, "tailored_resume")

    # Accept a resume returned without the tailored_resume wrapper
    if "tailored_resume" not in payload and "professional_summary" in payload:
        payload = {"tailored_resume": payload}

    notes = payload.get("optimization_notes")
    document = {key: payload[key] for key in ("tailored_resume",) if key in payload}
    response = validate_document(ResumeResponse, document, "Resume")

    # A malformed optimization_notes block is dropped
    if notes is not None:
        try:
            response.optimization_notes = OptimizationNotes.model_validate(notes)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed optimization_notes: {format_validation_errors(e)}")

    return response


def parse_cover_letter_response(text: str) -> CoverLetterDocument:
    """Extract and validate a cover letter from raw model output."""
    payload = extract_json_object(text)
    _reject_model_error(payload, "cover_letter")
    return validate_document(CoverLetterDocument, payload, "Cover letter")
