"""
Unit tests for extracting and validating model output.

Tests cover:
- Balanced-brace scanning (nesting, braces in strings, several objects)
- ParseError vs ResponseValidationError
- Resume and cover letter document validation
"""

import json
import time

import pytest

from shared.ai.errors import ParseError, ResponseValidationError
from shared.ai.extraction import (
    NOT_A_JOB_DESCRIPTION_MESSAGE,
    extract_json_object,
    find_json_object,
    parse_cover_letter_response,
    parse_resume_response,
)


# ============================================================================
# Scanner Tests
# ============================================================================

class TestFindJsonObject:
    """Tests for the balanced-brace scanner."""

    def test_nested_object_is_one_span(self):
        text = 'prefix {"a": {"b": 1}} suffix'
        assert list(find_json_object(text)) == ['{"a": {"b": 1}}']

    def test_braces_inside_strings_are_ignored(self):
        text = '{"text": "use } and { freely", "n": 1}'
        assert list(find_json_object(text)) == [text]

    def test_escaped_quote_inside_string(self):
        text = r'{"quote": "she said \"}\" loudly"}'
        assert list(find_json_object(text)) == [text]

    def test_multiple_objects_in_order(self):
        spans = list(find_json_object('first {"a": 1} then {"b": 2}'))
        assert spans == ['{"a": 1}', '{"b": 2}']

    def test_unclosed_brace_is_skipped(self):
        spans = list(find_json_object('oops { not closed {"ok": true}'))
        assert spans == ['{"ok": true}']

    def test_no_braces(self):
        assert list(find_json_object("no json here")) == []

    def test_object_nested_in_unclosed_brace(self):
        spans = list(find_json_object('{ "draft": {"ok": true}, '))
        assert spans == ['{"ok": true}']

    def test_brace_inside_string_of_unclosed_scan(self):
        spans = list(find_json_object('{ "x {"a": 1}'))
        assert spans == ['{"a": 1}']

    def test_long_run_of_unclosed_braces(self):
        started = time.perf_counter()
        assert list(find_json_object("{" * 20000)) == []
        assert time.perf_counter() - started < 2.0


# ============================================================================
# Extraction Tests
# ============================================================================

class TestExtractJsonObject:
    """Tests for decoding the first JSON object."""

    def test_json_in_prose(self):
        text = 'Sure! Here it is: {"name": "x", "items": [1, 2]} Hope that helps.'
        assert extract_json_object(text) == {"name": "x", "items": [1, 2]}

    def test_json_in_code_fence(self):
        text = '```json\n{"a": 1}\n```'
        assert extract_json_object(text) == {"a": 1}

    def test_first_decodable_object_wins(self):
        text = "{not json} and then {\"a\": 1} and {\"b\": 2}"
        assert extract_json_object(text) == {"a": 1}

    def test_no_braces_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            extract_json_object("I cannot help with that.")
        assert "No JSON found" in str(exc_info.value)
        assert exc_info.value.to_info().category == "parse"

    def test_undecodable_span_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            extract_json_object("{this is: not json}")
        assert exc_info.value.raw_text == "{this is: not json}"

    def test_empty_text(self):
        with pytest.raises(ParseError):
            extract_json_object("")

    def test_raw_text_not_in_user_message(self):
        with pytest.raises(ParseError) as exc_info:
            extract_json_object("{secret: raw output}")
        assert "secret" not in exc_info.value.to_info().message


# ============================================================================
# Resume Parsing Tests
# ============================================================================

class TestParseResumeResponse:
    """Tests for resume validation."""

    def test_valid_resume(self, resume_json):
        response = parse_resume_response(resume_json)
        assert len(response.tailored_resume.experience) == 2
        assert response.optimization_notes.match_score == "High"
        assert response.optimization_notes.ats_breakdown.keywords_match == 90

    def test_missing_experience_is_validation_error(self, make_resume_payload):
        payload = make_resume_payload()
        del payload["tailored_resume"]["experience"]
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_resume_response(json.dumps(payload))
        assert any("experience" in error for error in exc_info.value.errors)
        assert exc_info.value.to_info().category == "validation"

    def test_wrong_type_is_validation_error(self, make_resume_payload):
        payload = make_resume_payload()
        payload["tailored_resume"]["experience"] = "lots of it"
        with pytest.raises(ResponseValidationError):
            parse_resume_response(json.dumps(payload))

    def test_missing_wrapper_key_is_validation_error(self):
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_resume_response('{"something": "else"}')
        assert any("tailored_resume" in error for error in exc_info.value.errors)

    def test_unwrapped_resume_is_accepted(self, make_resume_payload):
        payload = make_resume_payload()["tailored_resume"]
        response = parse_resume_response(json.dumps(payload))
        assert response.tailored_resume.professional_summary == payload["professional_summary"]
        assert response.optimization_notes is None

    def test_malformed_notes_are_dropped(self, make_resume_payload):
        payload = make_resume_payload()
        payload["optimization_notes"]["ats_score"] = "very good"
        response = parse_resume_response(json.dumps(payload))
        assert response.optimization_notes is None
        assert len(response.tailored_resume.experience) == 2

    def test_notes_are_optional(self, make_resume_payload):
        payload = make_resume_payload()
        del payload["optimization_notes"]
        assert parse_resume_response(json.dumps(payload)).optimization_notes is None

    def test_model_error_object(self):
        text = json.dumps({"error": "The provided text does not appear to be a job description."})
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_resume_response(text)
        assert exc_info.value.to_info().message == NOT_A_JOB_DESCRIPTION_MESSAGE


# ============================================================================
# Cover Letter Parsing Tests
# ============================================================================

class TestParseCoverLetterResponse:
    """Tests for cover letter validation."""

    def test_valid_cover_letter(self, cover_letter_json):
        document = parse_cover_letter_response("Here you go: " + cover_letter_json)
        assert document.cover_letter.greeting == "Dear Hiring Manager,"
        assert document.metadata.tone_used == "professional"
        assert len(document.cover_letter.paragraphs) == 4

    def test_missing_metadata(self, make_cover_letter_payload):
        payload = make_cover_letter_payload()
        del payload["metadata"]
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_cover_letter_response(json.dumps(payload))
        assert any(error.startswith("metadata") for error in exc_info.value.errors)

    def test_unknown_tone_is_rejected(self, make_cover_letter_payload):
        payload = make_cover_letter_payload()
        payload["metadata"]["tone_used"] = "sarcastic"
        with pytest.raises(ResponseValidationError):
            parse_cover_letter_response(json.dumps(payload))

    def test_model_error_object(self):
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_cover_letter_response('{"error": "not a job description"}')
        assert exc_info.value.to_info().message == NOT_A_JOB_DESCRIPTION_MESSAGE
