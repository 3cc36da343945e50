"""Tests for per-operation payload validation."""

import pytest

from src.scripture_api.errors import CallableError, ErrorCode
from src.scripture_api.schemas.lexicon import WordDefinitionRequest
from src.scripture_api.schemas.media import ImageRequest
from src.scripture_api.schemas.scripture import (
    AudioTranslateRequest,
    BibleContentRequest,
    BibleSearchRequest,
    InterlinearRequest,
)
from src.scripture_api.schemas.study import (
    AnalysisRequest,
    DevotionalRequest,
    LibraryAgentRequest,
    StoryboardRequest,
)
from src.scripture_api.utils.validation import validate_payload
from src.scripture_api.workflows.operations import OPERATIONS


def _invalid(schema, data) -> str:
    with pytest.raises(CallableError) as exc_info:
        validate_payload(schema, data)
    assert exc_info.value.code is ErrorCode.INVALID_ARGUMENT
    assert exc_info.value.message.startswith("Invalid data: ")
    return exc_info.value.message


class TestDefaults:
    """Defaults are applied during validation."""

    def test_bible_content_defaults(self):
        request = validate_payload(BibleContentRequest, {"book": "John", "chapter": 3})
        assert request.translation == "NVI"
        assert request.lang == "pt"

    def test_unknown_keys_are_ignored(self):
        request = validate_payload(BibleSearchRequest, {"query": "love", "page": 2})
        assert request.query == "love"
        assert not hasattr(request, "page")

    def test_aliases_populate_fields(self):
        request = validate_payload(
            InterlinearRequest, {"book": "Genesis", "chapter": 1, "startVerse": 1, "endVerse": 3}
        )
        assert (request.start_verse, request.end_verse) == (1, 3)

    def test_fractional_age_is_accepted(self):
        request = validate_payload(DevotionalRequest, {"topic": "Hope", "age": 12.5})
        assert request.age == 12.5

    def test_analysis_needs_only_context(self):
        request = validate_payload(AnalysisRequest, {"context": "In the beginning was the Word"})
        assert request.book is None
        assert request.reference_title is None


class TestViolations:
    """Every violation names the offending field."""

    def test_chapter_must_be_an_integer(self):
        assert "chapter" in _invalid(BibleContentRequest, {"book": "John", "chapter": "3"})

    def test_chapter_must_be_positive(self):
        assert "chapter" in _invalid(BibleContentRequest, {"book": "John", "chapter": 0})

    def test_missing_alias_field_is_reported_by_wire_name(self):
        message = _invalid(InterlinearRequest, {"book": "Genesis", "chapter": 1, "startVerse": 1})
        assert "endVerse" in message

    def test_nested_resource_path(self):
        message = _invalid(LibraryAgentRequest, {"query": "grace", "resources": [{"textContent": "..."}]})
        assert "resources.0.title" in message

    def test_audio_requires_target_language(self):
        assert "targetLang" in _invalid(AudioTranslateRequest, {"text": "Hello"})

    def test_unsupported_language(self):
        assert "lang" in _invalid(BibleSearchRequest, {"query": "love", "lang": "fr"})

    def test_search_query_minimum_length(self):
        assert "query" in _invalid(BibleSearchRequest, {"query": "a"})

    def test_short_passage_text(self):
        message = _invalid(StoryboardRequest, {"book": "Ruth", "chapter": 1, "text": "short"})
        assert "text" in message

    def test_age_must_be_numeric(self):
        assert "age" in _invalid(DevotionalRequest, {"topic": "Hope", "age": "12"})

    def test_unknown_aspect_ratio(self):
        assert "aspectRatio" in _invalid(ImageRequest, {"prompt": "Jerusalem at dawn", "aspectRatio": "7:3"})

    def test_all_violations_are_collected(self):
        message = _invalid(WordDefinitionRequest, {})
        assert "original" in message
        assert "context" in message

    @pytest.mark.parametrize("data", [None, [], "John 3"])
    def test_non_object_payload(self, data):
        _invalid(BibleSearchRequest, data)


def _required_wire_names(schema):
    return [field.alias or name for name, field in schema.model_fields.items() if field.is_required()]


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_empty_payload_names_every_required_field(name):
    schema = OPERATIONS[name].schema
    required = _required_wire_names(schema)
    assert required

    message = _invalid(schema, {})

    for wire_name in required:
        assert wire_name in message
