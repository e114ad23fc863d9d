from __future__ import annotations

import json
import logging

import pytest

from core.trans.decoder import decode_detection, decode_languages, decode_translation
from models.locale_models import Locale
from models.translation_models import Language, SupportedLanguages


def _languages_body(*pairs: tuple[str, str]) -> bytes:
    return json.dumps({"data": {"languages": [{"language": c, "name": n} for c, n in pairs]}}).encode("utf-8")


def test_decode_languages_preserves_order_and_builds_index() -> None:
    result: SupportedLanguages = decode_languages(_languages_body(("en", "English"), ("fr", "French")))

    assert result.languages == [Language(code="en", name="English"), Language(code="fr", name="French")]
    assert result.index == {"en": "English", "fr": "French"}
    assert result.locales == [Locale("en"), Locale("fr")]


def test_decode_languages_unpacks_as_three_values() -> None:
    languages, index, locales = decode_languages(_languages_body(("ja", "Japanese")))

    assert [language.code for language in languages] == ["ja"]
    assert index == {"ja": "Japanese"}
    assert [locale.identifier for locale in locales] == ["ja"]


def test_decode_languages_last_duplicate_wins_in_index() -> None:
    result: SupportedLanguages = decode_languages(
        _languages_body(("pt", "Portuguese"), ("de", "German"), ("pt", "Portuguese (Brazil)"))
    )

    assert len(result.languages) == 3
    assert len(result.locales) == 3
    assert result.index == {"pt": "Portuguese (Brazil)", "de": "German"}


def test_decode_languages_ignores_unknown_fields() -> None:
    body = '{"data": {"languages": [{"language": "he", "name": "Hebrew", "extra": 1}]}, "kind": "x"}'

    result: SupportedLanguages = decode_languages(body)

    assert result.index == {"he": "Hebrew"}


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"<html>Service Unavailable</html>",
        b'{"error": {"code": 403, "message": "API key not valid"}}',
        b'{"data": {"languages": [{"language": "en"}]}}',
        b'{"data": null}',
        b"[]",
        b"null",
    ],
)
def test_decode_languages_returns_empty_result_on_decode_failure(
    body: bytes, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR)

    result: SupportedLanguages = decode_languages(body)

    assert result == SupportedLanguages([], {}, [])
    assert any("Failed to decode supported languages" in rec.message for rec in caplog.records)


def test_decode_languages_none_body_is_empty_without_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)

    assert decode_languages(None) == SupportedLanguages.empty()
    assert not caplog.records


def test_decode_detection_returns_first_candidate() -> None:
    body = b'{"data": {"detections": [[{"language": "fr", "confidence": 0.98, "isReliable": false}, {"language": "it"}]]}}'

    assert decode_detection(body) == "fr"


@pytest.mark.parametrize(
    "body",
    [
        b'{"data": {"detections": []}}',
        b'{"data": {"detections": [[]]}}',
        b'{"data": {"detections": [[], [{"language": "fr"}]]}}',
    ],
)
def test_decode_detection_returns_empty_string_without_candidates(body: bytes) -> None:
    assert decode_detection(body) == ""


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"data": {"detections": [[{"confidence": 1.0}]]}}',
        b'{"data": {}}',
        b"",
    ],
)
def test_decode_detection_returns_empty_string_on_decode_failure(
    body: bytes, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR)

    assert decode_detection(body) == ""
    assert any("Failed to decode language detection" in rec.message for rec in caplog.records)


def test_decode_translation_returns_first_text() -> None:
    body = b'{"data": {"translations": [{"translatedText": "Bonjour"}, {"translatedText": "Salut"}]}}'

    assert decode_translation(body) == "Bonjour"


def test_decode_translation_accepts_str_body() -> None:
    body = '{"data": {"translations": [{"translatedText": "こんにちは", "detectedSourceLanguage": "en"}]}}'

    assert decode_translation(body) == "こんにちは"


def test_decode_translation_returns_empty_string_for_empty_array() -> None:
    assert decode_translation(b'{"data": {"translations": []}}') == ""


@pytest.mark.parametrize(
    "body",
    [
        b"{",
        b'{"data": {"translations": [{"text": "Bonjour"}]}}',
        b'"Bonjour"',
    ],
)
def test_decode_translation_returns_empty_string_on_decode_failure(
    body: bytes, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR)

    assert decode_translation(body) == ""
    assert any("Failed to decode translation" in rec.message for rec in caplog.records)


def test_decode_translation_none_body() -> None:
    assert decode_translation(None) == ""


@pytest.mark.parametrize(
    "body",
    [
        b'{"data": {"languages": [{"language": null, "name": "X"}]}}',
        b'{"data": {"languages": [{"language": "en", "name": null}]}}',
        b'{"data": {"languages": [{"language": "en", "name": "English"}, {"language": 7, "name": "Seven"}]}}',
    ],
    ids=["null-code", "null-name", "numeric-code"],
)
def test_decode_languages_rejects_non_string_values(body: bytes, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)

    result: SupportedLanguages = decode_languages(body)

    assert result == SupportedLanguages.empty()
    assert any("Failed to decode supported languages" in rec.message for rec in caplog.records)


@pytest.mark.parametrize(
    "body",
    [
        b'{"data": {"detections": [[{"language": null}]]}}',
        b'{"data": {"detections": [[{"language": 1}]]}}',
    ],
)
def test_decode_detection_rejects_non_string_language(body: bytes, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)

    assert decode_detection(body) == ""
    assert any("Failed to decode language detection" in rec.message for rec in caplog.records)


@pytest.mark.parametrize(
    "body",
    [
        b'{"data": {"translations": [{"translatedText": null}]}}',
        b'{"data": {"translations": [{"translatedText": 42}]}}',
    ],
)
def test_decode_translation_rejects_non_string_text(body: bytes, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)

    assert decode_translation(body) == ""
    assert any("Failed to decode translation" in rec.message for rec in caplog.records)
