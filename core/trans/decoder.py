"""Decoding of Google Cloud Translation API (v2) response bodies.

A body that cannot be decoded never raises: the failure is logged and the operation's empty
result is returned instead (an empty ``SupportedLanguages`` or an empty string). Callers of the
binding therefore only ever see credential and transport errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from marshmallow.exceptions import ValidationError

from models.locale_models import Locale
from models.translation_models import (
    DetectionsResponse,
    LanguagesResponse,
    SupportedLanguages,
    TranslationsResponse,
)
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import Language

__all__: list[str] = ["decode_detection", "decode_languages", "decode_translation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ResponseBody: TypeAlias = bytes | str | None

# Everything dataclasses-json may raise for a body of the wrong shape.
# JSONDecodeError and UnicodeDecodeError are covered by ValueError.
DECODE_ERRORS: tuple[type[Exception], ...] = (
    ValidationError,
    KeyError,
    TypeError,
    AttributeError,
    ValueError,
)


def _preview(body: bytes | str, limit: int = 200) -> str:
    text: str = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    text = text.strip().replace("\n", "\\n")
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def _require_str(value: object, field_name: str) -> str:
    """Return ``value`` if it is a string, otherwise raise TypeError.

    dataclasses-json only warns when a reply carries ``null`` or a number in a ``str`` field.
    """
    if not isinstance(value, str):
        msg = f"'{field_name}' must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def decode_languages(body: ResponseBody) -> SupportedLanguages:
    """Decode a list-languages reply.

    Args:
        body (bytes | str | None): Raw response body.

    Returns:
        SupportedLanguages: Languages in response order, the code-to-name index and one locale
            per language. Empty on decode failure.
    """
    if body is None:
        logger.debug("No body to decode for supported languages")
        return SupportedLanguages.empty()

    try:
        response: LanguagesResponse = LanguagesResponse.from_json(body)
        languages: list[Language] = list(response.data.languages)
        index: dict[str, str] = {}
        locales: list[Locale] = []
        for language in languages:
            code: str = _require_str(language.code, "language")
            index[code] = _require_str(language.name, "name")
            locales.append(Locale(code))
    except DECODE_ERRORS as err:
        logger.error("Failed to decode supported languages: %s (body: '%s')", err, _preview(body))
        return SupportedLanguages.empty()

    logger.debug("Decoded %d supported languages", len(languages))
    return SupportedLanguages(languages, index, locales)


def decode_detection(body: ResponseBody) -> str:
    """Decode a detect reply into the language code of the first candidate.

    Only the first candidate of the first detection group is used. An empty outer or inner
    array gives an empty string, as does an undecodable body.
    """
    if body is None:
        logger.debug("No body to decode for language detection")
        return ""

    try:
        response: DetectionsResponse = DetectionsResponse.from_json(body)
        detections = response.data.detections
        if not detections or not detections[0]:
            logger.debug("Detection reply holds no candidates")
            return ""
        return _require_str(detections[0][0].name, "language")
    except DECODE_ERRORS as err:
        logger.error("Failed to decode language detection: %s (body: '%s')", err, _preview(body))
        return ""


def decode_translation(body: ResponseBody) -> str:
    """Decode a translate reply into the first translated text, or an empty string."""
    if body is None:
        logger.debug("No body to decode for translation")
        return ""

    try:
        response: TranslationsResponse = TranslationsResponse.from_json(body)
        translations = response.data.translations
        if not translations:
            logger.debug("Translation reply holds no translations")
            return ""
        return _require_str(translations[0].translated_text, "translatedText")
    except DECODE_ERRORS as err:
        logger.error("Failed to decode translation: %s (body: '%s')", err, _preview(body))
        return ""
