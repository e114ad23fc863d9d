"""Data models for the translator.

This package contains dataclass definitions for configuration, locale identifiers and the
translation API responses.
"""

from __future__ import annotations

from models.config_models import Config
from models.locale_models import DEFAULT_LANGUAGE_CODE, Locale
from models.translation_models import (
    DetectionsResponse,
    Language,
    LanguagesResponse,
    SupportedLanguages,
    TranslationsResponse,
)

__all__: list[str] = [
    "DEFAULT_LANGUAGE_CODE",
    "Config",
    "DetectionsResponse",
    "Language",
    "LanguagesResponse",
    "Locale",
    "SupportedLanguages",
    "TranslationsResponse",
]
