"""Models for the Google Cloud Translation API (v2) responses.

Every reply is wrapped in a top-level ``data`` object. The envelope dataclasses below mirror
those shapes so that the decoder can hand the raw body straight to ``from_json``.
Remote field names that differ from the Python attribute names are mapped with
``dataclasses_json.config(field_name=...)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Self

from dataclasses_json import DataClassJsonMixin, LetterCase, config, dataclass_json

from models.locale_models import Locale

__all__: list[str] = [
    "DetectionsResponse",
    "Language",
    "LanguagesResponse",
    "SupportedLanguages",
    "TranslationsResponse",
]


@dataclass_json
@dataclass
class Language(DataClassJsonMixin):
    """A language supported by the translation service.

    Attributes:
        code (str): Language code, e.g. ``"fr"`` (remote field ``language``).
        name (str): Display name, localized in the requested display language, e.g. ``"French"``.
    """

    code: str = field(metadata=config(field_name="language"))
    name: str


class SupportedLanguages(NamedTuple):
    """Result of the list-languages operation.

    Attributes:
        languages (list[Language]): Languages in response order.
        index (dict[str, str]): Language code to display name. A duplicated code keeps the last name.
        locales (list[Locale]): One locale per entry of ``languages``, built from its code.
    """

    languages: list[Language]
    index: dict[str, str]
    locales: list[Locale]

    @classmethod
    def empty(cls) -> Self:
        return cls([], {}, [])


@dataclass_json
@dataclass
class _LanguagesData(DataClassJsonMixin):
    languages: list[Language]


@dataclass_json
@dataclass
class LanguagesResponse(DataClassJsonMixin):
    """``{"data": {"languages": [{"language": ..., "name": ...}, ...]}}``"""

    data: _LanguagesData


@dataclass_json
@dataclass
class _DetectedLanguage(DataClassJsonMixin):
    name: str = field(metadata=config(field_name="language"))


@dataclass_json
@dataclass
class _DetectionsData(DataClassJsonMixin):
    # one group of candidates per input text
    detections: list[list[_DetectedLanguage]]


@dataclass_json
@dataclass
class DetectionsResponse(DataClassJsonMixin):
    """``{"data": {"detections": [[{"language": ...}, ...], ...]}}``"""

    data: _DetectionsData


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _Translation(DataClassJsonMixin):
    translated_text: str


@dataclass_json
@dataclass
class _TranslationsData(DataClassJsonMixin):
    translations: list[_Translation]


@dataclass_json
@dataclass
class TranslationsResponse(DataClassJsonMixin):
    """``{"data": {"translations": [{"translatedText": ...}, ...]}}``"""

    data: _TranslationsData
