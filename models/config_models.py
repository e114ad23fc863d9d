"""Configuration data models for the translator.

Each dataclass is one section of ``translator.ini``. Field names match the INI keys and the
type of each default decides how the loader coerces the raw string.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config", "General", "Translation"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""


@dataclass
class Translation:
    API_KEY: str = ""
    BASE_URL: str = "https://translation.googleapis.com"
    TIMEOUT: float = 10.0
    DISPLAY_LOCALE: str = ""


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
