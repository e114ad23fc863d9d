"""Locale identifier model.

The translation API only understands bare language codes, while callers usually hold full
locale identifiers such as ``en_US`` or ``zh-TW``. ``Locale`` keeps the identifier as given and
resolves the primary language subtag on demand.
"""

from __future__ import annotations

import locale
import re
from dataclasses import dataclass
from re import Pattern
from typing import Final, Self

__all__: list[str] = ["DEFAULT_LANGUAGE_CODE", "Locale"]

DEFAULT_LANGUAGE_CODE: Final[str] = "en"

# BCP 47 primary language subtag: 2-3 letters (ISO 639) or 5-8 letters (registered), followed
# by the end of the identifier or a separator used by POSIX/ICU/BCP 47 style identifiers.
LANGUAGE_SUBTAG_PATTERN: Final[Pattern[str]] = re.compile(r"^([A-Za-z]{2,3}|[A-Za-z]{5,8})(?=$|[-_.@])")


@dataclass(frozen=True)
class Locale:
    """A locale identifier, e.g. ``"fr"``, ``"en_US"`` or ``"zh-Hant-TW"``.

    Attributes:
        identifier (str): The identifier exactly as supplied.
    """

    identifier: str = ""

    def __str__(self) -> str:
        return self.identifier

    @property
    def language_code(self) -> str | None:
        """Primary language subtag in lower case, or None if the identifier has none."""
        match = LANGUAGE_SUBTAG_PATTERN.match(self.identifier.strip())
        if match is None:
            return None
        return match.group(1).lower()

    @property
    def api_code(self) -> str:
        """Language code to send to the API: the primary subtag, else the raw identifier."""
        language_code: str | None = self.language_code
        if language_code is None:
            return self.identifier
        return language_code

    @classmethod
    def coerce(cls, value: Locale | str) -> Locale:
        if isinstance(value, Locale):
            return value
        return cls(value)

    @classmethod
    def current(cls) -> Self:
        """Locale of the running process, ``"en"`` when it cannot be determined."""
        try:
            identifier: str | None = locale.getlocale()[0]
        except ValueError:
            identifier = None
        # "C" and "POSIX" carry no language
        if not identifier or identifier in ("C", "POSIX"):
            identifier = DEFAULT_LANGUAGE_CODE
        return cls(identifier)
