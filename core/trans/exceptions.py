"""Errors raised by the Google Translation API binding.

Transport failures are not wrapped here: ``handlers.async_comm.AsyncCommError`` and
``AsyncCommTimeoutError`` reach the caller exactly as the HTTP layer raised them.
Decode failures are never raised at all; the decoder logs them and returns an empty result.
"""

from __future__ import annotations

__all__: list[str] = ["ApiKeyMissingError", "TranslateExceptionError"]


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class ApiKeyMissingError(TranslateExceptionError):
    """No API key is available, so no request can be issued."""
