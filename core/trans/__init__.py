"""Google Cloud Translation API (v2) binding.

This package builds requests for the list-languages, detect and translate endpoints,
issues them through the asynchronous HTTP transport and decodes the JSON replies.
Transport failures are re-exported here so callers can import every error from one place.
"""

from core.trans.decoder import decode_detection, decode_languages, decode_translation
from core.trans.endpoints import (
    DEFAULT_BASE_URL,
    ApiEndpoint,
    DetectParams,
    LanguagesParams,
    RequestDescriptor,
    TranslateParams,
    resolve_endpoint,
)
from core.trans.exceptions import ApiKeyMissingError, TranslateExceptionError
from core.trans.google_api import GoogleApiClient
from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError

__all__: list[str] = [
    "DEFAULT_BASE_URL",
    "ApiEndpoint",
    "ApiKeyMissingError",
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "DetectParams",
    "GoogleApiClient",
    "LanguagesParams",
    "RequestDescriptor",
    "TranslateExceptionError",
    "TranslateParams",
    "decode_detection",
    "decode_languages",
    "decode_translation",
    "resolve_endpoint",
]
