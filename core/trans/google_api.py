"""Google Cloud Translation API Basic (v2) client.

Calls the REST endpoints directly with an API key: list the supported languages, detect the
language of a text and translate a text. Every operation follows the same steps: check the
API key, resolve the endpoint, issue the HTTP request, decode the body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from core.trans.decoder import decode_detection, decode_languages, decode_translation
from core.trans.endpoints import (
    DEFAULT_BASE_URL,
    DetectParams,
    LanguagesParams,
    TranslateParams,
    resolve_endpoint,
)
from core.trans.exceptions import ApiKeyMissingError
from handlers.async_comm import AsyncHttp
from models.locale_models import DEFAULT_LANGUAGE_CODE, Locale
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.trans.endpoints import RequestDescriptor
    from models.config_models import Config
    from models.translation_models import SupportedLanguages

__all__: list[str] = ["GoogleApiClient"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class GoogleApiClient:
    """Client for the Google Cloud Translation API v2.

    The client holds only read-only state (API key, base URL, timeout), so its operations can
    be awaited concurrently, e.g. with ``asyncio.gather``.

    Args:
        api_key (str | None): API key. None or an empty string makes every operation raise
            ApiKeyMissingError before any network activity.
        http (AsyncHttp | None): Transport to use. A private one is created when omitted and
            closed by ``close()``; a supplied transport is left open.
        base_url (str): Scheme and host of the service.
        timeout (float): Total timeout of each request in seconds.
        display_locale (Locale | str | None): Language the supported-language names are
            localized in. Defaults to the locale of the process.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        http: AsyncHttp | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        display_locale: Locale | str | None = None,
    ) -> None:
        self.__api_key: str | None = api_key or None
        self._owns_http: bool = http is None
        self._http: AsyncHttp = http if http is not None else AsyncHttp()
        self.base_url: str = base_url
        self.timeout: float = timeout
        self.display_locale: Locale | None = Locale.coerce(display_locale) if display_locale else None
        logger.debug(
            "'%s': 'base_url': '%s', 'timeout': '%s', 'api_key': '%s'",
            self.__class__.__name__,
            base_url,
            timeout,
            "set" if self.__api_key else "missing",
        )

    @classmethod
    def from_config(cls, config: Config, *, http: AsyncHttp | None = None) -> Self:
        """Build a client from the ``[TRANSLATION]`` section of the configuration."""
        return cls(
            config.TRANSLATION.API_KEY,
            http=http,
            base_url=config.TRANSLATION.BASE_URL,
            timeout=config.TRANSLATION.TIMEOUT,
            display_locale=config.TRANSLATION.DISPLAY_LOCALE or None,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    @property
    def has_api_key(self) -> bool:
        return self.__api_key is not None

    def _require_api_key(self) -> str:
        if self.__api_key is None:
            msg = "Google API key is missing. Set TRANSLATION.API_KEY or GOOGLE_TRANSLATE_API_OAUTH."
            raise ApiKeyMissingError(msg)
        return self.__api_key

    async def _invoke(self, request: RequestDescriptor) -> bytes:
        logger.debug("'%s': '%r'", self.__class__.__name__, request)
        return await self._http.request(
            request.method,
            url=request.url,
            params=request.params,
            total_timeout=self.timeout,
        )

    async def fetch_supported_languages(self, display_locale: Locale | str | None = None) -> SupportedLanguages:
        """Fetch the languages supported for translation.

        Args:
            display_locale (Locale | str | None): Language the names are written in.
                Falls back to the client's display locale, then to the process locale.

        Returns:
            SupportedLanguages: ``(languages, index, locales)``. Empty if the reply cannot be decoded.

        Raises:
            ApiKeyMissingError: If no API key is set.
            AsyncCommError: If the HTTP request fails.
        """
        api_key: str = self._require_api_key()
        locale: Locale = Locale.coerce(display_locale or self.display_locale or Locale.current())
        logger.info("'%s': 'fetch supported languages'", self.__class__.__name__)

        request: RequestDescriptor = resolve_endpoint(
            LanguagesParams(api_key=api_key, display_locale=locale.language_code or DEFAULT_LANGUAGE_CODE),
            base_url=self.base_url,
        )
        result: SupportedLanguages = decode_languages(await self._invoke(request))
        logger.info("%d supported languages", len(result.languages))
        return result

    async def detect_language(self, text: str) -> str:
        """Detect the language of a text.

        Returns:
            str: Detected language code, or an empty string if the reply has no candidate or
                cannot be decoded.

        Raises:
            ApiKeyMissingError: If no API key is set.
            AsyncCommError: If the HTTP request fails.
        """
        api_key: str = self._require_api_key()
        logger.info("'%s': 'detect language'", self.__class__.__name__)
        logger.debug("'content': '%s'", text)

        request: RequestDescriptor = resolve_endpoint(DetectParams(api_key=api_key, text=text), base_url=self.base_url)
        detected: str = decode_detection(await self._invoke(request))
        logger.debug("Detected language: '%s'", detected)
        return detected

    async def translate(self, text: str, target_locale: Locale | str, source_locale: Locale | str) -> str:
        """Translate a text.

        Locales may carry a region (``"en_US"``); only the primary language subtag is sent.

        Args:
            text (str): Text to translate.
            target_locale (Locale | str): Language to translate into.
            source_locale (Locale | str): Language of ``text``.

        Returns:
            str: Translated text, or an empty string if the reply cannot be decoded.

        Raises:
            ApiKeyMissingError: If no API key is set.
            AsyncCommError: If the HTTP request fails.
        """
        api_key: str = self._require_api_key()
        logger.info("'%s': 'start translation'", self.__class__.__name__)
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", text, source_locale, target_locale)

        request: RequestDescriptor = resolve_endpoint(
            TranslateParams(api_key=api_key, text=text, target_locale=target_locale, source_locale=source_locale),
            base_url=self.base_url,
        )
        translated: str = decode_translation(await self._invoke(request))
        logger.info("translation completed (%s > %s)", request.params["source"], request.params["target"])
        logger.debug("'return': '%s'", translated)
        return translated

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            await self._http.close()
        logger.info("'%s' process termination", self.__class__.__name__)
