"""Request construction for the Google Cloud Translation API (v2).

Each endpoint has its own frozen parameter dataclass tagged with an ``ApiEndpoint``.
``resolve_endpoint`` looks the tag up in a table of pure builder functions and returns a
``RequestDescriptor``; nothing in this module touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Final, Literal, TypeAlias

from yarl import URL

from models.locale_models import DEFAULT_LANGUAGE_CODE, Locale

if TYPE_CHECKING:
    from collections.abc import Callable

__all__: list[str] = [
    "DEFAULT_BASE_URL",
    "ApiEndpoint",
    "DetectParams",
    "EndpointParams",
    "LanguagesParams",
    "RequestDescriptor",
    "TranslateParams",
    "resolve_endpoint",
]

DEFAULT_BASE_URL: Final[str] = "https://translation.googleapis.com"

HTTPMethod: TypeAlias = Literal["GET", "POST"]


class ApiEndpoint(StrEnum):
    """API endpoints; the value is the path below the base URL."""

    SUPPORTED_LANGUAGES = "language/translate/v2/languages"
    DETECTOR = "language/translate/v2/detect"
    TRANSLATOR = "language/translate/v2"


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything the transport needs to issue one request.

    Attributes:
        method (HTTPMethod): ``"GET"`` or ``"POST"``.
        url (str): Endpoint URL without query string.
        params (dict[str, str]): Query parameters, not yet encoded.
    """

    method: HTTPMethod
    url: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def full_url(self) -> str:
        """The URL with the query string percent-encoded."""
        return str(URL(self.url).with_query(self.params))

    def __repr__(self) -> str:
        # keep the API key out of logs
        masked: dict[str, str] = {k: ("***" if k == "key" else v) for k, v in self.params.items()}
        return f"RequestDescriptor(method={self.method!r}, url={self.url!r}, params={masked!r})"


@dataclass(frozen=True)
class LanguagesParams:
    """Parameters of the list-languages endpoint.

    ``display_locale`` selects the language the returned names are written in.
    """

    endpoint: ClassVar[ApiEndpoint] = ApiEndpoint.SUPPORTED_LANGUAGES

    api_key: str
    display_locale: Locale | str = DEFAULT_LANGUAGE_CODE


@dataclass(frozen=True)
class DetectParams:
    endpoint: ClassVar[ApiEndpoint] = ApiEndpoint.DETECTOR

    api_key: str
    text: str = ""


@dataclass(frozen=True)
class TranslateParams:
    endpoint: ClassVar[ApiEndpoint] = ApiEndpoint.TRANSLATOR

    api_key: str
    text: str
    target_locale: Locale | str
    source_locale: Locale | str


EndpointParams: TypeAlias = LanguagesParams | DetectParams | TranslateParams


def _supported_languages_request(params: LanguagesParams) -> tuple[HTTPMethod, dict[str, str]]:
    display_code: str = Locale.coerce(params.display_locale).language_code or DEFAULT_LANGUAGE_CODE
    return "GET", {
        "key": params.api_key,
        "model": "base",
        "target": display_code,
    }


def _detector_request(params: DetectParams) -> tuple[HTTPMethod, dict[str, str]]:
    # empty text is left for the service to accept or reject
    return "GET", {
        "key": params.api_key,
        "q": params.text,
    }


def _translator_request(params: TranslateParams) -> tuple[HTTPMethod, dict[str, str]]:
    return "POST", {
        "key": params.api_key,
        "q": params.text,
        "target": Locale.coerce(params.target_locale).api_code,
        "format": "text",
        "source": Locale.coerce(params.source_locale).api_code,
    }


_REQUEST_BUILDERS: Final[dict[ApiEndpoint, Callable[..., tuple[HTTPMethod, dict[str, str]]]]] = {
    ApiEndpoint.SUPPORTED_LANGUAGES: _supported_languages_request,
    ApiEndpoint.DETECTOR: _detector_request,
    ApiEndpoint.TRANSLATOR: _translator_request,
}


def resolve_endpoint(params: EndpointParams, *, base_url: str = DEFAULT_BASE_URL) -> RequestDescriptor:
    """Build the request for the endpoint the parameters are tagged with.

    Args:
        params (EndpointParams): Parameters of one endpoint.
        base_url (str): Scheme and host of the service, without a trailing path.

    Returns:
        RequestDescriptor: Method, endpoint URL and query parameters.
    """
    method, query = _REQUEST_BUILDERS[params.endpoint](params)
    url: str = f"{base_url.rstrip('/')}/{params.endpoint.value}"
    return RequestDescriptor(method=method, url=url, params=query)
