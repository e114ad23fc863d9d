"""End-to-end tests of GoogleApiClient over real HTTP against a local fake of the API."""

from __future__ import annotations

from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from core.trans.google_api import GoogleApiClient
from handlers.async_comm import AsyncCommError, AsyncHttp


def _make_app(recorded: list[tuple[str, str, dict[str, str]]], *, status: int = 200) -> web.Application:
    async def record(request: web.Request, payload: dict[str, Any]) -> web.Response:
        recorded.append((request.method, request.path, dict(request.query)))
        if status != 200:
            return web.json_response({"error": {"code": status, "message": "API key not valid"}}, status=status)
        return web.json_response(payload)

    async def languages(request: web.Request) -> web.Response:
        return await record(
            request,
            {"data": {"languages": [{"language": "en", "name": "English"}, {"language": "fr", "name": "French"}]}},
        )

    async def detect(request: web.Request) -> web.Response:
        return await record(request, {"data": {"detections": [[{"language": "fr", "confidence": 1}]]}})

    async def translate(request: web.Request) -> web.Response:
        return await record(request, {"data": {"translations": [{"translatedText": "Bonjour"}]}})

    app = web.Application()
    app.router.add_get("/language/translate/v2/languages", languages)
    app.router.add_get("/language/translate/v2/detect", detect)
    app.router.add_post("/language/translate/v2", translate)
    return app


@pytest.mark.asyncio
async def test_translate_over_http() -> None:
    recorded: list[tuple[str, str, dict[str, str]]] = []
    async with TestServer(_make_app(recorded)) as server, AsyncHttp() as http:
        client = GoogleApiClient("secret", http=http, base_url=str(server.make_url("/")))

        result: str = await client.translate("Hello", target_locale="fr", source_locale="en")

    assert result == "Bonjour"
    assert recorded == [
        (
            "POST",
            "/language/translate/v2",
            {"key": "secret", "q": "Hello", "target": "fr", "format": "text", "source": "en"},
        )
    ]


@pytest.mark.asyncio
async def test_detect_over_http_encodes_text() -> None:
    recorded: list[tuple[str, str, dict[str, str]]] = []
    async with TestServer(_make_app(recorded)) as server, AsyncHttp() as http:
        client = GoogleApiClient("secret", http=http, base_url=str(server.make_url("/")))

        result: str = await client.detect_language("Ça va & toi?")

    assert result == "fr"
    assert recorded == [("GET", "/language/translate/v2/detect", {"key": "secret", "q": "Ça va & toi?"})]


@pytest.mark.asyncio
async def test_fetch_supported_languages_over_http() -> None:
    recorded: list[tuple[str, str, dict[str, str]]] = []
    async with TestServer(_make_app(recorded)) as server, AsyncHttp() as http:
        client = GoogleApiClient("secret", http=http, base_url=str(server.make_url("/")))

        languages, index, locales = await client.fetch_supported_languages("en_GB")

    assert [language.name for language in languages] == ["English", "French"]
    assert index == {"en": "English", "fr": "French"}
    assert [locale.identifier for locale in locales] == ["en", "fr"]
    assert recorded[0][2] == {"key": "secret", "model": "base", "target": "en"}


@pytest.mark.asyncio
async def test_error_status_is_a_transport_failure() -> None:
    recorded: list[tuple[str, str, dict[str, str]]] = []
    async with TestServer(_make_app(recorded, status=403)) as server, AsyncHttp() as http:
        client = GoogleApiClient("bad-key", http=http, base_url=str(server.make_url("/")))

        with pytest.raises(AsyncCommError) as exc_info:
            await client.translate("Hello", "fr", "en")

    assert exc_info.value.status == 403
    assert "status='403'" in str(exc_info.value)
