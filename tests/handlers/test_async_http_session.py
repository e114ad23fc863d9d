import asyncio
import logging

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp


def _make_app() -> web.Application:
    async def echo(request: web.Request) -> web.Response:
        body: bytes = await request.read()
        return web.Response(body=f"{request.method} {request.query_string} ".encode() + body)

    async def slow(request: web.Request) -> web.Response:
        _ = request
        await asyncio.sleep(0.5)
        return web.Response(text="late")

    async def missing(request: web.Request) -> web.Response:
        _ = request
        return web.Response(status=404, text="not here")

    app = web.Application()
    app.router.add_route("*", "/echo", echo)
    app.router.add_get("/slow", slow)
    app.router.add_get("/missing", missing)
    return app


def test_init_does_not_create_session_outside_event_loop() -> None:
    http = AsyncHttp()

    assert http.closed is True


@pytest.mark.asyncio
async def test_first_use_logs_session_initialized(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()
    _ = http.session

    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)
    await http.close()


@pytest.mark.asyncio
async def test_context_enter_does_not_log_already_initialized(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()
    _ = http.session
    caplog.clear()

    async with http:
        pass

    assert not any("session already initialized" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_reenter_after_close_logs_session_initialized(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()

    async with http:
        pass
    assert http.closed is True

    caplog.clear()

    async with http:
        assert http.closed is False

    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_request_returns_raw_body_with_encoded_params() -> None:
    async with TestServer(_make_app()) as server, AsyncHttp() as http:
        body: bytes = await http.get(url=str(server.make_url("/echo")), params={"q": "a b"})

    assert body == b"GET q=a+b " or body == b"GET q=a%20b "


@pytest.mark.asyncio
async def test_post_sends_params_in_query_without_body() -> None:
    async with TestServer(_make_app()) as server, AsyncHttp() as http:
        body: bytes = await http.post(url=str(server.make_url("/echo")), params={"target": "fr"})

    assert body == b"POST target=fr "


@pytest.mark.asyncio
async def test_error_status_raises_comm_error_with_status() -> None:
    async with TestServer(_make_app()) as server, AsyncHttp() as http:
        with pytest.raises(AsyncCommError) as exc_info:
            await http.get(url=str(server.make_url("/missing")))

    assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_timeout_raises_timeout_error() -> None:
    async with TestServer(_make_app()) as server, AsyncHttp() as http:
        with pytest.raises(AsyncCommTimeoutError):
            await http.get(url=str(server.make_url("/slow")), total_timeout=0.1)


@pytest.mark.asyncio
async def test_unreachable_server_raises_comm_error() -> None:
    server = TestServer(web.Application())
    await server.start_server()
    url: str = str(server.make_url("/"))
    await server.close()

    async with AsyncHttp() as http:
        with pytest.raises(AsyncCommError) as exc_info:
            await http.get(url=url, total_timeout=2.0)

    assert not isinstance(exc_info.value, AsyncCommTimeoutError)
    assert exc_info.value.status is None
