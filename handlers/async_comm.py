"""Asynchronous HTTP transport.

``AsyncHttp`` issues one request per call on a shared aiohttp session and returns the raw
response body. Every failure of the HTTP layer is reported as ``AsyncCommError`` (or its
timeout subclass); the caller decides what the body means.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping


__all__: list[str] = ["AsyncCommError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client returning raw response bodies.

    The aiohttp session is created on first use, inside the running event loop, and is
    re-created transparently after ``close()``. Requests share the session but no other state,
    so any number of them may be in flight at once.
    """

    def __init__(self) -> None:
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Create the aiohttp session unless an open one exists.

        Must be called from a coroutine; aiohttp binds the session to the running loop.

        Args:
            suppress_already_log (bool): Do not log when the session already exists.
        """
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """The open aiohttp session, created if necessary."""
        self.initialize_session(suppress_already_log=True)
        if self.__session is None:
            msg = "Session could not be initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session and not self.__session.closed:
            await self.__session.close()
        logger.info("%s session closed", self.__class__.__name__)

    async def get(
        self, *, url: str, params: Mapping[str, str] | None = None, total_timeout: float = 10.0
    ) -> bytes:
        """Perform a GET request and return the body."""
        return await self.request("GET", url=url, params=params, total_timeout=total_timeout)

    async def post(
        self, *, url: str, params: Mapping[str, str] | None = None, total_timeout: float = 10.0
    ) -> bytes:
        """Perform a POST request with the parameters in the query string and return the body."""
        return await self.request("POST", url=url, params=params, total_timeout=total_timeout)

    async def request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        params: Mapping[str, str] | None = None,
        total_timeout: float = 10.0,
    ) -> bytes:
        """Perform an asynchronous HTTP request.

        Args:
            method (HTTPMethod): HTTP method.
            url (str): Request URL without query string.
            params (Mapping[str, str] | None): Query parameters, encoded by aiohttp.
            total_timeout (float): Total timeout in seconds. 0 or less disables the timeout.

        Returns:
            bytes: The raw response body.

        Raises:
            AsyncCommTimeoutError: If the server did not answer in time.
            AsyncCommError: If the connection failed or the server answered with a non-2xx status.
        """
        logger.debug("[%s] url=%s timeout=%s", method, url, total_timeout)
        if total_timeout <= 0:
            _timeout = aiohttp.ClientTimeout(total=None)
        elif total_timeout < CONNECT_TIMEOUT:
            # a connect timeout longer than the total would never fire
            _timeout = aiohttp.ClientTimeout(total=total_timeout)
        else:
            _timeout = aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

        try:
            async with self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=_timeout,
            ) as resp:
                body: bytes = await resp.read()
                logger.debug("[%s] status=%s length=%d", method, resp.status, len(body))
                return body

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "The server could not be reached."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = f"HTTP request failed: {err}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """The HTTP request could not be completed.

    Attributes:
        msg (str): Error message, suffixed with the HTTP status when the server answered.
        status (int | None): HTTP status code of an error response, None otherwise.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)
        self.status: int | None = None

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.status = rsp.status
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """The request did not complete within the timeout."""
