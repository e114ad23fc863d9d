"""Transport utilities for the translator.

This package provides the asynchronous HTTP client used to reach the translation API.
"""

from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp

__all__: list[str] = ["AsyncCommError", "AsyncCommTimeoutError", "AsyncHttp"]
