"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

# Default settings
API_BASE_URL = "http://localhost:8080/api"
API_TIMEOUT = 60


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url.rstrip("/")
    API_TIMEOUT = timeout


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with a concurrency cap and exponential backoff."""

    def __init__(self, max_concurrent: int = 5):
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    def _open(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=API_TIMEOUT,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
            )
        return self._client

    async def aclose(self) -> None:
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        client = self._open()
        async with self._sem:
            self._request_count += 1
            resp = await client.get(f"{API_BASE_URL}/{path}", params=params)
            resp.raise_for_status()
            return resp.json()
