"""
Generic async HTTP client shared by all provider wrappers.
Each provider gets its own client with a base URL, default headers,
timeout and retry budget.
"""

import logging
import time
from typing import Any, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A remote provider call failed (HTTP status, timeout or transport error)."""

    def __init__(self, message: str, provider: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ProviderResponseError(ProviderError):
    """The provider answered, but not with the documented response shape."""

    pass


def describe_status_error(provider: str, error: httpx.HTTPStatusError) -> str:
    """Build a readable message for an HTTP status error."""
    status_code = error.response.status_code
    error_msg = f"{provider} API HTTP error: {status_code}"
    if status_code == 401:
        error_msg += " - Invalid or expired credentials"
    elif status_code == 403:
        error_msg += " - Access forbidden"
    elif status_code == 429:
        error_msg += " - Rate limit exceeded"
    elif status_code >= 500:
        error_msg += f" - {provider} API server error"

    try:
        error_detail = error.response.json()
        if isinstance(error_detail, dict):
            detail = error_detail.get("error") or error_detail.get("message")
            if isinstance(detail, dict):
                detail = detail.get("message", "")
            if detail:
                error_msg += f" - {detail}"
    except ValueError:
        error_msg += f" - {error.response.text[:200]}"

    return error_msg


def _is_retryable(error: BaseException) -> bool:
    """Retry on timeouts, transport failures, 429 and 5xx responses."""
    if isinstance(error, httpx.HTTPStatusError):
        status_code = error.response.status_code
        return status_code == 429 or status_code >= 500
    return isinstance(error, (httpx.TimeoutException, httpx.TransportError))


class ApiClient:
    """Thin JSON client around httpx.AsyncClient with tenacity retries."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[dict[str, str]] = None,
        timeout: float = 30.0,
        retries: int = 3,
        name: str = "API",
        backoff_multiplier: float = 1.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.retries = max(0, retries)
        self.name = name
        self.backoff_multiplier = backoff_multiplier

        logger.debug(f"   {self.name} client: {self.base_url} (timeout={self.timeout}s, retries={self.retries})")

    def build_url(self, path: str) -> str:
        """Join path onto the base URL. Absolute URLs are used as-is."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.retries + 1),
            wait=wait_exponential(multiplier=self.backoff_multiplier, min=self.backoff_multiplier, max=10),
            retry=retry_if_exception(_is_retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
        data: Optional[dict] = None,
        files: Optional[dict] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ProviderError: On HTTP status errors, timeouts or transport failures
                (after retries are exhausted)
        """
        url = self.build_url(path)
        request_headers = {**self.headers, **(headers or {})}
        if files is not None:
            # httpx sets the multipart boundary itself
            request_headers.pop("Content-Type", None)

        start_time = time.time()
        logger.debug(f"🌐 {self.name} {method} {url}")

        try:
            async for attempt in self._retrying():
                with attempt:
                    async with httpx.AsyncClient(timeout=self.timeout) as client:
                        response = await client.request(
                            method,
                            url,
                            params=params,
                            json=json,
                            data=data,
                            files=files,
                            content=content,
                            headers=request_headers,
                        )
                        response.raise_for_status()

        except httpx.HTTPStatusError as e:
            error_msg = describe_status_error(self.name, e)
            logger.error(f"❌ {error_msg}")
            raise ProviderError(error_msg, provider=self.name, status_code=e.response.status_code) from e

        except httpx.TimeoutException as e:
            error_msg = f"{self.name} API request timed out after {self.timeout}s"
            logger.error(f"❌ {error_msg}")
            raise ProviderError(error_msg, provider=self.name) from e

        except httpx.RequestError as e:
            error_msg = f"{self.name} API request failed: {str(e)}"
            logger.error(f"❌ {error_msg}")
            raise ProviderError(error_msg, provider=self.name) from e

        duration = time.time() - start_time
        logger.debug(f"✅ {self.name} {method} {url} completed in {duration:.2f}s")

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, params: Optional[dict] = None, headers: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        data: Optional[dict] = None,
        files: Optional[dict] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict] = None,
    ) -> Any:
        return await self.request(
            "POST", path, json=json, data=data, files=files, content=content, headers=headers
        )

    async def put(self, path: str, json: Any = None, headers: Optional[dict] = None) -> Any:
        return await self.request("PUT", path, json=json, headers=headers)

    async def delete(self, path: str, headers: Optional[dict] = None) -> Any:
        return await self.request("DELETE", path, headers=headers)
