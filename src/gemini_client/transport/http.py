"""HTTP transporter using httpx.

Provides:
- Synchronous requests and streamed responses
- Configurable timeouts and base URL
- Proxy support via environment (opt-in)
- API key header management
"""

from __future__ import annotations

import os
from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

import httpx

from gemini_client.errors import DecodeError, RemoteError, TransportError
from gemini_client.telemetry import get_logger
from gemini_client.transport.auth import get_auth_header
from gemini_client.transport.base import ResponseDTO
from gemini_client.types import Method

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gemini_client.requests import Request

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1/"

_DEFAULT_TIMEOUT = 30.0
_DEFAULT_CONNECT_TIMEOUT = 10.0

_UA_VERSION: str | None = None


def _trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("GEMINI_HTTP_TRUST_ENV", "0") == "1"


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            _UA_VERSION = version("gemini-client-python")
        except PackageNotFoundError:
            _UA_VERSION = "0.0.0"
    return _UA_VERSION


class HttpByteStream:
    """Byte stream over a streamed httpx response.

    Closing the stream releases the underlying connection.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    def __iter__(self) -> Iterator[bytes]:
        try:
            yield from self._response.iter_bytes()
        except httpx.HTTPError as e:
            raise TransportError(
                f"Stream interrupted: {e}", url=str(self._response.url), cause=e
            ) from e

    def close(self) -> None:
        self._response.close()


class HttpTransporter:
    """Transporter backed by ``httpx.Client``.

    Example:
        >>> transporter = HttpTransporter(api_key="AIza...")
        >>> dto = transporter.request(CountTokensRequest(ModelType.GEMINI_PRO, contents))
        >>> dto.data["totalTokens"]
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        query_params: dict[str, Any] | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize HTTP transporter.

        Args:
            api_key: Explicit API key (overrides environment)
            base_url: API base URL (overrides ``GEMINI_BASE_URL``)
            headers: Extra headers sent with every request
            query_params: Extra query parameters sent with every request
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx client to use instead of a new one
        """
        self._base_url = base_url or os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL
        self._headers = dict(headers or {})
        self._query_params = dict(query_params or {})
        self._auth_headers = get_auth_header(api_key)

        self._timeout = timeout
        if self._timeout is None:
            env_timeout = os.getenv("GEMINI_HTTP_TIMEOUT_SECS")
            if env_timeout:
                with suppress(ValueError):
                    self._timeout = float(env_timeout)
        if self._timeout is None:
            self._timeout = _DEFAULT_TIMEOUT

        self._client = http_client
        self._owns_client = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self._timeout, connect=_DEFAULT_CONNECT_TIMEOUT),
                trust_env=_trust_env_enabled(),
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this transporter created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> HttpTransporter:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _url(self, request: Request) -> str:
        return f"{self._base_url.rstrip('/')}/{request.path()}"

    def _build_request(self, request: Request, accept: str) -> httpx.Request:
        headers = {
            "Content-Type": "application/json",
            "Accept": accept,
            "User-Agent": f"gemini-client-python/{_get_ua_version()}",
        }
        headers.update(self._auth_headers)
        headers.update(self._headers)

        return self._get_client().build_request(
            method=request.method.value,
            url=self._url(request),
            json=request.body() if request.method is Method.POST else None,
            params={**self._query_params, **request.query()},
            headers=headers,
        )

    def _send(self, http_request: httpx.Request, *, stream: bool) -> httpx.Response:
        url = str(http_request.url)
        logger.debug("Sending request", method=http_request.method, url=url, stream=stream)

        try:
            response = self._get_client().send(http_request, stream=stream)
        except httpx.ConnectError as e:
            logger.warning("Connection failed", url=url)
            raise TransportError(f"Connection failed: {e}", url=url, cause=e) from e
        except httpx.TimeoutException as e:
            logger.warning("Request timed out", url=url)
            raise TransportError(f"Request timed out: {e}", url=url, cause=e) from e
        except httpx.HTTPError as e:
            logger.warning("HTTP error", url=url)
            raise TransportError(f"HTTP error: {e}", url=url, cause=e) from e

        if response.status_code >= 400:
            try:
                response.read()
            finally:
                response.close()

            body = None
            with suppress(ValueError):
                body = response.json()

            logger.warning("API returned an error", url=url, status_code=response.status_code)
            raise RemoteError.from_response(
                status_code=response.status_code,
                body=body if isinstance(body, dict) else None,
            )

        return response

    def request(self, request: Request) -> ResponseDTO:
        """Send a request and parse the JSON body.

        Raises:
            TransportError: On network/connection errors
            RemoteError: On API errors (4xx, 5xx)
            DecodeError: When the body is not a JSON object
        """
        response = self._send(self._build_request(request, "application/json"), stream=False)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError("Response body is not valid JSON", payload=response.text, cause=e) from e

        if not isinstance(data, dict):
            raise DecodeError("Response body is not a JSON object", payload=response.text)

        return ResponseDTO(data=data)

    def request_stream(self, request: Request) -> HttpByteStream:
        """Send a request and return the body as a byte stream.

        The caller owns the returned stream and must close it.
        """
        response = self._send(self._build_request(request, "application/json"), stream=True)
        return HttpByteStream(response)
