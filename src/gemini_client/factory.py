"""
Builder for clients with custom transport configuration.
"""

from __future__ import annotations

from typing import Any

import httpx

from gemini_client.client import Client
from gemini_client.transport import HttpTransporter


class Factory:
    """Builder for creating Client instances.

    Unset options fall back to environment variables, then defaults
    (see :class:`~gemini_client.transport.HttpTransporter`).

    Example:
        >>> client = (
        ...     Factory()
        ...     .with_api_key("AIza...")
        ...     .with_base_url("https://generativelanguage.googleapis.com/v1beta/")
        ...     .with_http_header("X-Request-Source", "batch")
        ...     .make()
        ... )
    """

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._base_url: str | None = None
        self._http_client: httpx.Client | None = None
        self._headers: dict[str, str] = {}
        self._query_params: dict[str, Any] = {}
        self._timeout: float | None = None

    def with_api_key(self, api_key: str) -> Factory:
        """Set explicit API key.

        Args:
            api_key: API key

        Returns:
            Self for chaining
        """
        self._api_key = api_key.strip()
        return self

    def with_base_url(self, base_url: str) -> Factory:
        """Override base URL.

        Args:
            base_url: Base URL for API requests

        Returns:
            Self for chaining
        """
        self._base_url = base_url
        return self

    def with_http_client(self, client: httpx.Client) -> Factory:
        """Use a preconfigured httpx client.

        The client is not closed by the transporter.
        """
        self._http_client = client
        return self

    def with_http_header(self, name: str, value: str) -> Factory:
        self._headers[name] = value
        return self

    def with_query_param(self, name: str, value: Any) -> Factory:
        self._query_params[name] = value
        return self

    def with_timeout(self, seconds: float) -> Factory:
        """Set request timeout.

        Args:
            seconds: Timeout in seconds

        Returns:
            Self for chaining
        """
        self._timeout = seconds
        return self

    def make(self) -> Client:
        """Build the client."""
        transporter = HttpTransporter(
            self._api_key,
            base_url=self._base_url,
            headers=self._headers,
            query_params=self._query_params,
            timeout=self._timeout,
            http_client=self._http_client,
        )
        return Client(transporter)


def create_client(api_key: str | None = None) -> Client:
    """Create a client with default transport settings.

    Args:
        api_key: API key; read from ``GEMINI_API_KEY``/``GOOGLE_API_KEY`` when omitted
    """
    factory = Factory()
    if api_key is not None:
        factory.with_api_key(api_key)
    return factory.make()
