"""Base error classes for gemini-client-python.

Provides a layered error hierarchy:
- GeminiError: Base class for all library errors
- TransportError: HTTP/network errors raised by the transporter
- RemoteError: Error responses returned by the API
- DecodeError: Malformed JSON in a response body or stream chunk
- StreamConsumedError: A single-use stream was iterated twice
- FakeResponsesExhaustedError: ClientFake ran out of planned responses
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'transport', 'remote', 'decode')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class GeminiError(Exception):
    """Base class for all gemini-client-python errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> GeminiError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class TransportError(GeminiError):
    """Error during HTTP transport.

    Raised when:
    - Network connection failure
    - Timeout
    - SSL/TLS or proxy errors
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class RemoteError(GeminiError):
    """Error response returned by the API.

    Attributes:
        status_code: HTTP status code
        code: Error code from the response envelope
        status: Canonical status name (e.g. ``INVALID_ARGUMENT``)
        raw_error: Raw error body
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: int | None = None,
        status: str | None = None,
        raw_error: dict[str, Any] | None = None,
    ) -> None:
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        if status:
            ctx.details["status"] = status

        super().__init__(message, ctx)

        self.status_code = status_code
        self.code = code
        self.status = status
        self.raw_error = raw_error or {}

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: dict[str, Any] | None = None,
    ) -> RemoteError:
        """Create RemoteError from an HTTP error response.

        The API wraps failures as ``{"error": {"code", "message", "status"}}``.

        Args:
            status_code: HTTP status code
            body: Response body (parsed JSON), if any

        Returns:
            RemoteError populated from the error envelope
        """
        error = (body or {}).get("error")
        if not isinstance(error, dict):
            error = {}

        return cls(
            message=error.get("message") or f"HTTP {status_code}",
            status_code=status_code,
            code=error.get("code"),
            status=error.get("status"),
            raw_error=body,
        )


class DecodeError(GeminiError):
    """Malformed JSON in a response body or stream chunk."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        payload: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="decode")
        if payload is not None:
            ctx.details["payload"] = payload[:200]
        super().__init__(message, ctx)
        self.payload = payload
        self.__cause__ = cause


class StreamConsumedError(GeminiError):
    """A stream response was iterated after it had already been consumed."""

    def __init__(self, message: str = "Stream response has already been consumed.") -> None:
        super().__init__(
            message,
            ErrorContext(source="stream", hint="Call the streaming method again for a fresh stream"),
        )


class FakeResponsesExhaustedError(GeminiError):
    """ClientFake was called with no planned responses left."""

    def __init__(self, message: str = "No fake responses left.") -> None:
        super().__init__(
            message,
            ErrorContext(source="testing", hint="Queue more responses with add_responses()"),
        )
