"""Error hierarchy for gemini-client-python."""

from gemini_client.errors.base import (
    DecodeError,
    ErrorContext,
    FakeResponsesExhaustedError,
    GeminiError,
    RemoteError,
    StreamConsumedError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "ErrorContext",
    "FakeResponsesExhaustedError",
    "GeminiError",
    "RemoteError",
    "StreamConsumedError",
    "TransportError",
]
