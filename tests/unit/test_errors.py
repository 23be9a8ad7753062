"""Tests for error module."""

from gemini_client.errors import (
    DecodeError,
    ErrorContext,
    FakeResponsesExhaustedError,
    GeminiError,
    RemoteError,
    StreamConsumedError,
    TransportError,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_empty_context(self) -> None:
        """Test empty context string representation."""
        assert str(ErrorContext()) == ""

    def test_context_with_source_and_hint(self) -> None:
        """Test source and hint rendering."""
        ctx = ErrorContext(source="remote", hint="Check your API key")
        assert str(ctx) == "[remote] (hint: Check your API key)"


class TestGeminiError:
    """Tests for base error class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = GeminiError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_with_hint(self) -> None:
        """Test adding hint to error."""
        error = GeminiError("Failed").with_hint("Check the config")
        assert error.context.hint == "Check the config"

    def test_hierarchy(self) -> None:
        """Test every library error derives from GeminiError."""
        for cls in (TransportError, RemoteError, DecodeError, StreamConsumedError, FakeResponsesExhaustedError):
            assert issubclass(cls, GeminiError)


class TestTransportError:
    """Tests for TransportError."""

    def test_transport_error(self) -> None:
        """Test url and cause are kept."""
        cause = OSError("connection reset")
        error = TransportError("Connection failed", url="https://example.com", cause=cause)

        assert error.url == "https://example.com"
        assert error.__cause__ is cause
        assert error.context.details["url"] == "https://example.com"
        assert "[transport]" in str(error)


class TestRemoteError:
    """Tests for RemoteError."""

    def test_from_response(self) -> None:
        """Test the API error envelope is unpacked."""
        body = {
            "error": {
                "code": 400,
                "message": "API key not valid. Please pass a valid API key.",
                "status": "INVALID_ARGUMENT",
            }
        }

        error = RemoteError.from_response(400, body)

        assert error.status_code == 400
        assert error.code == 400
        assert error.status == "INVALID_ARGUMENT"
        assert error.message == "API key not valid. Please pass a valid API key."
        assert error.raw_error == body

    def test_from_response_without_body(self) -> None:
        """Test fallback message when the body is missing."""
        error = RemoteError.from_response(503)

        assert error.message == "HTTP 503"
        assert error.code is None
        assert error.raw_error == {}

    def test_from_response_with_unexpected_body(self) -> None:
        """Test a body without an error object."""
        error = RemoteError.from_response(500, {"error": "boom"})
        assert error.message == "HTTP 500"


class TestDecodeError:
    """Tests for DecodeError."""

    def test_payload_truncated_in_context(self) -> None:
        """Test the context keeps a bounded excerpt."""
        payload = "x" * 500
        error = DecodeError("Malformed JSON chunk", payload=payload)

        assert error.payload == payload
        assert len(error.context.details["payload"]) == 200


class TestStateErrors:
    """Tests for errors with default messages."""

    def test_stream_consumed(self) -> None:
        """Test default message and hint."""
        error = StreamConsumedError()
        assert "already been consumed" in str(error)
        assert error.context.hint is not None

    def test_fake_exhausted(self) -> None:
        """Test default message and hint."""
        error = FakeResponsesExhaustedError()
        assert "No fake responses left." in str(error)
        assert "add_responses" in (error.context.hint or "")
