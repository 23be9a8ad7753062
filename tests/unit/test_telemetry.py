"""Tests for telemetry module."""

import io
import json
import logging

import pytest

from gemini_client.telemetry import (
    GeminiLogger,
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
)


class TestSensitiveDataMasker:
    """Tests for SensitiveDataMasker."""

    def test_mask_api_key(self) -> None:
        """Test masking Google API keys."""
        masked = SensitiveDataMasker().mask("Using key AIzaSyA1234567890abcdefghijklmnop")
        assert "AIzaSyA1234567890" not in masked
        assert "REDACTED" in masked

    def test_mask_query_param(self) -> None:
        """Test masking the key query parameter."""
        masked = SensitiveDataMasker().mask(
            "https://generativelanguage.googleapis.com/v1/models?key=secret123&pageSize=2"
        )
        assert "secret123" not in masked
        assert "pageSize=2" in masked

    def test_mask_header(self) -> None:
        """Test masking the API key header."""
        masked = SensitiveDataMasker().mask("x-goog-api-key: secret123")
        assert "secret123" not in masked

    def test_mask_env_assignment(self) -> None:
        """Test masking environment variable assignments."""
        masked = SensitiveDataMasker().mask("GEMINI_API_KEY=secret123")
        assert masked == "GEMINI_API_KEY=***REDACTED***"

    def test_mask_dict(self) -> None:
        """Test sensitive keys and nested values."""
        masked = SensitiveDataMasker().mask_dict(
            {
                "api_key": "secret",
                "url": "https://example.com/v1/models?key=secret",
                "nested": {"auth_token": "secret"},
                "count": 3,
            }
        )

        assert masked["api_key"] == "***REDACTED***"
        assert "secret" not in masked["url"]
        assert masked["nested"]["auth_token"] == "***REDACTED***"
        assert masked["count"] == 3


def _record(msg: str, **fields) -> logging.LogRecord:
    record = logging.LogRecord("gemini_client.test", logging.INFO, __file__, 1, msg, None, None)
    if fields:
        record.extra_fields = fields
    return record


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self) -> None:
        """Test fields are merged and masked."""
        output = JsonFormatter().format(
            _record("Sending request", url="https://x/models?key=AIzaSyA1234567890abcdefghijklmnop")
        )

        data = json.loads(output)
        assert data["message"] == "Sending request"
        assert data["level"] == "INFO"
        assert data["logger"] == "gemini_client.test"
        assert "AIzaSyA1234567890" not in data["url"]

    def test_text_formatter(self) -> None:
        """Test key=value fields are appended."""
        output = TextFormatter().format(_record("Stream closed", chunks=3))

        assert "Stream closed" in output
        assert output.endswith("Stream closed chunks=3")

    def test_text_formatter_masks_message(self) -> None:
        """Test the message itself is masked."""
        output = TextFormatter().format(_record("key is AIzaSyA1234567890abcdefghijklmnop"))
        assert "AIzaSyA1234567890" not in output


class TestGeminiLogger:
    """Tests for GeminiLogger."""

    @pytest.fixture(autouse=True)
    def _reset_configuration(self):
        GeminiLogger.reset()
        yield
        GeminiLogger.reset()

    def test_library_defaults_to_propagation(self, caplog) -> None:
        """Test records reach the application's handlers until configure() is called."""
        package_logger = logging.getLogger("gemini_client")
        assert package_logger.propagate
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
        assert not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers)

        with caplog.at_level(logging.DEBUG, logger="gemini_client"):
            get_logger("gemini_client.test_propagate").debug("Stream closed", chunks=2)

        assert [r.getMessage() for r in caplog.records] == ["Stream closed"]
        assert caplog.records[0].extra_fields == {"chunks": 2}

    def test_reset_restores_propagation(self) -> None:
        """Test reset removes the configured handler."""
        GeminiLogger.configure(level=LogLevel.DEBUG, stream=io.StringIO())
        GeminiLogger.reset()

        package_logger = logging.getLogger("gemini_client")
        assert package_logger.propagate
        assert not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers)

    def test_get_logger(self) -> None:
        """Test logger names."""
        logger = get_logger("gemini_client.test_names")
        assert isinstance(logger, GeminiLogger)
        assert logger.name == "gemini_client.test_names"

    def test_configure_json(self) -> None:
        """Test configured loggers write JSON with fields."""
        stream = io.StringIO()
        logger = get_logger("gemini_client.test_json")
        GeminiLogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)

        logger.debug("fake call recorded", resource="GenerativeModel")

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "fake call recorded"
        assert data["resource"] == "GenerativeModel"

    def test_level_filters(self) -> None:
        """Test records below the configured level are dropped."""
        stream = io.StringIO()
        logger = get_logger("gemini_client.test_level")
        GeminiLogger.configure(level=LogLevel.WARNING, format="text", stream=stream)

        logger.debug("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()
