"""
Structured logging for gemini-client-python.

Keyword fields passed to a ``GeminiLogger`` call travel with the record and
are rendered by the JSON or text formatter. API keys are masked before
anything reaches a handler.

The library only installs a ``NullHandler`` on the ``gemini_client``
logger; records propagate to whatever the application configured. Call
:meth:`GeminiLogger.configure` to get output without configuring
``logging`` yourself.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar

PACKAGE_LOGGER = "gemini_client"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_logging_level(self) -> int:
        """Convert to standard logging level."""
        return getattr(logging, self.value)


class SensitiveDataMasker:
    """Masks API keys in log messages and structured fields."""

    DEFAULT_PATTERNS: ClassVar[list[tuple[str, str]]] = [
        # Google API keys
        (r"AIza[0-9A-Za-z_\-]{20,}", "AIza***REDACTED***"),
        # ?key=... query parameter
        (r"([?&]key=)([^&\s\"']+)", r"\1***REDACTED***"),
        (r"(x-goog-api-key[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)", r"\1***REDACTED***"),
        (r"((?:GEMINI|GOOGLE)_API_KEY=)([^\s]+)", r"\1***REDACTED***"),
    ]

    SENSITIVE_KEYS: ClassVar[tuple[str, ...]] = ("key", "token", "secret", "auth")

    def __init__(self, patterns: list[tuple[str, str]] | None = None) -> None:
        self._patterns = [
            (re.compile(p, re.IGNORECASE), r)
            for p, r in (patterns or self.DEFAULT_PATTERNS)
        ]

    def mask(self, text: str) -> str:
        """Mask sensitive data in text."""
        result = text
        for pattern, replacement in self._patterns:
            result = pattern.sub(replacement, result)
        return result

    def mask_dict(self, data: dict[str, Any]) -> dict[str, Any]:
        """Mask sensitive values in a dictionary, recursing into nested dicts."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if any(sensitive in key.lower() for sensitive in self.SENSITIVE_KEYS):
                result[key] = "***REDACTED***"
            elif isinstance(value, str):
                result[key] = self.mask(value)
            elif isinstance(value, dict):
                result[key] = self.mask_dict(value)
            else:
                result[key] = value
        return result


def _fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "extra_fields", None) or {}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the keyword fields at top level."""

    def __init__(self, masker: SensitiveDataMasker | None = None) -> None:
        super().__init__()
        self.masker = masker or SensitiveDataMasker()

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": self.masker.mask(record.getMessage()),
            **self.masker.mask_dict(_fields(record)),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``time LEVEL logger: message key=value ...``"""

    def __init__(self, masker: SensitiveDataMasker | None = None) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")
        self.masker = masker or SensitiveDataMasker()

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = self.masker.mask(super().formatMessage(record))
        fields = self.masker.mask_dict(_fields(record))
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


class GeminiLogger:
    """Logger with keyword-field support.

    Example:
        >>> logger = GeminiLogger.get_logger("gemini_client.transport")
        >>> logger.debug("Sending request", path="models/gemini-pro:generateContent")
    """

    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(
        cls,
        level: LogLevel = LogLevel.INFO,
        format: str = "json",
        stream: Any = None,
        masker: SensitiveDataMasker | None = None,
    ) -> None:
        """Send the library's records to a stream of their own.

        Replaces any handler installed by an earlier call and stops
        propagation to the root logger.

        Args:
            level: Minimum level of emitted records
            format: Output format ('json' or 'text')
            stream: Output stream (default: stderr)
            masker: Sensitive data masker
        """
        cls.reset()

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(JsonFormatter(masker) if format == "json" else TextFormatter(masker))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.addHandler(handler)
        package_logger.setLevel(level.to_logging_level())
        package_logger.propagate = False
        cls._handler = handler

    @classmethod
    def reset(cls) -> None:
        """Undo :meth:`configure`; records propagate to the application again."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if cls._handler is not None:
            package_logger.removeHandler(cls._handler)
            cls._handler = None
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True

    @classmethod
    def get_logger(cls, name: str) -> GeminiLogger:
        return cls(logging.getLogger(name))

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, fields: dict[str, Any], exc_info: bool = False) -> None:
        if self._logger.isEnabledFor(level):
            extra = {"extra_fields": fields} if fields else None
            self._logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)

    def error(self, msg: str, exc_info: bool = False, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields, exc_info=exc_info)


def get_logger(name: str) -> GeminiLogger:
    """Get a logger instance."""
    return GeminiLogger.get_logger(name)
