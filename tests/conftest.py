"""Root pytest fixtures for gemini-client-python tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from gemini_client.transport import BytesStream, ResponseDTO

TEST_API_KEY = "AIzaSyTestKey000000000000000000000000"


class StubTransporter:
    """Transporter that replays canned bodies and keeps the requests it received."""

    def __init__(self) -> None:
        self.requests: list[Any] = []
        self.responses: list[dict[str, Any]] = []
        self.streams: list[BytesStream] = []

    def respond_with(self, *bodies: dict[str, Any]) -> StubTransporter:
        self.responses.extend(bodies)
        return self

    def stream_with(self, *streams: BytesStream) -> StubTransporter:
        self.streams.extend(streams)
        return self

    def request(self, request: Any) -> ResponseDTO:
        self.requests.append(request)
        return ResponseDTO(data=self.responses.pop(0))

    def request_stream(self, request: Any) -> BytesStream:
        self.requests.append(request)
        return self.streams.pop(0)

    @property
    def last(self) -> Any:
        return self.requests[-1]


@pytest.fixture
def transporter() -> StubTransporter:
    """In-memory transporter for resource tests."""
    return StubTransporter()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove every environment variable the client reads."""
    for name in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "GEMINI_BASE_URL",
        "GEMINI_HTTP_TIMEOUT_SECS",
        "GEMINI_HTTP_TRUST_ENV",
    ):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
