"""
Transporter contract: the only seam between the client and the network.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gemini_client.requests import Request


@dataclass(frozen=True)
class ResponseDTO:
    """Parsed JSON body of a non-streamed response."""

    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ByteStream(Protocol):
    """Readable stream of raw response bytes that must be closed after use."""

    def __iter__(self) -> Iterator[bytes]: ...

    def close(self) -> None: ...


class Transporter(Protocol):
    """Sends requests built by the client."""

    def request(self, request: Request) -> ResponseDTO:
        """Send a request and return its parsed JSON body."""
        ...

    def request_stream(self, request: Request) -> ByteStream:
        """Send a request and return the raw body as a byte stream."""
        ...


class BytesStream:
    """In-memory :class:`ByteStream`.

    Example:
        >>> stream = BytesStream(b'[{"a": 1}]', chunk_size=4)
        >>> list(stream)
        [b'[{"a', b'": 1', b'}]']
    """

    def __init__(self, content: bytes | str | Iterable[bytes], chunk_size: int = 1024) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        if isinstance(content, bytes):
            self._chunks: list[bytes] = [
                content[i : i + chunk_size] for i in range(0, len(content), chunk_size)
            ]
        else:
            self._chunks = list(content)
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self._chunks:
            if self.closed:
                return
            yield chunk

    def close(self) -> None:
        self.closed = True
