"""
Streamed responses.

``streamGenerateContent`` answers with a JSON array whose elements arrive
one by one::

    [{"candidates": [...]}
    ,
    {"candidates": [...]}
    ]

With ``alt=sse`` the same objects arrive as ``data: {...}`` lines instead.
:class:`JsonStreamDecoder` handles both framings (and plain NDJSON) and
hands out each object as soon as its closing brace has been received.
"""

from __future__ import annotations

import codecs
import json
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from gemini_client.errors import DecodeError, StreamConsumedError
from gemini_client.telemetry import get_logger

if TYPE_CHECKING:
    from gemini_client.responses.base import BaseResponse
    from gemini_client.transport import ByteStream

logger = get_logger(__name__)

T = TypeVar("T", bound="BaseResponse")

_FRAMING_CHARS = frozenset("[],")
_SSE_DATA = "data:"
_SSE_SKIPPED_FIELDS = ("event:", "id:", "retry:", ":")


class JsonStreamDecoder:
    """Incremental decoder from raw bytes to top-level JSON objects.

    Feed it bytes in arbitrary slices; every complete object is parsed and
    returned. Brackets inside strings are ignored when tracking nesting.
    """

    def __init__(self) -> None:
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._pos = 0
        self._start: int | None = None
        self._depth = 0
        self._in_string = False
        self._escape = False

    def feed(self, data: bytes) -> Iterator[dict[str, Any]]:
        """Add bytes and yield every object they complete."""
        self._buffer += self._utf8.decode(data)
        yield from self._drain()

    def finish(self) -> Iterator[dict[str, Any]]:
        """Flush the decoder at end of stream.

        Raises:
            DecodeError: If the stream ended inside an object or with stray data
        """
        self._buffer += self._utf8.decode(b"", final=True)
        yield from self._drain()

        if self._start is not None:
            raise DecodeError(
                "Stream ended in the middle of a JSON chunk",
                payload=self._buffer[self._start :],
            )

        rest = self._buffer[self._pos :].strip()
        if rest and not rest.startswith(_SSE_SKIPPED_FIELDS):
            raise DecodeError("Unexpected data at end of stream", payload=rest)

    def _drain(self) -> Iterator[dict[str, Any]]:
        buf = self._buffer
        pos = self._pos

        while pos < len(buf):
            ch = buf[pos]

            if self._start is None:
                if ch.isspace() or ch in _FRAMING_CHARS:
                    pos += 1
                elif ch == "{":
                    self._start = pos
                    self._depth = 1
                    pos += 1
                elif buf.startswith(_SSE_DATA, pos):
                    pos += len(_SSE_DATA)
                elif buf.startswith(_SSE_SKIPPED_FIELDS, pos):
                    end = buf.find("\n", pos)
                    if end == -1:
                        break
                    pos = end + 1
                elif any(field.startswith(buf[pos:]) for field in (_SSE_DATA, *_SSE_SKIPPED_FIELDS)):
                    # partial field name, wait for more bytes
                    break
                else:
                    end = buf.find("\n", pos)
                    raise DecodeError(
                        "Unexpected data between JSON chunks",
                        payload=buf[pos : end if end != -1 else len(buf)],
                    )
                continue

            if self._in_string:
                if self._escape:
                    self._escape = False
                elif ch == "\\":
                    self._escape = True
                elif ch == '"':
                    self._in_string = False
            elif ch == '"':
                self._in_string = True
            elif ch in "{[":
                self._depth += 1
            elif ch in "}]":
                self._depth -= 1
                if self._depth == 0:
                    text = buf[self._start : pos + 1]
                    self._start = None
                    buf = buf[pos + 1 :]
                    self._buffer = buf
                    self._pos = pos = 0
                    yield self._parse(text)
                    continue
            pos += 1

        if self._start is None:
            self._buffer = buf[pos:]
            self._pos = 0
        else:
            self._buffer = buf[self._start :]
            self._pos = pos - self._start
            self._start = 0

    @staticmethod
    def _parse(text: str) -> dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Malformed JSON chunk: {e.msg}", payload=text, cause=e) from e
        if not isinstance(data, dict):
            raise DecodeError("Stream chunk is not a JSON object", payload=text)
        return data


class StreamResponse(Generic[T]):
    """Lazy, single-use sequence of decoded responses over a byte stream.

    Each JSON object in the stream becomes one ``T`` as soon as it has been
    received. The underlying stream is closed when iteration finishes,
    fails or is abandoned early, or when :meth:`close` is called.

    Example:
        >>> with model.stream_generate_content("Tell me a story") as stream:
        ...     for response in stream:
        ...         print(response.text, end="")
    """

    def __init__(self, response_class: type[T], stream: ByteStream) -> None:
        self._response_class = response_class
        self._stream = stream
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __iter__(self) -> Iterator[T]:
        if self._consumed:
            raise StreamConsumedError()
        self._consumed = True
        return self._iterate()

    def _iterate(self) -> Iterator[T]:
        decoder = JsonStreamDecoder()
        count = 0
        try:
            for chunk in self._stream:
                for data in decoder.feed(chunk):
                    count += 1
                    yield self._response_class.from_dict(data)
            for data in decoder.finish():
                count += 1
                yield self._response_class.from_dict(data)
        finally:
            self._stream.close()
            logger.debug(
                "Stream closed",
                response=self._response_class.__name__,
                chunks=count,
            )

    def close(self) -> None:
        """Release the underlying stream without reading the rest."""
        self._consumed = True
        self._stream.close()

    def __enter__(self) -> StreamResponse[T]:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
