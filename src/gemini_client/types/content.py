"""
Multi-part content: inline media, parts and role-tagged content messages.
"""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Any, Union

from pydantic import AliasChoices, Field, field_validator

from gemini_client.types.base import WireModel
from gemini_client.types.enums import Role


class Blob(WireModel):
    """Raw media bytes, base64 encoded, with their MIME type.

    Neither the MIME type nor the payload is validated here.
    """

    mime_type: str
    data: str

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> Blob:
        """Create a blob by base64-encoding raw bytes."""
        return cls(mime_type=mime_type, data=base64.standard_b64encode(data).decode("ascii"))

    @classmethod
    def from_file(cls, path: str | Path, mime_type: str | None = None) -> Blob:
        """Create a blob from a local file.

        Args:
            path: Path to the file
            mime_type: Explicit MIME type; guessed from the file name if omitted

        Returns:
            Blob with the file's contents
        """
        file_path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(file_path.name)
        return cls.from_bytes(file_path.read_bytes(), mime_type or "application/octet-stream")


class Part(WireModel):
    """A datatype containing media that is part of a multi-part Content message.

    ``function_call``, ``function_response`` and ``file_data`` are open
    mappings whose shape is defined by the backend. An empty
    ``function_call["args"]`` is dropped on construction, so an empty
    argument mapping is indistinguishable from no arguments.

    ``file_data`` is written to the wire as ``file_data`` while every other
    key is camelCase; the backend expects exactly that.
    """

    text: str | None = None
    inline_data: Blob | None = None
    function_call: dict[str, Any] | None = None
    function_response: dict[str, Any] | None = None
    file_data: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("fileData", "file_data"),
        serialization_alias="file_data",
    )

    @field_validator("function_call")
    @classmethod
    def _drop_empty_args(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is not None and value.get("args") == {}:
            return {key: item for key, item in value.items() if key != "args"}
        return value


PartLike = Union[str, Blob, Part]
"""Anything that can be turned into a single :class:`Part`."""

ContentLike = Union[str, Blob, Part, "Content", list[PartLike]]
"""Anything :meth:`Content.parse` accepts."""


def to_part(value: PartLike) -> Part:
    """Coerce text, a blob or a part into a :class:`Part`."""
    if isinstance(value, Part):
        return value
    if isinstance(value, Blob):
        return Part(inline_data=value)
    if isinstance(value, str):
        return Part(text=value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a Part")


class Content(WireModel):
    """The base structured datatype containing multi-part content of a message."""

    parts: list[Part] = Field(default_factory=list)
    role: Role | None = None

    @classmethod
    def text(cls, text: str, role: Role = Role.USER) -> Content:
        """Create a single-part text content."""
        return cls(parts=[Part(text=text)], role=role)

    @classmethod
    def blob(cls, blob: Blob, role: Role = Role.USER) -> Content:
        """Create a single-part inline media content."""
        return cls(parts=[Part(inline_data=blob)], role=role)

    @classmethod
    def parse(cls, value: ContentLike, role: Role = Role.USER) -> Content:
        """Normalize a call-site argument into a :class:`Content`.

        A list becomes one content with one part per item; a ``Content`` is
        returned unchanged.
        """
        if isinstance(value, Content):
            return value
        if isinstance(value, list):
            return cls(parts=[to_part(item) for item in value], role=role)
        return cls(parts=[to_part(value)], role=role)
