"""Shared base for wire-mapped value objects."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from gemini_client.errors import DecodeError

_T = TypeVar("_T", bound="WireModel")


class WireModel(BaseModel):
    """Immutable record that maps to a camelCase JSON object.

    Fields are addressed by their snake_case name in Python and by their
    camelCase alias on the wire. ``None`` fields are left out of
    :meth:`to_dict` entirely.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def from_dict(cls: type[_T], attributes: Mapping[str, Any]) -> _T:
        """Build an instance from its wire representation.

        Raises:
            DecodeError: If the payload does not match the expected shape,
                including enum values this library does not know
        """
        try:
            return cls.model_validate(dict(attributes))
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected {cls.__name__} payload: {e.error_count()} validation error(s)",
                payload=json.dumps(dict(attributes), default=str),
                cause=e,
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
