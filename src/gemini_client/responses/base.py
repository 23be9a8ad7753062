"""Base class for typed API responses."""

from __future__ import annotations

import copy
from typing import Any, ClassVar, TypeVar

from gemini_client.responses.fixtures import deep_merge
from gemini_client.types.base import WireModel

_R = TypeVar("_R", bound="BaseResponse")


class BaseResponse(WireModel):
    """Parsed JSON body of an API call.

    Subclasses declare ``fixture``, a canned payload that :meth:`fake`
    turns into an instance for tests.
    """

    fixture: ClassVar[dict[str, Any]] = {}

    @classmethod
    def fake(cls: type[_R], overrides: dict[str, Any] | None = None) -> _R:
        """Build a response from the canned payload, deep-merged with overrides."""
        payload = deep_merge(copy.deepcopy(cls.fixture), overrides or {})
        return cls.from_dict(payload)
