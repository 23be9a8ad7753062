"""Base request abstraction consumed by transporters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gemini_client.types.enums import Method


class Request(ABC):
    """A resource path, an HTTP method and a JSON body.

    Transporters resolve :meth:`path` against their base URL and send
    :meth:`body` as JSON for ``POST`` requests.
    """

    method: Method = Method.POST

    @abstractmethod
    def path(self) -> str:
        """Resource path relative to the API base URL."""
        ...

    def body(self) -> dict[str, Any]:
        """JSON-serializable request body."""
        return {}

    def query(self) -> dict[str, Any]:
        """Query string parameters."""
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self.method.value}, path={self.path()!r})"
