"""Generation parameters for a model invocation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import PrivateAttr

from gemini_client.types.base import WireModel


class GenerationConfig(WireModel):
    """Configuration options for model generation and outputs.

    Keys the typed fields do not cover can be attached with
    :meth:`additional`. They are merged into :meth:`to_dict`; on a key
    collision the typed field wins, and between ``additional`` calls the
    last value written for a key wins.

    Example:
        >>> config = GenerationConfig(max_output_tokens=800, temperature=1.0)
        >>> config.additional({"responseMimeType": "application/json"})
        >>> config.to_dict()["responseMimeType"]
        'application/json'
    """

    candidate_count: int | None = None
    stop_sequences: list[str] | None = None
    max_output_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None

    _additional: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> GenerationConfig:
        known: set[str] = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)

        config = super().from_dict({k: v for k, v in attributes.items() if k in known})
        extra = {k: v for k, v in attributes.items() if k not in known}
        if extra:
            config.additional(extra)
        return config

    def additional(self, extra: Mapping[str, Any]) -> GenerationConfig:
        """Attach untyped keys to the serialized config.

        Args:
            extra: Wire keys and values to merge

        Returns:
            Self for chaining
        """
        self._additional.update(extra)
        return self

    @property
    def additional_params(self) -> dict[str, Any]:
        """Copy of the keys attached with :meth:`additional`."""
        return dict(self._additional)

    def to_dict(self) -> dict[str, Any]:
        return {**self._additional, **super().to_dict()}
