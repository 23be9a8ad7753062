"""Responses of the models endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import Field

from gemini_client.responses import fixtures
from gemini_client.responses.base import BaseResponse
from gemini_client.types import Model


class ListModelResponse(BaseResponse):
    """One page of available models."""

    fixture: ClassVar[dict[str, Any]] = fixtures.LIST_MODELS

    models: list[Model] = Field(default_factory=list)
    next_page_token: str | None = None


class RetrieveModelResponse(BaseResponse):
    """A single model; the API returns the model object itself as the body."""

    fixture: ClassVar[dict[str, Any]] = fixtures.MODEL

    model: Model

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> RetrieveModelResponse:
        return cls(model=Model.from_dict(attributes))

    def to_dict(self) -> dict[str, Any]:
        return self.model.to_dict()
