"""Requests for model metadata."""

from __future__ import annotations

from typing import Any

from gemini_client.requests.base import Request
from gemini_client.types import Method, ModelType, model_name


class ListModelsRequest(Request):
    """Lists models available through the API, one page at a time."""

    method = Method.GET

    def __init__(self, page_size: int | None = None, next_page_token: str | None = None) -> None:
        self.page_size = page_size
        self.next_page_token = next_page_token

    def path(self) -> str:
        return "models"

    def query(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if self.page_size is not None:
            query["pageSize"] = self.page_size
        if self.next_page_token is not None:
            query["pageToken"] = self.next_page_token
        return query


class RetrieveModelRequest(Request):
    """Gets information about a specific model."""

    method = Method.GET

    def __init__(self, model: ModelType | str) -> None:
        self.model = model

    def path(self) -> str:
        return model_name(self.model)
