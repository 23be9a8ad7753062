"""Requests for embedding models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gemini_client.requests.base import Request
from gemini_client.types import Content, ModelType, TaskType, model_name


class EmbedContentRequest(Request):
    """Generates an embedding from the model given a content."""

    def __init__(
        self,
        model: ModelType | str,
        content: Content,
        task_type: TaskType | None = None,
        title: str | None = None,
    ) -> None:
        self.model = model
        self.content = content
        self.task_type = task_type
        self.title = title

    def path(self) -> str:
        return f"{model_name(self.model)}:embedContent"

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"content": self.content.to_dict()}
        if self.task_type is not None:
            body["taskType"] = self.task_type.value
        if self.title is not None:
            body["title"] = self.title
        return body


class BatchEmbedContentsRequest(Request):
    """Generates one embedding per content in a single call."""

    def __init__(
        self,
        model: ModelType | str,
        contents: Sequence[Content],
        task_type: TaskType | None = None,
        title: str | None = None,
    ) -> None:
        self.model = model
        self.requests = [
            EmbedContentRequest(model, content, task_type=task_type, title=title)
            for content in contents
        ]

    def path(self) -> str:
        return f"{model_name(self.model)}:batchEmbedContents"

    def body(self) -> dict[str, Any]:
        return {
            "requests": [
                {"model": model_name(self.model), **request.body()}
                for request in self.requests
            ]
        }
