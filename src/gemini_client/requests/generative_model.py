"""Requests for the generateContent family of model actions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from gemini_client.requests.base import Request
from gemini_client.types import Content, GenerationConfig, ModelType, SafetySetting, model_name


class GenerateContentRequest(Request):
    """Generates a response from the model given an input conversation.

    Keys in ``additional_params`` are merged into the body; ``contents``,
    ``safetySettings`` and ``generationConfig`` win on collision.
    """

    action: ClassVar[str] = "generateContent"

    def __init__(
        self,
        model: ModelType | str,
        contents: Sequence[Content],
        safety_settings: Sequence[SafetySetting] = (),
        generation_config: GenerationConfig | None = None,
        additional_params: Mapping[str, Any] | None = None,
    ) -> None:
        self.model = model
        self.contents = list(contents)
        self.safety_settings = list(safety_settings)
        self.generation_config = generation_config
        self.additional_params = dict(additional_params or {})

    def path(self) -> str:
        return f"{model_name(self.model)}:{self.action}"

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "contents": [content.to_dict() for content in self.contents],
        }
        if self.safety_settings:
            body["safetySettings"] = [setting.to_dict() for setting in self.safety_settings]
        if self.generation_config is not None:
            body["generationConfig"] = self.generation_config.to_dict()

        return {**self.additional_params, **body}


class StreamGenerateContentRequest(GenerateContentRequest):
    """Same body as :class:`GenerateContentRequest`; the response is streamed."""

    action: ClassVar[str] = "streamGenerateContent"


class CountTokensRequest(Request):
    """Runs the model's tokenizer on the given contents."""

    def __init__(self, model: ModelType | str, contents: Sequence[Content]) -> None:
        self.model = model
        self.contents = list(contents)

    def path(self) -> str:
        return f"{model_name(self.model)}:countTokens"

    def body(self) -> dict[str, Any]:
        return {"contents": [content.to_dict() for content in self.contents]}
