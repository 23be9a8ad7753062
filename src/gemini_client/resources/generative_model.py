"""Generative model resource."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from gemini_client.requests import (
    CountTokensRequest,
    GenerateContentRequest,
    StreamGenerateContentRequest,
)
from gemini_client.resources.chat_session import ChatSession
from gemini_client.responses import CountTokensResponse, GenerateContentResponse, StreamResponse
from gemini_client.telemetry import get_logger
from gemini_client.types import Content, ContentLike, GenerationConfig, ModelType, SafetySetting

if TYPE_CHECKING:
    from gemini_client.transport import Transporter

logger = get_logger(__name__)


class GenerativeModel:
    """Handle on a generative model.

    Configuration accumulates on the instance through the ``with_*``
    methods, each returning ``self``; action methods combine it with their
    call-time contents.

    Example:
        >>> response = (
        ...     client.generative_model(ModelType.GEMINI_PRO)
        ...     .with_safety_setting(SafetySetting(
        ...         category=HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        ...         threshold=HarmBlockThreshold.BLOCK_ONLY_HIGH,
        ...     ))
        ...     .with_generation_config(GenerationConfig(temperature=0.4))
        ...     .generate_content("Write a haiku about rivers")
        ... )
        >>> print(response.text)
    """

    def __init__(self, transporter: Transporter, model: ModelType | str) -> None:
        self.transporter = transporter
        self.model = model
        self.safety_settings: list[SafetySetting] = []
        self.generation_config: GenerationConfig | None = None
        self.generation_request_params: dict[str, Any] = {}

    def with_safety_setting(self, safety_setting: SafetySetting) -> GenerativeModel:
        """Append a safety setting; earlier settings are kept in order."""
        self.safety_settings.append(safety_setting)
        return self

    def with_generation_config(self, generation_config: GenerationConfig) -> GenerativeModel:
        self.generation_config = generation_config
        return self

    def with_additional_generation_request_params(
        self, params: Mapping[str, Any]
    ) -> GenerativeModel:
        """Merge extra top-level keys into every generation request body."""
        self.generation_request_params.update(params)
        return self

    def count_tokens(self, *parts: ContentLike) -> CountTokensResponse:
        """Run the model's tokenizer on the given contents."""
        request = CountTokensRequest(self.model, _contents(parts))
        logger.debug("count_tokens", path=request.path())

        response = self.transporter.request(request)
        return CountTokensResponse.from_dict(response.data)

    def generate_content(self, *parts: ContentLike) -> GenerateContentResponse:
        """Generate a response; each argument becomes one content of the conversation."""
        request = GenerateContentRequest(
            self.model,
            _contents(parts),
            safety_settings=self.safety_settings,
            generation_config=self.generation_config,
            additional_params=self.generation_request_params,
        )
        logger.debug("generate_content", path=request.path())

        response = self.transporter.request(request)
        return GenerateContentResponse.from_dict(response.data)

    def stream_generate_content(
        self, *parts: ContentLike
    ) -> StreamResponse[GenerateContentResponse]:
        """Generate a response and receive it chunk by chunk.

        The request is sent immediately; the returned stream can be
        iterated once.
        """
        request = StreamGenerateContentRequest(
            self.model,
            _contents(parts),
            safety_settings=self.safety_settings,
            generation_config=self.generation_config,
            additional_params=self.generation_request_params,
        )
        logger.debug("stream_generate_content", path=request.path())

        stream = self.transporter.request_stream(request)
        return StreamResponse(GenerateContentResponse, stream)

    def start_chat(self, history: list[Content] | None = None) -> ChatSession:
        """Start a multi-turn conversation with this model."""
        return ChatSession(self, history)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"


def _contents(parts: tuple[ContentLike, ...]) -> list[Content]:
    return [Content.parse(part) for part in parts]
