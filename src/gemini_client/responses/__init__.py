"""Typed wrappers around parsed API responses."""

from gemini_client.responses.base import BaseResponse
from gemini_client.responses.embedding_model import (
    BatchEmbedContentsResponse,
    EmbedContentResponse,
)
from gemini_client.responses.generative_model import (
    CountTokensResponse,
    GenerateContentResponse,
)
from gemini_client.responses.models import ListModelResponse, RetrieveModelResponse
from gemini_client.responses.stream import JsonStreamDecoder, StreamResponse

__all__ = [
    "BaseResponse",
    "BatchEmbedContentsResponse",
    "CountTokensResponse",
    "EmbedContentResponse",
    "GenerateContentResponse",
    "JsonStreamDecoder",
    "ListModelResponse",
    "RetrieveModelResponse",
    "StreamResponse",
]
