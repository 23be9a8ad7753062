"""Request builders: resource path, HTTP method and JSON body."""

from gemini_client.requests.base import Request
from gemini_client.requests.embedding_model import BatchEmbedContentsRequest, EmbedContentRequest
from gemini_client.requests.generative_model import (
    CountTokensRequest,
    GenerateContentRequest,
    StreamGenerateContentRequest,
)
from gemini_client.requests.models import ListModelsRequest, RetrieveModelRequest

__all__ = [
    "BatchEmbedContentsRequest",
    "CountTokensRequest",
    "EmbedContentRequest",
    "GenerateContentRequest",
    "ListModelsRequest",
    "Request",
    "RetrieveModelRequest",
    "StreamGenerateContentRequest",
]
