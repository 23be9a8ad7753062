"""gemini-client-python: synchronous client for the Google Gemini REST API.

Wraps content generation, streaming, token counting, embeddings, model
metadata and multi-turn chat behind small resource objects, with an
in-memory fake (:mod:`gemini_client.testing`) for applications' tests.
"""
from __future__ import annotations

from gemini_client.client import Client, ClientContract
from gemini_client.errors import (
    DecodeError,
    FakeResponsesExhaustedError,
    GeminiError,
    RemoteError,
    StreamConsumedError,
    TransportError,
)
from gemini_client.factory import Factory, create_client
from gemini_client.types import (
    Blob,
    Content,
    GenerationConfig,
    HarmBlockThreshold,
    HarmCategory,
    ModelType,
    Part,
    Role,
    SafetySetting,
    TaskType,
)

__version__ = "0.1.0"

__all__ = [
    "Blob",
    # Client
    "Client",
    "ClientContract",
    "Content",
    # Errors
    "DecodeError",
    "Factory",
    "FakeResponsesExhaustedError",
    "GeminiError",
    "GenerationConfig",
    "HarmBlockThreshold",
    "HarmCategory",
    # Types
    "ModelType",
    "Part",
    "RemoteError",
    "Role",
    "SafetySetting",
    "StreamConsumedError",
    "TaskType",
    "TransportError",
    # Version
    "__version__",
    "create_client",
]
