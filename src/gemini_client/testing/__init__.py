"""Fake client and assertion helpers for testing code that uses the client."""

from gemini_client.testing.client_fake import ClientFake
from gemini_client.testing.requests import TestRequest
from gemini_client.testing.resources import (
    ChatSessionTestResource,
    EmbeddingModelTestResource,
    GenerativeModelTestResource,
    ModelTestResource,
)

__all__ = [
    "ChatSessionTestResource",
    "ClientFake",
    "EmbeddingModelTestResource",
    "GenerativeModelTestResource",
    "ModelTestResource",
    "TestRequest",
]
