"""Resource façades binding requests, transporter and response parsing."""

from gemini_client.resources.chat_session import ChatSession, ChatStreamResponse
from gemini_client.resources.embedding_model import EmbeddingModel
from gemini_client.resources.generative_model import GenerativeModel
from gemini_client.resources.models import Models

__all__ = [
    "ChatSession",
    "ChatStreamResponse",
    "EmbeddingModel",
    "GenerativeModel",
    "Models",
]
