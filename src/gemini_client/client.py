"""Client entry point and the contract shared with ``ClientFake``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from gemini_client.resources import ChatSession, EmbeddingModel, GenerativeModel, Models
from gemini_client.types import ModelType

if TYPE_CHECKING:
    from gemini_client.transport import Transporter


class ClientContract(Protocol):
    """Capabilities shared by :class:`Client` and the testing fake.

    Code that depends on this protocol can receive either one.
    """

    def models(self) -> Models: ...

    def generative_model(self, model: ModelType | str) -> GenerativeModel: ...

    def gemini_pro(self) -> GenerativeModel: ...

    def gemini_pro_vision(self) -> GenerativeModel: ...

    def embedding_model(self, model: ModelType | str = ModelType.EMBEDDING) -> EmbeddingModel: ...

    def chat(self, model: ModelType | str = ModelType.GEMINI_PRO) -> ChatSession: ...


class Client:
    """Gemini API client bound to a transporter.

    Example:
        >>> client = Client(HttpTransporter(api_key="AIza..."))
        >>> client.gemini_pro().generate_content("Hello!").text
    """

    def __init__(self, transporter: Transporter) -> None:
        self.transporter = transporter

    def models(self) -> Models:
        return Models(self.transporter)

    def generative_model(self, model: ModelType | str) -> GenerativeModel:
        """Get a generative model; any model name string is accepted."""
        return GenerativeModel(self.transporter, model)

    def gemini_pro(self) -> GenerativeModel:
        return self.generative_model(ModelType.GEMINI_PRO)

    def gemini_pro_vision(self) -> GenerativeModel:
        return self.generative_model(ModelType.GEMINI_PRO_VISION)

    def embedding_model(self, model: ModelType | str = ModelType.EMBEDDING) -> EmbeddingModel:
        return EmbeddingModel(self.transporter, model)

    def chat(self, model: ModelType | str = ModelType.GEMINI_PRO) -> ChatSession:
        """Start a chat with an empty history."""
        return self.generative_model(model).start_chat()
