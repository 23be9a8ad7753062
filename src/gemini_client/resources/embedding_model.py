"""Embedding model resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gemini_client.requests import BatchEmbedContentsRequest, EmbedContentRequest
from gemini_client.responses import BatchEmbedContentsResponse, EmbedContentResponse
from gemini_client.telemetry import get_logger
from gemini_client.types import Content, ContentLike, ModelType, TaskType

if TYPE_CHECKING:
    from gemini_client.transport import Transporter

logger = get_logger(__name__)


class EmbeddingModel:
    """Handle on an embedding model.

    Example:
        >>> response = client.embedding_model().embed_content("Hello, world!")
        >>> response.embedding.values[:3]
    """

    def __init__(self, transporter: Transporter, model: ModelType | str = ModelType.EMBEDDING) -> None:
        self.transporter = transporter
        self.model = model

    def embed_content(
        self,
        content: ContentLike,
        task_type: TaskType | None = None,
        title: str | None = None,
    ) -> EmbedContentResponse:
        """Generate an embedding for one content.

        Args:
            content: Text, media or content to embed
            task_type: Intended downstream use of the embedding
            title: Document title, only meaningful for RETRIEVAL_DOCUMENT

        Returns:
            EmbedContentResponse with a single embedding
        """
        request = EmbedContentRequest(
            self.model, Content.parse(content), task_type=task_type, title=title
        )
        logger.debug("embed_content", path=request.path())

        response = self.transporter.request(request)
        return EmbedContentResponse.from_dict(response.data)

    def batch_embed_contents(
        self,
        *contents: ContentLike,
        task_type: TaskType | None = None,
        title: str | None = None,
    ) -> BatchEmbedContentsResponse:
        """Generate one embedding per content in a single call."""
        request = BatchEmbedContentsRequest(
            self.model,
            [Content.parse(content) for content in contents],
            task_type=task_type,
            title=title,
        )
        logger.debug("batch_embed_contents", path=request.path(), count=len(contents))

        response = self.transporter.request(request)
        return BatchEmbedContentsResponse.from_dict(response.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"
