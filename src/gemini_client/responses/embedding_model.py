"""Responses of embedding model actions."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from gemini_client.responses import fixtures
from gemini_client.responses.base import BaseResponse
from gemini_client.types import ContentEmbedding


class EmbedContentResponse(BaseResponse):
    fixture: ClassVar[dict[str, Any]] = fixtures.EMBED_CONTENT

    embedding: ContentEmbedding


class BatchEmbedContentsResponse(BaseResponse):
    fixture: ClassVar[dict[str, Any]] = fixtures.BATCH_EMBED_CONTENTS

    embeddings: list[ContentEmbedding] = Field(default_factory=list)
