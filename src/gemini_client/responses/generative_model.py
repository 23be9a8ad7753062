"""Responses of generative model actions."""

from __future__ import annotations

import json
from typing import Any, ClassVar

from pydantic import Field

from gemini_client.responses import fixtures
from gemini_client.responses.base import BaseResponse
from gemini_client.responses.stream import StreamResponse
from gemini_client.transport.base import BytesStream
from gemini_client.types import Candidate, Part, PromptFeedback, UsageMetadata


class GenerateContentResponse(BaseResponse):
    """Response from the model supporting multiple candidates."""

    fixture: ClassVar[dict[str, Any]] = fixtures.GENERATE_CONTENT

    candidates: list[Candidate] = Field(default_factory=list)
    prompt_feedback: PromptFeedback | None = None
    usage_metadata: UsageMetadata | None = None

    @property
    def parts(self) -> list[Part]:
        """Parts of the first candidate.

        Raises:
            ValueError: If the response has no candidates or several
        """
        if not self.candidates:
            raise ValueError(
                "The `parts` accessor expects a single candidate, but response.candidates is empty."
            )
        if len(self.candidates) > 1:
            raise ValueError(
                "The `parts` accessor only works with a single candidate. "
                "With multiple candidates use response.candidates[index].content.parts"
            )
        content = self.candidates[0].content
        return list(content.parts) if content is not None else []

    @property
    def text(self) -> str:
        """Concatenated text of the first candidate's text parts.

        Raises:
            ValueError: If there is no single candidate or it has no text
        """
        texts = [part.text for part in self.parts if part.text is not None]
        if not texts:
            raise ValueError("The response does not contain any text part.")
        return "".join(texts)

    @classmethod
    def fake_stream(
        cls, chunks: list[dict[str, Any]] | None = None, chunk_size: int = 64
    ) -> StreamResponse[GenerateContentResponse]:
        """Build a stream response over an in-memory JSON array.

        Args:
            chunks: Payloads to stream; defaults to three text chunks
            chunk_size: Byte slice size used to deliver the array

        Returns:
            StreamResponse yielding one response per chunk
        """
        if chunks is None:
            chunks = [
                fixtures.deep_merge(
                    fixtures.GENERATE_CONTENT,
                    {
                        "candidates": [
                            {"content": {"parts": [{"text": text}], "role": "model"}, "index": 0}
                        ]
                    },
                )
                for text in fixtures.STREAM_TEXTS
            ]
        payload = "[" + "\n,\r\n".join(json.dumps(chunk) for chunk in chunks) + "]"
        return StreamResponse(cls, BytesStream(payload, chunk_size=chunk_size))


class CountTokensResponse(BaseResponse):
    """Number of tokens the model's tokenizer produces for the prompt."""

    fixture: ClassVar[dict[str, Any]] = fixtures.COUNT_TOKENS

    total_tokens: int
