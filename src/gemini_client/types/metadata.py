"""
Records returned inside API responses: candidates, feedback, usage,
embeddings and model metadata.
"""

from __future__ import annotations

from pydantic import Field

from gemini_client.types.base import WireModel
from gemini_client.types.content import Content
from gemini_client.types.enums import BlockReason, FinishReason
from gemini_client.types.safety import SafetyRating


class CitationSource(WireModel):
    """A citation to a source for a portion of a specific response."""

    start_index: int | None = None
    end_index: int | None = None
    uri: str | None = None
    license: str | None = None


class CitationMetadata(WireModel):
    """Collection of source attributions for a piece of content."""

    citation_sources: list[CitationSource] = Field(default_factory=list)


class Candidate(WireModel):
    """A response candidate generated from the model."""

    content: Content | None = None
    finish_reason: FinishReason | None = None
    safety_ratings: list[SafetyRating] = Field(default_factory=list)
    citation_metadata: CitationMetadata | None = None
    token_count: int | None = None
    index: int | None = None


class PromptFeedback(WireModel):
    """Safety feedback about the prompt itself."""

    block_reason: BlockReason | None = None
    safety_ratings: list[SafetyRating] = Field(default_factory=list)


class UsageMetadata(WireModel):
    """Token usage of a generation request."""

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None


class ContentEmbedding(WireModel):
    """A list of floats representing an embedding."""

    values: list[float] = Field(default_factory=list)


class Model(WireModel):
    """Information about a generative language model."""

    name: str
    version: str | None = None
    display_name: str | None = None
    description: str | None = None
    input_token_limit: int | None = None
    output_token_limit: int | None = None
    supported_generation_methods: list[str] = Field(default_factory=list)
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
