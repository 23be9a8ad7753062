"""
Types layer - value objects and enumerations mirroring the API's JSON.

- Blob, Part and Content for multi-part messages
- SafetySetting and GenerationConfig for request configuration
- Candidate, PromptFeedback, UsageMetadata and friends for responses
"""

from gemini_client.types.content import Blob, Content, ContentLike, Part, PartLike
from gemini_client.types.enums import (
    BlockReason,
    FinishReason,
    HarmBlockThreshold,
    HarmCategory,
    HarmProbability,
    Method,
    ModelType,
    Role,
    TaskType,
    model_name,
)
from gemini_client.types.generation import GenerationConfig
from gemini_client.types.metadata import (
    Candidate,
    CitationMetadata,
    CitationSource,
    ContentEmbedding,
    Model,
    PromptFeedback,
    UsageMetadata,
)
from gemini_client.types.safety import SafetyRating, SafetySetting

__all__ = [
    "BlockReason",
    "Blob",
    "Candidate",
    "CitationMetadata",
    "CitationSource",
    "Content",
    "ContentEmbedding",
    "ContentLike",
    "FinishReason",
    "GenerationConfig",
    "HarmBlockThreshold",
    "HarmCategory",
    "HarmProbability",
    "Method",
    "Model",
    "ModelType",
    "Part",
    "PartLike",
    "PromptFeedback",
    "Role",
    "SafetyRating",
    "SafetySetting",
    "TaskType",
    "UsageMetadata",
    "model_name",
]
