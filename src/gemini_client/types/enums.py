"""String enumerations used in requests and responses."""

from __future__ import annotations

from enum import Enum


class ModelType(str, Enum):
    """Well-known model identifiers.

    Any other model name can be passed as a plain string wherever a
    ``ModelType`` is accepted.
    """

    GEMINI_PRO = "models/gemini-pro"
    GEMINI_PRO_VISION = "models/gemini-pro-vision"
    GEMINI_1_5_PRO = "models/gemini-1.5-pro-latest"
    GEMINI_1_5_FLASH = "models/gemini-1.5-flash-latest"
    EMBEDDING = "models/embedding-001"
    TEXT_EMBEDDING_004 = "models/text-embedding-004"


def model_name(model: ModelType | str) -> str:
    """Return the resource path segment for a model."""
    if isinstance(model, ModelType):
        return model.value
    return model


class Method(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"


class Role(str, Enum):
    """Producer of a piece of content."""

    USER = "user"
    MODEL = "model"


class HarmCategory(str, Enum):
    """Category of a safety rating or setting."""

    HARM_CATEGORY_UNSPECIFIED = "HARM_CATEGORY_UNSPECIFIED"
    HARM_CATEGORY_DEROGATORY = "HARM_CATEGORY_DEROGATORY"
    HARM_CATEGORY_TOXICITY = "HARM_CATEGORY_TOXICITY"
    HARM_CATEGORY_VIOLENCE = "HARM_CATEGORY_VIOLENCE"
    HARM_CATEGORY_SEXUAL = "HARM_CATEGORY_SEXUAL"
    HARM_CATEGORY_MEDICAL = "HARM_CATEGORY_MEDICAL"
    HARM_CATEGORY_DANGEROUS = "HARM_CATEGORY_DANGEROUS"
    HARM_CATEGORY_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HARM_CATEGORY_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    HARM_CATEGORY_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    HARM_CATEGORY_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class HarmBlockThreshold(str, Enum):
    """Probability at and beyond which content is blocked."""

    HARM_BLOCK_THRESHOLD_UNSPECIFIED = "HARM_BLOCK_THRESHOLD_UNSPECIFIED"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"


class HarmProbability(str, Enum):
    """Probability that a piece of content is harmful."""

    HARM_PROBABILITY_UNSPECIFIED = "HARM_PROBABILITY_UNSPECIFIED"
    NEGLIGIBLE = "NEGLIGIBLE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class FinishReason(str, Enum):
    """Reason the model stopped generating tokens."""

    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    OTHER = "OTHER"


class BlockReason(str, Enum):
    """Reason a prompt was blocked."""

    BLOCK_REASON_UNSPECIFIED = "BLOCK_REASON_UNSPECIFIED"
    SAFETY = "SAFETY"
    OTHER = "OTHER"


class TaskType(str, Enum):
    """Intended downstream use of an embedding."""

    TASK_TYPE_UNSPECIFIED = "TASK_TYPE_UNSPECIFIED"
    RETRIEVAL_QUERY = "RETRIEVAL_QUERY"
    RETRIEVAL_DOCUMENT = "RETRIEVAL_DOCUMENT"
    SEMANTIC_SIMILARITY = "SEMANTIC_SIMILARITY"
    CLASSIFICATION = "CLASSIFICATION"
    CLUSTERING = "CLUSTERING"
