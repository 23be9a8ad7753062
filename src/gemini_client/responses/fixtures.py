"""Canned API payloads used by the ``fake()`` response constructors."""

from __future__ import annotations

from typing import Any

GENERATE_CONTENT: dict[str, Any] = {
    "candidates": [
        {
            "content": {
                "parts": [{"text": "This is a fake response from the model."}],
                "role": "model",
            },
            "finishReason": "STOP",
            "index": 0,
            "safetyRatings": [
                {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "probability": "NEGLIGIBLE"},
                {"category": "HARM_CATEGORY_HATE_SPEECH", "probability": "NEGLIGIBLE"},
                {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE"},
                {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "probability": "NEGLIGIBLE"},
            ],
        }
    ],
    "promptFeedback": {
        "safetyRatings": [
            {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "probability": "NEGLIGIBLE"},
            {"category": "HARM_CATEGORY_HATE_SPEECH", "probability": "NEGLIGIBLE"},
            {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE"},
            {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "probability": "NEGLIGIBLE"},
        ]
    },
    "usageMetadata": {
        "promptTokenCount": 8,
        "candidatesTokenCount": 9,
        "totalTokenCount": 17,
    },
}

STREAM_TEXTS: list[str] = ["Once upon", " a time", " there was a fake stream."]

COUNT_TOKENS: dict[str, Any] = {"totalTokens": 8}

EMBED_CONTENT: dict[str, Any] = {
    "embedding": {"values": [0.008624583, -0.030451821, -0.042496547, -0.029230341]},
}

BATCH_EMBED_CONTENTS: dict[str, Any] = {
    "embeddings": [
        {"values": [0.008624583, -0.030451821, -0.042496547, -0.029230341]},
        {"values": [0.010213721, -0.027132153, -0.044157397, -0.025093125]},
    ],
}

MODEL: dict[str, Any] = {
    "name": "models/gemini-pro",
    "version": "001",
    "displayName": "Gemini Pro",
    "description": "The best model for scaling across a wide range of tasks",
    "inputTokenLimit": 30720,
    "outputTokenLimit": 2048,
    "supportedGenerationMethods": ["generateContent", "countTokens"],
    "temperature": 0.9,
    "topP": 1.0,
    "topK": 1,
}

LIST_MODELS: dict[str, Any] = {
    "models": [
        MODEL,
        {
            "name": "models/embedding-001",
            "version": "001",
            "displayName": "Embedding 001",
            "description": "Obtain a distributed representation of a text.",
            "inputTokenLimit": 2048,
            "outputTokenLimit": 1,
            "supportedGenerationMethods": ["embedContent"],
        },
    ],
    "nextPageToken": "Ch5tb2RlbHMvZ2VtaW5pLTEuMC1wcm8tMDAx",
}


def deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge ``overrides`` into a copy of ``base``.

    Nested dicts merge key by key; any other value (lists included)
    replaces the base value.
    """
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
