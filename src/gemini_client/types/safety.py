"""Safety settings sent with a request and safety ratings returned by the API."""

from __future__ import annotations

from gemini_client.types.base import WireModel
from gemini_client.types.enums import HarmBlockThreshold, HarmCategory, HarmProbability


class SafetySetting(WireModel):
    """Blocking behaviour for one harm category."""

    category: HarmCategory
    threshold: HarmBlockThreshold


class SafetyRating(WireModel):
    """Harm probability of a piece of content for one category."""

    category: HarmCategory
    probability: HarmProbability
    blocked: bool | None = None
