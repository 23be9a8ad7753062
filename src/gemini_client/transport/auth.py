"""
API key resolution.

Resolves the API key from:
1. Explicit value
2. ``GEMINI_API_KEY``
3. ``GOOGLE_API_KEY``
"""

from __future__ import annotations

import os

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

API_KEY_HEADER = "x-goog-api-key"


def resolve_api_key(explicit_key: str | None = None) -> str | None:
    """Resolve the API key.

    Args:
        explicit_key: Explicitly provided API key

    Returns:
        Resolved API key or None if not found
    """
    if explicit_key:
        return explicit_key

    for env_var in API_KEY_ENV_VARS:
        key = os.getenv(env_var)
        if key:
            return key

    return None


def get_auth_header(api_key: str | None = None) -> dict[str, str]:
    """Get the authentication header, empty when no key is available."""
    key = resolve_api_key(api_key)
    if not key:
        return {}
    return {API_KEY_HEADER: key}
