"""
Transport layer - the transporter contract and its httpx implementation.
"""

from gemini_client.transport.auth import get_auth_header, resolve_api_key
from gemini_client.transport.base import ByteStream, BytesStream, ResponseDTO, Transporter
from gemini_client.transport.http import DEFAULT_BASE_URL, HttpByteStream, HttpTransporter

__all__ = [
    "DEFAULT_BASE_URL",
    "ByteStream",
    "BytesStream",
    "HttpByteStream",
    "HttpTransporter",
    "ResponseDTO",
    "Transporter",
    "get_auth_header",
    "resolve_api_key",
]
