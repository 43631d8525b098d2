"""
Transport layer for elevenlabs-stt.

Provides the httpx-based transport and API key resolution.
"""

from elevenlabs_stt.transport.auth import get_auth_header, resolve_api_key
from elevenlabs_stt.transport.http import HttpTransport, build_multipart, parse_response

__all__ = [
    "HttpTransport",
    "build_multipart",
    "get_auth_header",
    "parse_response",
    "resolve_api_key",
]
