"""Error hierarchy for elevenlabs-stt.

Provides structured error types for validation, transport and API failures.
"""

from elevenlabs_stt.errors.base import (
    ApiError,
    ArgumentError,
    AuthenticationError,
    DecodeError,
    ErrorContext,
    QuotaExceededError,
    RateLimitError,
    SttError,
    TransportError,
    ValidationError,
)
from elevenlabs_stt.errors.classification import (
    ErrorClass,
    classify_http_error,
    extract_error_message,
)

__all__ = [
    "ApiError",
    "ArgumentError",
    "AuthenticationError",
    "DecodeError",
    "ErrorClass",
    "ErrorContext",
    "QuotaExceededError",
    "RateLimitError",
    "SttError",
    "TransportError",
    "ValidationError",
    "classify_http_error",
    "extract_error_message",
]
