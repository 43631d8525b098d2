"""elevenlabs-stt: async Python client for the ElevenLabs speech-to-text API.

Build a request with chained setters, then await ``execute()``:

    client = SttClient(api_key)
    response = await client.speech_to_text(audio).language_code("en").execute()
"""
from __future__ import annotations

from elevenlabs_stt.client import SpeechToTextBuilder, SttClient
from elevenlabs_stt.config import ClientConfig
from elevenlabs_stt.errors import (
    ApiError,
    ArgumentError,
    AuthenticationError,
    DecodeError,
    QuotaExceededError,
    RateLimitError,
    SttError,
    TransportError,
    ValidationError,
)
from elevenlabs_stt.types import (
    SpeakerSegment,
    SttModel,
    SttRequest,
    SttResponse,
    TimestampsGranularity,
    TranscriptionWord,
    WordCharacter,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ClientConfig",
    "SpeechToTextBuilder",
    "SttClient",
    # Errors
    "ApiError",
    "ArgumentError",
    "AuthenticationError",
    "DecodeError",
    "QuotaExceededError",
    "RateLimitError",
    "SttError",
    "TransportError",
    "ValidationError",
    # Types
    "SpeakerSegment",
    "SttModel",
    "SttRequest",
    "SttResponse",
    "TimestampsGranularity",
    "TranscriptionWord",
    "WordCharacter",
    # Version
    "__version__",
]
