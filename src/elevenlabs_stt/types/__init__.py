"""
Type definitions for elevenlabs-stt.

Request options, model enumerations and response structures.
"""

from elevenlabs_stt.types.models import (
    DEFAULT_MODEL,
    MAX_FILE_SIZE_BYTES,
    SttModel,
    TimestampsGranularity,
)
from elevenlabs_stt.types.request import SttRequest, validate_request
from elevenlabs_stt.types.response import (
    SpeakerSegment,
    SttResponse,
    TranscriptionWord,
    WordCharacter,
)

__all__ = [
    "DEFAULT_MODEL",
    "MAX_FILE_SIZE_BYTES",
    "SpeakerSegment",
    "SttModel",
    "SttRequest",
    "SttResponse",
    "TimestampsGranularity",
    "TranscriptionWord",
    "WordCharacter",
    "validate_request",
]
