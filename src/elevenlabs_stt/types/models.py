"""Enumerations and limits for speech-to-text request options."""

from __future__ import annotations

from enum import Enum


class SttModel(str, Enum):
    """Transcription models accepted by the speech-to-text endpoint."""

    SCRIBE_V1 = "scribe_v1"
    SCRIBE_V1_EXPERIMENTAL = "scribe_v1_experimental"


class TimestampsGranularity(str, Enum):
    """Granularity of timestamps in the transcription."""

    NONE = "none"
    WORD = "word"
    CHARACTER = "character"


DEFAULT_MODEL = SttModel.SCRIBE_V1

# Upload ceiling for the file part (3.0 GB)
MAX_FILE_SIZE_BYTES = 3 * 1024 * 1024 * 1024

MAX_NUM_SPEAKERS = 32
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0
MAX_SEED = 2_147_483_647

MAX_WEBHOOK_METADATA_BYTES = 16 * 1024
MAX_WEBHOOK_METADATA_DEPTH = 2
