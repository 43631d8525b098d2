"""
Speech-to-text response types.

Mirrors the JSON envelope returned by the endpoint. Unknown fields are
ignored so that additions on the service side do not break parsing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WordCharacter(BaseModel):
    """Character-level timestamp inside a word."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    start: float | None = None
    end: float | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value


class TranscriptionWord(BaseModel):
    """A word, spacing or audio event with its timing information."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    text: str = ""
    start: float | None = None
    end: float | None = None
    word_type: str | None = Field(default=None, alias="type")
    speaker_id: str | None = None
    logprob: float | None = None
    channel_index: int | None = None
    characters: list[WordCharacter] | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @property
    def is_word(self) -> bool:
        return self.word_type in (None, "word")


class SpeakerSegment(BaseModel):
    """Contiguous run of words attributed to one speaker."""

    speaker_id: str
    start: float | None = None
    end: float | None = None
    text: str = ""
    words: list[TranscriptionWord] = Field(default_factory=list)


class SttResponse(BaseModel):
    """Transcription result.

    For webhook requests the service answers early with an acknowledgement;
    in that case `text` is empty and `transcription_id`/`message` are set.
    Multi-channel requests return one transcript per channel in
    `transcripts`.
    """

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    language_code: str | None = None
    language_probability: float | None = None
    words: list[TranscriptionWord] | None = None
    channel_index: int | None = None
    transcripts: list[SttResponse] | None = None
    transcription_id: str | None = None
    message: str | None = None
    request_id: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value):
        # null text reads as an empty transcript
        return "" if value is None else value

    @property
    def is_webhook_ack(self) -> bool:
        """True when the transcription will be delivered via webhook."""
        return not self.text and self.words is None and self.transcripts is None and (
            self.transcription_id is not None or self.request_id is not None
        )

    def speaker_segments(self) -> list[SpeakerSegment]:
        """Group diarized words into per-speaker segments.

        Spacing and audio events are attached to the segment they fall in.
        Words without a speaker_id are skipped.

        Returns:
            Segments in transcript order; empty if diarization was not requested
        """
        segments: list[SpeakerSegment] = []
        for word in self.words or []:
            if word.speaker_id is None:
                continue
            current = segments[-1] if segments else None
            if current is None or current.speaker_id != word.speaker_id:
                current = SpeakerSegment(speaker_id=word.speaker_id, start=word.start)
                segments.append(current)
            current.words.append(word)
            current.text += word.text
            if word.end is not None:
                current.end = word.end

        for segment in segments:
            segment.text = segment.text.strip()
        return segments
