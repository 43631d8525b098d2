"""
Fluent builder for speech-to-text requests.

Every setter returns a new builder; the receiver is never modified, so a
partially configured builder can be reused as a template.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from elevenlabs_stt.types.request import SttRequest

if TYPE_CHECKING:
    from elevenlabs_stt.client.core import SttClient
    from elevenlabs_stt.types.models import SttModel, TimestampsGranularity
    from elevenlabs_stt.types.response import SttResponse


class SpeechToTextBuilder:
    """Builder for a speech-to-text call.

    Example:
        >>> response = await (
        ...     client.speech_to_text(audio)
        ...     .model(SttModel.SCRIBE_V1)
        ...     .language_code("en")
        ...     .diarize(True)
        ...     .execute()
        ... )
    """

    __slots__ = ("_client", "_request")

    def __init__(self, client: SttClient, request: SttRequest | None = None) -> None:
        self._client = client
        self._request = request or SttRequest()

    def _with(self, **changes: Any) -> SpeechToTextBuilder:
        return SpeechToTextBuilder(self._client, replace(self._request, **changes))

    @property
    def request(self) -> SttRequest:
        """Current (unvalidated) request state."""
        return self._request

    def file(self, audio: bytes | None) -> SpeechToTextBuilder:
        """Set the audio bytes to upload."""
        return self._with(file=bytes(audio) if audio is not None else None)

    def cloud_storage_url(self, url: str) -> SpeechToTextBuilder:
        """Transcribe a remote HTTPS file instead of uploading bytes."""
        return self._with(cloud_storage_url=url)

    def model(self, model: SttModel | str) -> SpeechToTextBuilder:
        """Set the transcription model."""
        return self._with(model=model)

    def language_code(self, language_code: str) -> SpeechToTextBuilder:
        """Force the transcription language (ISO 639-1 or 639-3)."""
        return self._with(language_code=language_code)

    def tag_audio_events(self, enabled: bool) -> SpeechToTextBuilder:
        """Tag events like (laughter) or (footsteps) in the transcript."""
        return self._with(tag_audio_events=enabled)

    def num_speakers(self, num_speakers: int) -> SpeechToTextBuilder:
        """Set the maximum number of speakers in the audio."""
        return self._with(num_speakers=num_speakers)

    def timestamps_granularity(
        self, granularity: TimestampsGranularity | str
    ) -> SpeechToTextBuilder:
        return self._with(timestamps_granularity=granularity)

    def diarize(self, enabled: bool) -> SpeechToTextBuilder:
        """Annotate which speaker is talking."""
        return self._with(diarize=enabled)

    def diarization_threshold(self, threshold: float) -> SpeechToTextBuilder:
        """Set the diarization threshold.

        Only valid with ``diarize(True)`` and without ``num_speakers``.
        """
        return self._with(diarization_threshold=threshold)

    def webhook(self, enabled: bool) -> SpeechToTextBuilder:
        """Deliver the result to configured webhooks instead of the response."""
        return self._with(webhook=enabled)

    def webhook_id(self, webhook_id: str) -> SpeechToTextBuilder:
        return self._with(webhook_id=webhook_id)

    def webhook_metadata(self, metadata: str) -> SpeechToTextBuilder:
        """Attach a JSON object string to the webhook payload."""
        return self._with(webhook_metadata=metadata)

    def temperature(self, temperature: float) -> SpeechToTextBuilder:
        return self._with(temperature=temperature)

    def seed(self, seed: int) -> SpeechToTextBuilder:
        return self._with(seed=seed)

    def use_multi_channel(self, enabled: bool) -> SpeechToTextBuilder:
        """Transcribe each channel independently (one speaker per channel)."""
        return self._with(use_multi_channel=enabled)

    def build_request(self) -> SttRequest:
        """Validate and return the request without sending it.

        Raises:
            ValidationError: If the options violate a constraint
        """
        return self._request.validate()

    async def execute(self) -> SttResponse:
        """Execute the speech-to-text request.

        Returns:
            Parsed transcription

        Raises:
            ValidationError: Before any network call, on invalid options
            TransportError: On connection or timeout failures
            ApiError: On non-2xx responses
            DecodeError: On 2xx responses with an unparseable body
        """
        return await self._client._execute_stt(self.build_request())

    def __repr__(self) -> str:
        return f"SpeechToTextBuilder({self._request!r})"
