"""
Speech-to-text request state.

`SttRequest` is the immutable value accumulated by the request builder.
Validation and form serialization are pure functions over that value and
never touch the network.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields
from typing import Any
from urllib.parse import urlparse

from elevenlabs_stt.errors import ValidationError
from elevenlabs_stt.types.models import (
    DEFAULT_MODEL,
    MAX_FILE_SIZE_BYTES,
    MAX_NUM_SPEAKERS,
    MAX_SEED,
    MAX_TEMPERATURE,
    MAX_WEBHOOK_METADATA_BYTES,
    MAX_WEBHOOK_METADATA_DEPTH,
    MIN_TEMPERATURE,
    SttModel,
    TimestampsGranularity,
)

_LANGUAGE_CODE_RE = re.compile(r"[A-Za-z]{2,3}")

# Form field order on the wire; `file` is sent as a separate binary part
_FORM_FIELDS: tuple[str, ...] = (
    "language_code",
    "tag_audio_events",
    "num_speakers",
    "timestamps_granularity",
    "diarize",
    "diarization_threshold",
    "cloud_storage_url",
    "webhook",
    "webhook_id",
    "temperature",
    "seed",
    "use_multi_channel",
    "webhook_metadata",
)


@dataclass(frozen=True)
class SttRequest:
    """Options for a single speech-to-text call.

    Every field is optional; unset fields are omitted from the request.
    Exactly one of `file` and `cloud_storage_url` must be set before the
    request is sent.
    """

    file: bytes | None = field(default=None, repr=False)
    cloud_storage_url: str | None = None
    model: SttModel | str | None = None
    language_code: str | None = None
    tag_audio_events: bool | None = None
    num_speakers: int | None = None
    timestamps_granularity: TimestampsGranularity | str | None = None
    diarize: bool | None = None
    diarization_threshold: float | None = None
    webhook: bool | None = None
    webhook_id: str | None = None
    webhook_metadata: str | None = None
    temperature: float | None = None
    seed: int | None = None
    use_multi_channel: bool | None = None

    @property
    def model_id(self) -> str:
        """Model identifier sent on the wire (defaults to scribe_v1)."""
        if self.model is None:
            return DEFAULT_MODEL.value
        return SttModel(self.model).value

    def explicit_fields(self) -> list[str]:
        """Names of the options that were set, excluding `file`."""
        return [
            f.name
            for f in fields(self)
            if f.name != "file" and getattr(self, f.name) is not None
        ]

    def validate(self) -> SttRequest:
        """Validate this request; see :func:`validate_request`."""
        validate_request(self)
        return self

    def to_form_fields(self) -> dict[str, str]:
        """Serialize the set options into multipart text fields.

        `model_id` is always present because the endpoint requires it.
        Booleans are encoded as ``true``/``false``.

        Returns:
            Mapping of form field name to string value
        """
        form: dict[str, str] = {"model_id": self.model_id}
        for name in _FORM_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            form[name] = _encode_form_value(value)
        return form


def _encode_form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (SttModel, TimestampsGranularity)):
        return value.value
    return str(value)


def _json_depth(value: Any) -> int:
    if isinstance(value, dict):
        return 1 + max((_json_depth(v) for v in value.values()), default=0)
    if isinstance(value, list):
        return 1 + max((_json_depth(v) for v in value), default=0)
    return 0


def _validate_source(request: SttRequest) -> None:
    has_file = request.file is not None
    has_url = request.cloud_storage_url is not None

    if not has_file and not has_url:
        raise ValidationError(
            "Either file or cloud_storage_url must be provided",
            field="file",
        ).with_hint("Pass audio bytes to speech_to_text() or call .cloud_storage_url()")
    if has_file and has_url:
        raise ValidationError(
            "Only one of file or cloud_storage_url may be provided",
            field="cloud_storage_url",
        )

    if has_file:
        size = len(request.file)  # type: ignore[arg-type]
        if size == 0:
            raise ValidationError("Audio file is empty", field="file")
        if size > MAX_FILE_SIZE_BYTES:
            raise ValidationError(
                "Audio file exceeds the maximum upload size",
                field="file",
                expected=f"<= {MAX_FILE_SIZE_BYTES} bytes",
                actual=size,
            )
    else:
        parsed = urlparse(request.cloud_storage_url or "")
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValidationError(
                "cloud_storage_url must be an HTTPS URL",
                field="cloud_storage_url",
                actual=request.cloud_storage_url,
            )


def _validate_enums(request: SttRequest) -> None:
    if request.model is not None:
        try:
            SttModel(request.model)
        except ValueError:
            raise ValidationError(
                f"Unknown model: {request.model}",
                field="model_id",
                expected=[m.value for m in SttModel],
                actual=request.model,
            ) from None

    if request.timestamps_granularity is not None:
        try:
            TimestampsGranularity(request.timestamps_granularity)
        except ValueError:
            raise ValidationError(
                f"Unknown timestamps granularity: {request.timestamps_granularity}",
                field="timestamps_granularity",
                expected=[g.value for g in TimestampsGranularity],
                actual=request.timestamps_granularity,
            ) from None

    if request.language_code is not None and not _LANGUAGE_CODE_RE.fullmatch(
        request.language_code
    ):
        raise ValidationError(
            "language_code must be an ISO 639-1 or ISO 639-3 code",
            field="language_code",
            actual=request.language_code,
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_ranges(request: SttRequest) -> None:
    if request.num_speakers is not None:
        n = request.num_speakers
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValidationError(
                "num_speakers must be a positive integer",
                field="num_speakers",
                actual=n,
            )
        if n > MAX_NUM_SPEAKERS:
            raise ValidationError(
                "num_speakers exceeds the supported maximum",
                field="num_speakers",
                expected=f"<= {MAX_NUM_SPEAKERS}",
                actual=n,
            )

    if request.temperature is not None and (
        not _is_number(request.temperature)
        or not MIN_TEMPERATURE <= request.temperature <= MAX_TEMPERATURE
    ):
        raise ValidationError(
            "temperature must be between 0.0 and 2.0",
            field="temperature",
            expected=[MIN_TEMPERATURE, MAX_TEMPERATURE],
            actual=request.temperature,
        )

    if request.seed is not None:
        s = request.seed
        if isinstance(s, bool) or not isinstance(s, int) or not 0 <= s <= MAX_SEED:
            raise ValidationError(
                "seed must be an integer between 0 and 2147483647",
                field="seed",
                actual=s,
            )


def _validate_diarization(request: SttRequest) -> None:
    threshold = request.diarization_threshold
    if threshold is None:
        return
    if request.diarize is not True:
        raise ValidationError(
            "diarization_threshold can only be set when diarize is true",
            field="diarization_threshold",
        )
    if request.num_speakers is not None:
        raise ValidationError(
            "diarization_threshold cannot be combined with num_speakers",
            field="diarization_threshold",
        )
    if not _is_number(threshold) or not 0.0 <= threshold <= 1.0:
        raise ValidationError(
            "diarization_threshold must be between 0.0 and 1.0",
            field="diarization_threshold",
            expected=[0.0, 1.0],
            actual=threshold,
        )


def _validate_webhook(request: SttRequest) -> None:
    if request.webhook is not True:
        for name in ("webhook_id", "webhook_metadata"):
            if getattr(request, name) is not None:
                raise ValidationError(
                    f"{name} can only be set when webhook is true",
                    field=name,
                )
        return

    metadata = request.webhook_metadata
    if metadata is None:
        return
    if len(metadata.encode("utf-8")) > MAX_WEBHOOK_METADATA_BYTES:
        raise ValidationError(
            "webhook_metadata exceeds 16KB",
            field="webhook_metadata",
        )
    try:
        parsed = json.loads(metadata)
    except ValueError:
        raise ValidationError(
            "webhook_metadata must be a JSON object",
            field="webhook_metadata",
        ) from None
    if not isinstance(parsed, dict):
        raise ValidationError(
            "webhook_metadata must be a JSON object",
            field="webhook_metadata",
            actual=type(parsed).__name__,
        )
    if _json_depth(parsed) > MAX_WEBHOOK_METADATA_DEPTH:
        raise ValidationError(
            "webhook_metadata nesting is too deep",
            field="webhook_metadata",
            expected=f"depth <= {MAX_WEBHOOK_METADATA_DEPTH}",
            actual=_json_depth(parsed),
        )


def validate_request(request: SttRequest) -> None:
    """Check every cross-field and range constraint of a request.

    Raises:
        ValidationError: On the first violated constraint
    """
    _validate_source(request)
    _validate_enums(request)
    _validate_ranges(request)
    _validate_diarization(request)
    _validate_webhook(request)
