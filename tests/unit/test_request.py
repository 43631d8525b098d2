"""Tests for request validation and form serialization."""

import json

import pytest

from elevenlabs_stt.errors import ValidationError
from elevenlabs_stt.types import SttModel, SttRequest, TimestampsGranularity, validate_request

AUDIO = b"\x00\x01fake-audio"
URL = "https://bucket.example.com/audio/call.mp3"


def _request(**kwargs) -> SttRequest:
    kwargs.setdefault("file", AUDIO)
    return SttRequest(**kwargs)


class TestSourceValidation:
    """Tests for the file / cloud_storage_url constraint."""

    def test_neither_source(self) -> None:
        """Test missing audio and URL fails."""
        with pytest.raises(ValidationError) as exc_info:
            validate_request(SttRequest())
        assert exc_info.value.field == "file"

    def test_both_sources(self) -> None:
        """Test audio and URL together fails."""
        with pytest.raises(ValidationError, match="Only one"):
            validate_request(SttRequest(file=AUDIO, cloud_storage_url=URL))

    def test_file_only(self) -> None:
        validate_request(SttRequest(file=AUDIO))

    def test_url_only(self) -> None:
        validate_request(SttRequest(cloud_storage_url=URL))

    def test_url_must_be_https(self) -> None:
        with pytest.raises(ValidationError, match="HTTPS"):
            validate_request(SttRequest(cloud_storage_url="http://insecure.example.com/a.mp3"))

    def test_empty_file(self) -> None:
        with pytest.raises(ValidationError, match="empty"):
            validate_request(SttRequest(file=b""))

    def test_file_size_ceiling(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the upload ceiling is enforced (lowered for the test)."""
        monkeypatch.setattr("elevenlabs_stt.types.request.MAX_FILE_SIZE_BYTES", 8)
        validate_request(SttRequest(file=b"12345678"))
        with pytest.raises(ValidationError, match="maximum upload size") as exc_info:
            validate_request(SttRequest(file=b"123456789"))
        assert exc_info.value.actual == 9

    def test_default_ceiling_is_three_gigabytes(self) -> None:
        from elevenlabs_stt.types import MAX_FILE_SIZE_BYTES

        assert MAX_FILE_SIZE_BYTES == 3 * 1024**3


class TestDiarizationValidation:
    """Tests for diarization_threshold constraints."""

    def test_threshold_without_diarize(self) -> None:
        """Test threshold with diarize=false fails."""
        with pytest.raises(ValidationError, match="diarize"):
            validate_request(_request(diarization_threshold=0.5, diarize=False))

    def test_threshold_with_diarize_unset(self) -> None:
        with pytest.raises(ValidationError):
            validate_request(_request(diarization_threshold=0.5))

    def test_threshold_with_num_speakers(self) -> None:
        with pytest.raises(ValidationError, match="num_speakers"):
            validate_request(
                _request(diarization_threshold=0.3, diarize=True, num_speakers=2)
            )

    def test_threshold_valid(self) -> None:
        """Test threshold=0.22 with diarize and no num_speakers passes."""
        validate_request(_request(diarization_threshold=0.22, diarize=True))

    @pytest.mark.parametrize("threshold", [-0.01, 1.01])
    def test_threshold_range(self, threshold: float) -> None:
        with pytest.raises(ValidationError, match="between 0.0 and 1.0"):
            validate_request(_request(diarization_threshold=threshold, diarize=True))

    @pytest.mark.parametrize("threshold", ["0.5", True, False])
    def test_threshold_wrong_type(self, threshold) -> None:
        """Test non-numeric threshold fails validation instead of comparison."""
        with pytest.raises(ValidationError) as exc_info:
            validate_request(_request(diarization_threshold=threshold, diarize=True))
        assert exc_info.value.field == "diarization_threshold"


class TestWebhookValidation:
    """Tests for webhook-dependent options."""

    @pytest.mark.parametrize("webhook", [None, False])
    def test_webhook_id_requires_webhook(self, webhook) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_request(_request(webhook=webhook, webhook_id="wh_1"))
        assert exc_info.value.field == "webhook_id"

    def test_metadata_requires_webhook(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_request(_request(webhook=False, webhook_metadata='{"job": 1}'))
        assert exc_info.value.field == "webhook_metadata"

    def test_webhook_options_valid(self) -> None:
        validate_request(
            _request(webhook=True, webhook_id="wh_1", webhook_metadata='{"job": {"id": 7}}')
        )

    @pytest.mark.parametrize(
        "metadata",
        ["not json", "[1, 2]", '{"a": {"b": {"c": 1}}}'],
    )
    def test_metadata_shape(self, metadata: str) -> None:
        with pytest.raises(ValidationError):
            validate_request(_request(webhook=True, webhook_metadata=metadata))

    def test_metadata_size(self) -> None:
        metadata = json.dumps({"blob": "x" * (16 * 1024)})
        with pytest.raises(ValidationError, match="16KB"):
            validate_request(_request(webhook=True, webhook_metadata=metadata))


class TestRangeValidation:
    """Tests for numeric ranges."""

    @pytest.mark.parametrize("temperature", [0.0, 0.2, 2.0])
    def test_temperature_valid(self, temperature: float) -> None:
        validate_request(_request(temperature=temperature))

    @pytest.mark.parametrize("temperature", [2.1, -0.1, float("nan")])
    def test_temperature_invalid(self, temperature: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_request(_request(temperature=temperature))
        assert exc_info.value.field == "temperature"

    @pytest.mark.parametrize("temperature", [True, "1", [1.0]])
    def test_temperature_wrong_type(self, temperature) -> None:
        """Booleans and strings are not accepted as temperature."""
        with pytest.raises(ValidationError) as exc_info:
            validate_request(_request(temperature=temperature))
        assert exc_info.value.field == "temperature"

    @pytest.mark.parametrize("num_speakers", [0, -3, 33, True])
    def test_num_speakers_invalid(self, num_speakers) -> None:
        with pytest.raises(ValidationError):
            validate_request(_request(num_speakers=num_speakers))

    def test_num_speakers_valid(self) -> None:
        validate_request(_request(num_speakers=32))

    @pytest.mark.parametrize("seed", [-1, 2_147_483_648])
    def test_seed_invalid(self, seed: int) -> None:
        with pytest.raises(ValidationError, match="seed"):
            validate_request(_request(seed=seed))

    def test_seed_bounds_valid(self) -> None:
        validate_request(_request(seed=0))
        validate_request(_request(seed=2_147_483_647))


class TestEnumValidation:
    """Tests for closed enumerations."""

    def test_unknown_model(self) -> None:
        with pytest.raises(ValidationError, match="Unknown model") as exc_info:
            validate_request(_request(model="whisper-1"))
        assert "scribe_v1" in exc_info.value.expected

    def test_model_as_string(self) -> None:
        validate_request(_request(model="scribe_v1_experimental"))

    def test_unknown_granularity(self) -> None:
        with pytest.raises(ValidationError, match="granularity"):
            validate_request(_request(timestamps_granularity="sentence"))

    @pytest.mark.parametrize("code", ["en", "eng", "FR"])
    def test_language_code_valid(self, code: str) -> None:
        validate_request(_request(language_code=code))

    @pytest.mark.parametrize("code", ["", "e", "en-US", "engl", "en\n"])
    def test_language_code_invalid(self, code: str) -> None:
        with pytest.raises(ValidationError):
            validate_request(_request(language_code=code))


class TestFormFields:
    """Tests for multipart field serialization."""

    def test_defaults_only_send_model(self) -> None:
        """Test unset options are omitted entirely."""
        assert _request().to_form_fields() == {"model_id": "scribe_v1"}

    def test_selected_fields_exactly(self) -> None:
        """Test the configured options and nothing else are serialized."""
        request = _request(
            model=SttModel.SCRIBE_V1,
            language_code="en",
            tag_audio_events=True,
            diarize=True,
            diarization_threshold=0.22,
        )
        assert request.to_form_fields() == {
            "model_id": "scribe_v1",
            "language_code": "en",
            "tag_audio_events": "true",
            "diarize": "true",
            "diarization_threshold": "0.22",
        }

    def test_value_encoding(self) -> None:
        request = SttRequest(
            cloud_storage_url=URL,
            timestamps_granularity=TimestampsGranularity.CHARACTER,
            num_speakers=3,
            webhook=False,
            temperature=0.2,
            seed=4000,
            use_multi_channel=False,
        )
        assert request.to_form_fields() == {
            "model_id": "scribe_v1",
            "num_speakers": "3",
            "timestamps_granularity": "character",
            "cloud_storage_url": URL,
            "webhook": "false",
            "temperature": "0.2",
            "seed": "4000",
            "use_multi_channel": "false",
        }

    def test_file_not_in_text_fields(self) -> None:
        assert "file" not in _request().to_form_fields()

    def test_explicit_fields(self) -> None:
        request = _request(diarize=True, seed=1)
        assert request.explicit_fields() == ["diarize", "seed"]

    def test_request_is_frozen(self) -> None:
        from dataclasses import FrozenInstanceError

        request = _request()
        with pytest.raises(FrozenInstanceError):
            request.diarize = True  # type: ignore[misc]

    def test_repr_hides_audio(self) -> None:
        assert "fake-audio" not in repr(_request())
