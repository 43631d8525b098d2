"""
Speech-to-text client.

The client holds only read-only configuration and can be shared across
concurrent tasks. Requests are created with :meth:`SttClient.speech_to_text`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from elevenlabs_stt.client.builder import SpeechToTextBuilder
from elevenlabs_stt.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from elevenlabs_stt.telemetry import get_logger
from elevenlabs_stt.transport.http import HttpTransport, parse_response
from elevenlabs_stt.types.request import SttRequest

if TYPE_CHECKING:
    import httpx

    from elevenlabs_stt.types.response import SttResponse

logger = get_logger("elevenlabs_stt.client")


class SttClient:
    """Client for the ElevenLabs speech-to-text endpoint.

    Example:
        >>> client = SttClient("your-api-key")
        >>> response = await client.speech_to_text(audio).execute()
        >>> print(response.text)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: API key (must not be empty)
            base_url: Service base URL
            timeout: Request timeout in seconds
            http_client: Optional caller-owned httpx client

        Raises:
            ArgumentError: If api_key is empty or whitespace
        """
        self._init(
            ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout),
            http_client,
        )

    def _init(
        self, config: ClientConfig, http_client: httpx.AsyncClient | None
    ) -> None:
        self._config = config
        self._transport = HttpTransport(config, http_client=http_client)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> SttClient:
        """Create a client from an existing configuration."""
        client = cls.__new__(cls)
        client._init(config, http_client)
        return client

    @classmethod
    def from_env(
        cls,
        api_key: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> SttClient:
        """Create a client from ELEVENLABS_* environment variables."""
        return cls.from_config(ClientConfig.from_env(api_key), http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def speech_to_text(self, audio: bytes | None = None) -> SpeechToTextBuilder:
        """Start building a speech-to-text request.

        Args:
            audio: Audio bytes to upload, or None to use cloud_storage_url

        Returns:
            A new request builder
        """
        builder = SpeechToTextBuilder(self)
        if audio is not None:
            builder = builder.file(audio)
        return builder

    async def _execute_stt(self, request: SttRequest) -> SttResponse:
        """Send a validated request and parse the result."""
        fields = request.to_form_fields()
        logger.debug(
            "Executing speech-to-text request",
            model=request.model_id,
            options=request.explicit_fields(),
        )
        response = await self._transport.post_form(fields, request.file)
        result = parse_response(response)
        logger.debug(
            "Transcription parsed",
            chars=len(result.text),
            words=len(result.words or []),
        )
        return result

    def __repr__(self) -> str:
        return f"SttClient(base_url={self._config.base_url!r})"
