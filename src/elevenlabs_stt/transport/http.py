"""HTTP transport for the speech-to-text endpoint.

Sends one multipart POST per call using httpx and maps the outcome onto
the library's error types:
- connection/timeout/other httpx failures -> TransportError
- non-2xx responses -> ApiError (or a subclass)
- 2xx responses with an unparseable body -> DecodeError
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import httpx
import pydantic

from elevenlabs_stt.errors import ApiError, DecodeError, TransportError
from elevenlabs_stt.telemetry import get_logger
from elevenlabs_stt.transport.auth import get_auth_header
from elevenlabs_stt.types.response import SttResponse

if TYPE_CHECKING:
    from elevenlabs_stt.config import ClientConfig


_DEFAULT_CONNECT_TIMEOUT = 10.0
_FILE_NAME = "file"
_FILE_CONTENT_TYPE = "application/octet-stream"

_UA_VERSION: str | None = None

logger = get_logger("elevenlabs_stt.transport")


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            from importlib.metadata import version

            _UA_VERSION = version("elevenlabs-stt-python")
        except Exception:
            _UA_VERSION = "0.1.0"
    return _UA_VERSION


def build_multipart(
    fields: dict[str, str], file: bytes | None = None
) -> list[tuple[str, tuple[Any, ...]]]:
    """Build httpx multipart parts.

    Text fields become parts without a filename so the body is
    multipart/form-data even when no audio is uploaded.
    """
    parts: list[Any] = [(name, (None, value)) for name, value in fields.items()]
    if file is not None:
        parts.append(("file", (_FILE_NAME, file, _FILE_CONTENT_TYPE)))
    return parts


class HttpTransport:
    """HTTP transport for API communication.

    Holds only read-only configuration. When no `http_client` is given a
    short-lived `httpx.AsyncClient` is opened per request, so one transport
    can be shared by concurrent tasks.

    Example:
        >>> transport = HttpTransport(config)
        >>> response = await transport.post_form({"model_id": "scribe_v1"}, audio)
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            config: Client configuration
            http_client: Caller-owned client to send requests with (not closed here)
        """
        self._config = config
        self._http_client = http_client

    @property
    def url(self) -> str:
        return self._config.url

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": f"elevenlabs-stt-python/{_get_ua_version()}",
        }
        headers.update(get_auth_header(self._config.api_key))
        return headers

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self._config.timeout,
            connect=min(_DEFAULT_CONNECT_TIMEOUT, self._config.timeout),
        )

    async def _send(
        self, client: httpx.AsyncClient, files: list[Any]
    ) -> httpx.Response:
        return await client.post(
            self.url,
            files=files,
            headers=self._build_headers(),
            timeout=self._timeout(),
        )

    async def post_form(
        self, fields: dict[str, str], file: bytes | None = None
    ) -> httpx.Response:
        """POST a multipart form to the endpoint.

        Args:
            fields: Text form fields
            file: Optional audio bytes sent as the `file` part

        Returns:
            HTTP response with a 2xx status

        Raises:
            TransportError: On network/connection errors
            ApiError: On non-2xx responses
        """
        files = build_multipart(fields, file)
        started = time.perf_counter()
        logger.debug(
            "Sending speech-to-text request",
            url=self.url,
            fields=sorted(fields),
            file_bytes=len(file) if file is not None else 0,
        )

        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, files)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, files)
        except httpx.ConnectError as e:
            logger.warning("Connection failed", url=self.url, error=str(e))
            raise TransportError(
                f"Connection failed: {e}", url=self.url, cause=e
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Request timed out", url=self.url, error=str(e))
            raise TransportError(
                f"Request timed out: {e}", url=self.url, cause=e
            ) from e
        except httpx.HTTPError as e:
            logger.warning("HTTP error", url=self.url, error=str(e))
            raise TransportError(f"HTTP error: {e}", url=self.url, cause=e) from e

        latency_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            "Speech-to-text response received",
            status_code=response.status_code,
            latency_ms=round(latency_ms, 1),
        )

        if not response.is_success:
            error = ApiError.from_response(
                status_code=response.status_code,
                text=response.text,
                headers={k.lower(): v for k, v in response.headers.items()},
            )
            logger.warning(
                "Speech-to-text request rejected",
                status_code=response.status_code,
                error_class=error.error_class.value,
            )
            raise error

        return response


def parse_response(response: httpx.Response) -> SttResponse:
    """Decode a 2xx response body into an SttResponse.

    Raises:
        DecodeError: If the body is not JSON or does not match the schema
    """
    text = response.text
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(
            f"Failed to parse response: {e}",
            status_code=response.status_code,
            raw_body=text,
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(data).__name__}",
            status_code=response.status_code,
            raw_body=text,
        )

    try:
        return SttResponse.model_validate(data)
    except pydantic.ValidationError as e:
        raise DecodeError(
            f"Response does not match the transcription schema: {e}",
            status_code=response.status_code,
            raw_body=text,
            cause=e,
        ) from e
