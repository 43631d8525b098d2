"""Client configuration."""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass

from elevenlabs_stt.errors import ArgumentError
from elevenlabs_stt.transport.auth import API_KEY_ENV, resolve_api_key

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_ENDPOINT_PATH = "/speech-to-text"
DEFAULT_TIMEOUT = 60.0

BASE_URL_ENV = "ELEVENLABS_BASE_URL"
TIMEOUT_ENV = "ELEVENLABS_HTTP_TIMEOUT_SECS"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings.

    Attributes:
        api_key: API key sent in the ``xi-api-key`` header
        base_url: Service base URL
        endpoint_path: Path of the speech-to-text endpoint
        timeout: Request timeout in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    endpoint_path: str = DEFAULT_ENDPOINT_PATH
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ArgumentError(
                "API key must be a non-empty string", argument="api_key"
            ).with_hint(f"Pass api_key or set {API_KEY_ENV}")
        if not self.base_url or not self.base_url.strip():
            raise ArgumentError("base_url must not be empty", argument="base_url")
        if self.timeout <= 0:
            raise ArgumentError("timeout must be positive", argument="timeout")

        # Normalize without giving up immutability
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        path = self.endpoint_path
        object.__setattr__(
            self, "endpoint_path", path if path.startswith("/") else f"/{path}"
        )

    @property
    def url(self) -> str:
        """Full endpoint URL."""
        return f"{self.base_url}{self.endpoint_path}"

    @classmethod
    def from_env(cls, api_key: str | None = None) -> ClientConfig:
        """Build a config from environment variables.

        Reads ELEVENLABS_API_KEY (unless `api_key` is given),
        ELEVENLABS_BASE_URL and ELEVENLABS_HTTP_TIMEOUT_SECS.

        Raises:
            ArgumentError: If no API key can be resolved
        """
        key = resolve_api_key(api_key)
        if not key:
            raise ArgumentError(
                "API key required", argument="api_key"
            ).with_hint(f"Set {API_KEY_ENV}")

        timeout = DEFAULT_TIMEOUT
        env_timeout = os.getenv(TIMEOUT_ENV)
        if env_timeout:
            with suppress(ValueError):
                timeout = float(env_timeout)

        return cls(
            api_key=key,
            base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
            timeout=timeout,
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"endpoint_path={self.endpoint_path!r}, timeout={self.timeout!r})"
        )
