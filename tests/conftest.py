"""Root pytest fixtures for elevenlabs-stt tests."""

from __future__ import annotations

import pytest

from elevenlabs_stt import SttClient

TEST_API_KEY = "sk_test_0123456789abcdef0123"
TEST_BASE_URL = "https://stt.example.test/v1"


@pytest.fixture
def audio_bytes() -> bytes:
    """A small fake audio payload."""
    return b"ID3\x03\x00\x00\x00fake-mp3-frames" * 4


@pytest.fixture
def client() -> SttClient:
    """Client pointed at a fake host."""
    return SttClient(TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def endpoint_url() -> str:
    """Full speech-to-text URL for the fake host."""
    return f"{TEST_BASE_URL}/speech-to-text"
