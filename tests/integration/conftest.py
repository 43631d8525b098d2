"""
Integration test helper utilities.

Shared fixtures for tests that run the full builder -> transport -> parse
path against pytest-httpx mocked responses.
"""

from __future__ import annotations

import re

import httpx
import pytest


def mock_transcription_response(
    text: str = "Hello world.",
    *,
    diarized: bool = False,
    language_code: str = "en",
) -> dict:
    """Create a mock speech-to-text response body."""
    speakers = ["speaker_0", "speaker_0", "speaker_1"] if diarized else [None] * 3
    tokens = text.split(" ")
    words = []
    t = 0.0
    for i, token in enumerate(tokens[:3]):
        word = {"text": token, "start": t, "end": t + 0.4, "type": "word", "logprob": -0.05}
        if speakers[i] is not None:
            word["speaker_id"] = speakers[i]
        words.append(word)
        t += 0.5
    return {
        "language_code": language_code,
        "language_probability": 0.99,
        "text": text,
        "words": words,
        "additional_formats": None,
    }


def multipart_field_names(request: httpx.Request) -> list[str]:
    """Names of all parts in a multipart request body, in order."""
    return [m.decode() for m in re.findall(rb'form-data; name="([^"]+)"', request.read())]


def multipart_field_value(request: httpx.Request, name: str) -> str | None:
    """Value of a text part in a multipart request body."""
    pattern = rb'name="' + re.escape(name.encode()) + rb'"\r\n\r\n(.*?)\r\n--'
    match = re.search(pattern, request.read(), re.DOTALL)
    return match.group(1).decode() if match else None


@pytest.fixture
def transcription_body() -> dict:
    return mock_transcription_response("Hi there friend", diarized=True)
