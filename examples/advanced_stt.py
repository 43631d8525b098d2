#!/usr/bin/env python3
"""
Speech-to-text with diarization and sampling options.

Usage:
    export ELEVENLABS_API_KEY="your-api-key"
    python examples/advanced_stt.py inputs/speech.mp3
"""

import asyncio
import sys
from pathlib import Path

from elevenlabs_stt import SttClient, SttError, SttModel, TimestampsGranularity
from elevenlabs_stt.telemetry import LogLevel, SttLogger


async def main(path: str) -> None:
    """Transcribe a file and print per-speaker segments."""
    SttLogger.configure(level=LogLevel.DEBUG, format="text")
    client = SttClient.from_env()

    audio = Path(path).read_bytes()
    try:
        response = await (
            client.speech_to_text(audio)
            .model(SttModel.SCRIBE_V1)
            .language_code("en")
            .tag_audio_events(True)
            .timestamps_granularity(TimestampsGranularity.WORD)
            .diarize(True)
            .diarization_threshold(0.22)
            .webhook(False)
            .temperature(0.2)
            .seed(4000)
            .use_multi_channel(False)
            .execute()
        )
    except SttError as e:
        print(f"Transcription failed: {e}")
        return

    print(f"Language: {response.language_code} ({response.language_probability})")
    for segment in response.speaker_segments():
        print(f"[{segment.start or 0.0:7.2f}s] {segment.speaker_id}: {segment.text}")

    # Cloud-hosted audio instead of an upload
    remote = (
        client.speech_to_text()
        .cloud_storage_url("https://storage.example.com/audio/speech.mp3")
        .build_request()
    )
    print(f"Remote request fields: {sorted(remote.to_form_fields())}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "inputs/speech.mp3"))
