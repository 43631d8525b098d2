#!/usr/bin/env python3
"""
Basic speech-to-text example.

Usage:
    export ELEVENLABS_API_KEY="your-api-key"
    python examples/basic_stt.py inputs/speech.mp3
"""

import asyncio
import sys
from pathlib import Path

from elevenlabs_stt import SttClient


async def main(path: str) -> None:
    """Transcribe one local file with default options."""
    client = SttClient.from_env()

    audio = Path(path).read_bytes()
    response = await client.speech_to_text(audio).execute()

    print(f"Transcription: {response.text}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "inputs/speech.mp3"))
