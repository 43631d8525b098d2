"""
Client module for elevenlabs-stt.

Provides the SttClient handle and the fluent SpeechToTextBuilder.
"""

from elevenlabs_stt.client.builder import SpeechToTextBuilder
from elevenlabs_stt.client.core import SttClient

__all__ = [
    "SpeechToTextBuilder",
    "SttClient",
]
