"""
Telemetry module for elevenlabs-stt.

Provides structured logging with sensitive data masking.
"""

from elevenlabs_stt.telemetry.logger import (
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    SttLogger,
    TextFormatter,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "SensitiveDataMasker",
    "SttLogger",
    "TextFormatter",
    "get_logger",
]
