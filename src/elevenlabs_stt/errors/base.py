"""Base error classes for elevenlabs-stt.

Provides a layered error hierarchy:
- SttError: Base class for all library errors
- ArgumentError: Invalid client construction
- ValidationError: Request builder constraint violations (raised before any I/O)
- TransportError: HTTP/network errors
- ApiError: Non-2xx responses from the remote API
- DecodeError: 2xx responses whose body cannot be parsed
"""

from __future__ import annotations

import contextlib
import json
from dataclasses import dataclass, field
from typing import Any

from elevenlabs_stt.errors.classification import (
    ErrorClass,
    classify_http_error,
    extract_error_message,
)


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic field (e.g., 'diarization_threshold')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'validation', 'transport', 'remote')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class SttError(Exception):
    """Base class for all elevenlabs-stt errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> SttError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class ArgumentError(SttError):
    """Invalid argument passed while constructing a client."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        argument: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="argument")
        if argument:
            ctx.field_path = argument
        super().__init__(message, ctx)
        self.argument = argument


class ValidationError(SttError):
    """Request builder constraint violation.

    Raised when:
    - Neither or both of file and cloud_storage_url are set
    - A dependent option is set without the option it depends on
    - A numeric option is out of range
    - An enumerated option has an unknown value
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        field: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        ctx = context or ErrorContext(source="validation")
        if field:
            ctx.field_path = field
        if expected is not None:
            ctx.details["expected"] = expected
        if actual is not None:
            ctx.details["actual"] = actual
        super().__init__(message, ctx)
        self.field = field
        self.expected = expected
        self.actual = actual


class TransportError(SttError):
    """Error during HTTP transport.

    Raised when:
    - Network connection failure
    - Timeout
    - Any other httpx transport failure
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class ApiError(SttError):
    """Non-2xx response from the remote API.

    Attributes:
        status_code: HTTP status code
        message: Error message extracted from the body, or the raw body
        raw_body: Raw response text
        error_class: Standardized error classification
        request_id: Request ID reported by the service, if any
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        raw_body: str = "",
        error_class: ErrorClass | None = None,
        request_id: str | None = None,
    ) -> None:
        self.error_class = error_class or classify_http_error(status_code)
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        ctx.details["error_class"] = self.error_class.value
        if request_id:
            ctx.details["request_id"] = request_id
        super().__init__(f"API error ({status_code}): {message}", ctx)
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body
        self.request_id = request_id

    @classmethod
    def from_response(
        cls,
        status_code: int,
        text: str,
        headers: dict[str, str] | None = None,
    ) -> ApiError:
        """Create the matching ApiError subclass from an HTTP response.

        Args:
            status_code: HTTP status code
            text: Raw response body
            headers: Response headers (lower-cased keys)

        Returns:
            ApiError, or one of its subclasses for well-known statuses
        """
        body: Any = None
        with contextlib.suppress(ValueError):
            body = json.loads(text) if text else None

        error_class = classify_http_error(
            status_code, body if isinstance(body, dict) else None
        )
        message = extract_error_message(body) or text or f"HTTP {status_code}"

        headers = headers or {}
        request_id = headers.get("x-request-id") or headers.get("request-id")

        kwargs: dict[str, Any] = {
            "status_code": status_code,
            "raw_body": text,
            "error_class": error_class,
            "request_id": request_id,
        }

        if error_class is ErrorClass.QUOTA_EXHAUSTED:
            return QuotaExceededError(message, **kwargs)
        if error_class is ErrorClass.AUTHENTICATION:
            return AuthenticationError(message, **kwargs)
        if error_class is ErrorClass.RATE_LIMITED:
            retry_after = None
            retry_after_str = headers.get("retry-after")
            if retry_after_str:
                with contextlib.suppress(ValueError):
                    retry_after = float(retry_after_str)
            return RateLimitError(message, retry_after=retry_after, **kwargs)
        return cls(message, **kwargs)


class AuthenticationError(ApiError):
    """Invalid API key or authentication failed (401)."""


class QuotaExceededError(ApiError):
    """Not enough credits left to run the transcription."""


class RateLimitError(ApiError):
    """Rate limit exceeded (429).

    Attributes:
        retry_after: Suggested retry delay in seconds (from header)
    """

    def __init__(
        self,
        message: str,
        *,
        retry_after: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
        if retry_after is not None:
            self.context.details["retry_after"] = retry_after


class DecodeError(SttError):
    """2xx response whose body is not valid JSON or does not match the schema."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        status_code: int | None = None,
        raw_body: str = "",
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="decode")
        if status_code is not None:
            ctx.details["status_code"] = status_code
        super().__init__(message, ctx)
        self.status_code = status_code
        self.raw_body = raw_body
        self.__cause__ = cause
