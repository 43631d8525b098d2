"""Error classification for speech-to-text API responses.

Maps HTTP status codes and error envelopes returned by the remote service
onto a small set of standard error classes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorClass(str, Enum):
    """Standard error classification."""

    INVALID_REQUEST = "invalid_request"
    """Malformed request body, invalid parameters, or unsupported operation."""

    AUTHENTICATION = "authentication"
    """Missing/invalid credentials (API key)."""

    QUOTA_EXHAUSTED = "quota_exhausted"
    """Not enough credits left on the account."""

    PERMISSION_DENIED = "permission_denied"
    """Caller is authenticated but not permitted to access the resource."""

    NOT_FOUND = "not_found"
    """Requested resource not found."""

    RATE_LIMITED = "rate_limited"
    """Throttled due to request limits."""

    REQUEST_TOO_LARGE = "request_too_large"
    """Uploaded payload too large."""

    TIMEOUT = "timeout"
    """Request timed out upstream."""

    SERVER_ERROR = "server_error"
    """Transient server-side failure (5xx)."""

    OVERLOADED = "overloaded"
    """Service overloaded / temporarily unavailable."""

    OTHER = "other"
    """Unknown classification."""


_DEFAULT_STATUS_MAPPING: dict[int, ErrorClass] = {
    400: ErrorClass.INVALID_REQUEST,
    401: ErrorClass.AUTHENTICATION,
    402: ErrorClass.QUOTA_EXHAUSTED,
    403: ErrorClass.PERMISSION_DENIED,
    404: ErrorClass.NOT_FOUND,
    408: ErrorClass.TIMEOUT,
    413: ErrorClass.REQUEST_TOO_LARGE,
    422: ErrorClass.INVALID_REQUEST,
    429: ErrorClass.RATE_LIMITED,
    500: ErrorClass.SERVER_ERROR,
    502: ErrorClass.SERVER_ERROR,
    503: ErrorClass.OVERLOADED,
    504: ErrorClass.TIMEOUT,
}


def classify_http_error(
    status_code: int,
    body: dict[str, Any] | None = None,
) -> ErrorClass:
    """Classify an HTTP error into a standard error class.

    Args:
        status_code: HTTP status code
        body: Response body (parsed JSON)

    Returns:
        ErrorClass representing the error type
    """
    # The service reports exhausted credits as 401 with a quota status
    if status_code in (401, 429) and body:
        status_hint = _extract_detail_status(body) or ""
        if "quota" in status_hint.lower():
            return ErrorClass.QUOTA_EXHAUSTED

    if status_code in _DEFAULT_STATUS_MAPPING:
        return _DEFAULT_STATUS_MAPPING[status_code]

    if 400 <= status_code < 500:
        return ErrorClass.INVALID_REQUEST
    if 500 <= status_code < 600:
        return ErrorClass.SERVER_ERROR

    return ErrorClass.OTHER


def _extract_detail_status(body: dict[str, Any]) -> str | None:
    detail = body.get("detail")
    if isinstance(detail, dict):
        status = detail.get("status")
        if isinstance(status, str):
            return status
    return None


def extract_error_message(body: Any) -> str | None:
    """Extract error message from response body.

    Supports the envelope formats seen from the service:
    - {"detail": {"status": "...", "message": "..."}}
    - {"detail": "..."} or {"detail": [{"msg": "..."}]}
    - {"error": {"message": "..."}} / {"message": "..."}

    Args:
        body: Response body (parsed JSON)

    Returns:
        Error message if found, None otherwise
    """
    if not isinstance(body, dict) or not body:
        return None

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, str):
            return detail
        if isinstance(detail, dict):
            msg = detail.get("message")
            if isinstance(msg, str):
                return msg
        if isinstance(detail, list) and detail:
            first = detail[0]
            if isinstance(first, dict) and isinstance(first.get("msg"), str):
                return first["msg"]
            return str(first)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            msg = error.get("message")
            if isinstance(msg, str):
                return msg
        elif isinstance(error, str):
            return error

    msg = body.get("message")
    if isinstance(msg, str):
        return msg

    return None
