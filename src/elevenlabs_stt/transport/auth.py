"""
API key resolution utilities.

Resolves API keys from multiple sources:
1. Explicit value
2. Environment variable
3. System keyring (optional)
"""

from __future__ import annotations

import os

API_KEY_ENV = "ELEVENLABS_API_KEY"
API_KEY_HEADER = "xi-api-key"
KEYRING_SERVICE = "elevenlabs"


def resolve_api_key(
    explicit_key: str | None = None,
    env_var: str = API_KEY_ENV,
) -> str | None:
    """Resolve the API key.

    Resolution order:
    1. Explicit key if provided
    2. Environment variable (ELEVENLABS_API_KEY by default)
    3. System keyring (if available)

    Args:
        explicit_key: Explicitly provided API key
        env_var: Environment variable to read

    Returns:
        Resolved API key or None if not found
    """
    if explicit_key and explicit_key.strip():
        return explicit_key

    key = os.getenv(env_var)
    if key and key.strip():
        return key

    return _try_keyring()


def _try_keyring() -> str | None:
    """Try to get the API key from the system keyring."""
    try:
        import keyring

        return keyring.get_password(KEYRING_SERVICE, "api_key") or None
    except ImportError:
        # keyring not installed
        return None
    except Exception:
        # Keyring backend error (common in containers, WSL, etc.)
        return None


def get_auth_header(api_key: str) -> dict[str, str]:
    """Get the authentication header for the speech-to-text endpoint."""
    return {API_KEY_HEADER: api_key}
