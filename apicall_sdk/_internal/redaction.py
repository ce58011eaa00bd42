"""Redaction of sensitive request values before they reach diagnostics."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api_key",
    "token",
    "access_token",
    "accesstoken",
    "refresh_token",
    "password",
    "secret",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of headers with sensitive values masked.

    Key matching is case-insensitive. The input mapping is never mutated.

    Args:
        headers: Header (or param) mapping to redact. None is treated as empty.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    if not headers:
        return {}
    return {
        key: REDACTED_VALUE if _is_sensitive(key) else value
        for key, value in headers.items()
    }


def _is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in REDACT_KEYS
