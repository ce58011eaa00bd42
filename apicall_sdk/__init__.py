"""apicall SDK for Python.

Helpers for server-side request handlers that call a backend API.

Public API:
    call_api - Dispatch a call by verb; failures propagate
    call_auth_api - Dispatch with the session's bearer token; failures are
        logged and None is returned
    HttpxTransport - Default httpx-backed transport
"""

from apicall_sdk._internal.dispatch import (
    ACCESS_TOKEN_COOKIE,
    CookieStore,
    bearer_header,
    call_api,
    call_auth_api,
    read_access_token,
)
from apicall_sdk._internal.transport import (
    ApiResponse,
    HttpVerb,
    HttpxTransport,
    Transport,
    get_transport,
)
from apicall_sdk._version import __version__

__all__ = [
    "__version__",
    "call_api",
    "call_auth_api",
    "bearer_header",
    "read_access_token",
    "CookieStore",
    "ACCESS_TOKEN_COOKIE",
    "HttpxTransport",
    "Transport",
    "get_transport",
    "ApiResponse",
    "HttpVerb",
]
