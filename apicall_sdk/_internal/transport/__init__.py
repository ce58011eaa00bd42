"""Transport layer: the operations the dispatchers route to."""

from apicall_sdk._internal.transport.client import (
    HttpxTransport,
    Transport,
    get_transport,
)
from apicall_sdk._internal.transport.models import HTTP_VERBS, ApiResponse, HttpVerb

__all__ = [
    "HttpxTransport",
    "Transport",
    "get_transport",
    "ApiResponse",
    "HttpVerb",
    "HTTP_VERBS",
]
