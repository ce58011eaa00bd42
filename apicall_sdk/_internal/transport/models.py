"""Models shared by the transport and the dispatchers."""

from typing import Any, Literal

from pydantic import BaseModel, Field

# HTTP verbs a caller may request
HttpVerb = Literal["get", "post", "put", "delete", "patch"]

HTTP_VERBS: tuple[str, ...] = ("get", "post", "put", "delete", "patch")


class ApiResponse(BaseModel):
    """Response envelope returned by a transport operation.

    Dispatchers only read `data`; the rest is kept for callers that use the
    transport directly.
    """

    data: Any = None
    status_code: int = 200
    headers: dict[str, str] = Field(default_factory=dict)
