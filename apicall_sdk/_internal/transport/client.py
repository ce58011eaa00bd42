"""httpx-backed transport used by the dispatchers."""

import os
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from apicall_sdk._internal.http import DEFAULT_TIMEOUT_MS, create_http_client
from apicall_sdk._internal.log import log_debug
from apicall_sdk._internal.redaction import redact_headers
from apicall_sdk._internal.transport.models import ApiResponse
from apicall_sdk.exceptions import ApiCallConfigError, ApiCallHTTPError


class Transport(Protocol):
    """Operations a dispatcher needs from a transport.

    Each operation performs one request and returns an object exposing `data`.
    """

    async def get(
        self,
        endpoint: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> Any: ...

    async def post(
        self,
        endpoint: str,
        body: Any,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> Any: ...

    async def put(
        self,
        endpoint: str,
        body: Any,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> Any: ...

    async def remove(
        self,
        endpoint: str,
        body: Any,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> Any: ...

    async def patch(
        self,
        endpoint: str,
        body: Any,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> Any: ...


class HttpxTransport:
    """Transport that sends each request through a fresh httpx.AsyncClient.

    Bodies are sent as JSON, a non-2xx status raises ApiCallHTTPError, and
    httpx errors (timeouts, connection failures) propagate unchanged. Nothing
    is retried.

    Use `HttpxTransport.from_env()` to create a transport from environment
    variables.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Base URL that relative endpoints are joined to.
            timeout_ms: Request timeout in milliseconds.
        """
        self._base_url = base_url
        self._timeout_ms = timeout_ms

    @classmethod
    def from_env(cls) -> "HttpxTransport":
        """Create a transport from environment variables.

        Required environment variables:
            APICALL_BASE_URL: The backend API base URL.

        Optional environment variables:
            APICALL_TIMEOUT_MS: Request timeout in milliseconds.

        Returns:
            A configured HttpxTransport.

        Raises:
            ApiCallConfigError: If APICALL_BASE_URL is not set.
            ValueError: If APICALL_TIMEOUT_MS is not a valid integer.
        """
        base_url = os.environ.get("APICALL_BASE_URL")
        if not base_url:
            raise ApiCallConfigError("APICALL_BASE_URL is not set")

        timeout_ms = int(os.environ.get("APICALL_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(base_url=base_url, timeout_ms=timeout_ms)

    @property
    def base_url(self) -> str | None:
        return self._base_url

    async def get(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return await self._request("GET", endpoint, params=params, headers=headers)

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return await self._request(
            "POST", endpoint, body=body, params=params, headers=headers
        )

    async def put(
        self,
        endpoint: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return await self._request(
            "PUT", endpoint, body=body, params=params, headers=headers
        )

    async def remove(
        self,
        endpoint: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Send a DELETE request; a non-empty body is sent as JSON."""
        return await self._request(
            "DELETE", endpoint, body=body or None, params=params, headers=headers
        )

    async def patch(
        self,
        endpoint: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return await self._request(
            "PATCH", endpoint, body=body, params=params, headers=headers
        )

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Send one request and wrap the response."""
        log_debug(f"{method} {endpoint} headers={redact_headers(headers)}")

        async with create_http_client(
            timeout_ms=self._timeout_ms,
            base_url=self._base_url,
        ) as client:
            response = await client.request(
                method,
                endpoint,
                params=dict(params) if params else None,
                headers=dict(headers) if headers else None,
                json=body,
            )

        data = _decode(response)
        if response.status_code < 200 or response.status_code >= 300:
            log_debug(f"{method} {endpoint} failed with status {response.status_code}")
            raise ApiCallHTTPError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                data=data,
            )

        log_debug(f"{method} {endpoint} succeeded with status {response.status_code}")
        return ApiResponse(
            data=data,
            status_code=response.status_code,
            headers=dict(response.headers),
        )


def _decode(response: httpx.Response) -> Any:
    """Decode a response body: JSON when possible, text otherwise, None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def get_transport() -> HttpxTransport:
    """Get a transport configured from environment variables.

    Returns:
        A configured HttpxTransport instance.
    """
    return HttpxTransport.from_env()
