"""Verb dispatchers for outbound backend API calls.

Two error policies live here and are kept apart on purpose:

- `call_api` propagates: any transport failure reaches the caller unchanged.
- `call_auth_api` absorbs: transport failures are logged once and the call
  returns None, so callers cannot tell "no data" from "call failed".
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from apicall_sdk._internal.dispatch.auth import (
    CookieStore,
    bearer_header,
    read_access_token,
)
from apicall_sdk._internal.log import log_debug, log_error
from apicall_sdk._internal.transport.client import Transport, get_transport
from apicall_sdk._internal.transport.models import HTTP_VERBS, HttpVerb

# (transport, endpoint, params, body, headers) -> pending response
Route = Callable[[Transport, str, Mapping[str, Any], Any, Mapping[str, str]], Awaitable[Any]]

# =============================================================================
# Routing Tables
# =============================================================================


def _get(
    transport: Transport,
    endpoint: str,
    params: Mapping[str, Any],
    body: Any,
    headers: Mapping[str, str],
) -> Awaitable[Any]:
    return transport.get(endpoint, params, headers)


def _post(
    transport: Transport,
    endpoint: str,
    params: Mapping[str, Any],
    body: Any,
    headers: Mapping[str, str],
) -> Awaitable[Any]:
    return transport.post(endpoint, body, params, headers)


def _put(
    transport: Transport,
    endpoint: str,
    params: Mapping[str, Any],
    body: Any,
    headers: Mapping[str, str],
) -> Awaitable[Any]:
    return transport.put(endpoint, body, params, headers)


def _remove(
    transport: Transport,
    endpoint: str,
    params: Mapping[str, Any],
    body: Any,
    headers: Mapping[str, str],
) -> Awaitable[Any]:
    return transport.remove(endpoint, body, params, headers)


def _patch(
    transport: Transport,
    endpoint: str,
    params: Mapping[str, Any],
    body: Any,
    headers: Mapping[str, str],
) -> Awaitable[Any]:
    return transport.patch(endpoint, body, params, headers)


ROUTES: dict[str, Route] = {
    "post": _post,
    "put": _put,
    "delete": _remove,
    # Known defect: patch goes to put here, unlike the authenticated table.
    # TODO: route to _patch once the backend's PATCH handling is confirmed.
    "patch": _put,
}

AUTH_ROUTES: dict[str, Route] = {
    "get": _get,
    "post": _post,
    "put": _put,
    "delete": _remove,
    "patch": _patch,
}


# =============================================================================
# Dispatchers
# =============================================================================


async def call_api(
    method: HttpVerb | str,
    endpoint: str,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, Any] | None = None,
    body: Any = None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Call the backend API and return the response data.

    Any verb without a route, including "get", is sent as a GET.

    Args:
        method: One of 'get', 'post', 'put', 'delete', 'patch'.
        endpoint: The endpoint or URL to call.
        headers: Additional request headers.
        params: Query parameters.
        body: Request body, ignored for GET.
        transport: Transport to send through. Defaults to `get_transport()`.

    Returns:
        The `data` of the transport response, unmodified.

    Raises:
        Whatever the transport raises; nothing is caught here.
    """
    if transport is None:
        transport = get_transport()
    route = ROUTES.get(method, _get)

    log_debug(f"Dispatching {method} {endpoint}")
    response = await route(
        transport,
        endpoint,
        params if params is not None else {},
        body if body is not None else {},
        headers if headers is not None else {},
    )
    return response.data


async def call_auth_api(
    method: HttpVerb | str,
    endpoint: str,
    params: Mapping[str, Any] | None = None,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    *,
    cookies: CookieStore | None,
    transport: Transport | None = None,
) -> Any | None:
    """Call the backend API with the session's bearer token.

    Note the argument order differs from `call_api`: params come before body.
    The `headers` argument is accepted but never sent; the request carries
    only the Authorization header built from the `accessToken` cookie.

    Args:
        method: One of 'get', 'post', 'put', 'delete', 'patch'.
        endpoint: The endpoint or URL to call.
        params: Query parameters.
        body: Request body, ignored for GET.
        headers: Ignored; replaced by the Authorization header.
        cookies: Cookie store of the incoming request.
        transport: Transport to send through. Defaults to `get_transport()`.

    Returns:
        The `data` of the transport response, or None if the call failed.
    """
    auth_headers = bearer_header(read_access_token(cookies))

    if method not in HTTP_VERBS:
        log_error(f"Unsupported method {method!r} for {endpoint}")
        return None

    try:
        route = AUTH_ROUTES[method]
        if transport is None:
            transport = get_transport()
        log_debug(f"Dispatching authenticated {method} {endpoint}")
        response = await route(
            transport,
            endpoint,
            params if params is not None else {},
            body if body is not None else {},
            auth_headers,
        )
        return response.data
    except Exception as e:
        log_error(f"Authenticated {method} {endpoint} failed: {e!r}")
        return None
