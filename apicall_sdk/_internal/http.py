"""Builder for the httpx client behind HttpxTransport."""

import httpx

from apicall_sdk._version import __version__

DEFAULT_TIMEOUT_MS = 30000

USER_AGENT = f"apicall-sdk/{__version__}"


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create the async client used for a single backend request.

    Redirects are followed, so a 3xx from the backend resolves to the final
    response instead of surfacing as a failed call.

    Args:
        timeout_ms: Request timeout in milliseconds.
        base_url: Base URL that relative endpoints are joined to.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        base_url=base_url or "",
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )
