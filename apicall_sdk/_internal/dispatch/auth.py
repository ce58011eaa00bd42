"""Bearer-token helpers for the authenticated dispatcher."""

from typing import Protocol

ACCESS_TOKEN_COOKIE = "accessToken"

# Rendered in place of a missing token
UNDEFINED_TOKEN = "undefined"


class CookieStore(Protocol):
    """Read access to the incoming request's cookies.

    Any mapping of cookie names to values satisfies this, e.g. a plain dict
    or `request.cookies` in Starlette/FastAPI.
    """

    def get(self, key: str, /) -> str | None: ...


def read_access_token(cookies: CookieStore | None) -> str | None:
    """Read the access token from the cookie store, if there is one."""
    if cookies is None:
        return None
    return cookies.get(ACCESS_TOKEN_COOKIE)


def bearer_header(token: str | None) -> dict[str, str]:
    """Build the Authorization header for a token.

    A missing token still yields a header, with the literal value
    "Bearer undefined".

    Args:
        token: The access token, or None when no session exists.

    Returns:
        A mapping with a single Authorization entry.
    """
    value = UNDEFINED_TOKEN if token is None else token
    return {"Authorization": f"Bearer {value}"}
