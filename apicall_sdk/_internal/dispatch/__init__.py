"""Verb dispatch for outbound backend API calls."""

from apicall_sdk._internal.dispatch.auth import (
    ACCESS_TOKEN_COOKIE,
    CookieStore,
    bearer_header,
    read_access_token,
)
from apicall_sdk._internal.dispatch.client import call_api, call_auth_api

__all__ = [
    "call_api",
    "call_auth_api",
    "bearer_header",
    "read_access_token",
    "CookieStore",
    "ACCESS_TOKEN_COOKIE",
]
