"""Public exceptions for the apicall SDK."""

from typing import Any


class ApiCallError(Exception):
    """Base exception for all apicall SDK errors."""


class ApiCallHTTPError(ApiCallError):
    """Non-success response from the backend API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.data = data


class ApiCallConfigError(ApiCallError):
    """Configuration error (missing env vars, invalid config)."""
