"""
Errors surfaced by the API client. Nothing here is retried; callers report and move on.
"""

from typing import Any


class ApiError(Exception):
    """Base for every failure of a single API call."""


class ServiceError(ApiError):
    """The server answered with a non-success status and a structured error body."""

    def __init__(self, status: int, code: int, message: str, data: dict[str, Any] | None = None):
        super().__init__(f"{status} [{code}] {message}")
        self.status = status
        self.code = code
        self.message = message
        self.data = data


class ParseError(ApiError):
    """The response body did not match the expected schema."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownError(ApiError):
    """Transport-level failure: connection, DNS, TLS or timeout."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotAuthenticated(ApiError):
    """An authenticated endpoint was called without a session."""
