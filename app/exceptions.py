"""
Base exception classes for the Word Substitution Proxy.

This module provides common exception patterns shared by the
fetching and substitution services.
"""

from typing import Any


# Common error types for consistency
class ErrorTypes:
    """Common error type constants."""

    FETCH_ERROR = "FETCH_ERROR"
    INVALID_URL = "INVALID_URL"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    UPSTREAM_STATUS = "UPSTREAM_STATUS"
    CONTENT_TOO_LARGE = "CONTENT_TOO_LARGE"
    PARSE_ERROR = "PARSE_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    SUBSTITUTION_ERROR = "SUBSTITUTION_ERROR"


class BaseServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, error_type: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}


class FetchError(BaseServiceError):
    """Raised when the remote document cannot be retrieved."""

    def __init__(
        self,
        message: str,
        url: str,
        error_type: str = ErrorTypes.FETCH_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_type, {"url": url, **(details or {})})
        self.url = url


class InvalidURLError(FetchError):
    """Raised when the requested URL is malformed or uses an unsupported scheme."""

    def __init__(self, message: str, url: str):
        super().__init__(message, url, ErrorTypes.INVALID_URL)


class FetchTimeoutError(FetchError):
    """Raised when the upstream server does not answer in time."""

    def __init__(self, url: str, timeout_seconds: int):
        super().__init__(
            f"Request to {url} timed out after {timeout_seconds} seconds",
            url,
            ErrorTypes.TIMEOUT_ERROR,
            {"timeout_seconds": timeout_seconds},
        )


class UpstreamStatusError(FetchError):
    """Raised when the upstream server answers with a non-success status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(
            f"Upstream server responded with status {status_code}",
            url,
            ErrorTypes.UPSTREAM_STATUS,
            {"status_code": status_code},
        )
        self.status_code = status_code


class ContentTooLargeError(FetchError):
    """Raised when the fetched document exceeds the configured size limit."""

    def __init__(self, url: str, size: int, limit: int):
        super().__init__(
            f"Document size {size} bytes exceeds limit of {limit} bytes",
            url,
            ErrorTypes.CONTENT_TOO_LARGE,
            {"size": size, "limit": limit},
        )
