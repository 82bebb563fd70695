"""
Error types raised by the fetch client.

Only two kinds of failure originate here:

- ``FetchClientError`` for calls the transport completed but whose status
  was not successful. It carries the parsed-or-raw body, the status, the
  response headers and an echo of the request.
- ``ConfigurationError`` for client settings that cannot be honoured.

Transport faults (DNS failures, refused connections, timeouts) come from the
engine and are propagated unchanged.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Coarse classification of an unsuccessful HTTP status."""
    AUTHENTICATION = "authentication"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


STATUS_CATEGORIES: Dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION,
    401: ErrorCategory.AUTHENTICATION,
    403: ErrorCategory.PERMISSION_DENIED,
    404: ErrorCategory.NOT_FOUND,
    409: ErrorCategory.CONFLICT,
    422: ErrorCategory.VALIDATION,
    429: ErrorCategory.RATE_LIMIT,
}


def categorize_status(status_code: Optional[int]) -> ErrorCategory:
    """Map a status code onto an ``ErrorCategory``."""
    if status_code is None:
        return ErrorCategory.UNKNOWN
    if status_code in STATUS_CATEGORIES:
        return STATUS_CATEGORIES[status_code]
    if status_code >= 500:
        return ErrorCategory.SERVER_ERROR
    return ErrorCategory.UNKNOWN


class ConfigurationError(ValueError):
    """Raised when client configuration is invalid."""


class FetchClientError(Exception):
    """
    Structured error for unsuccessful HTTP responses.

    Attributes:
        message: Error message
        response: ``{"data", "status", "headers", "config": {"method", "url"}}``
        request: ``{"headers", "config": {"method", "url"}}``
        response_text: Body exactly as the server sent it
    """

    name = "FetchClientError"

    def __init__(
        self,
        message: str,
        response: Dict[str, Any],
        request: Dict[str, Any],
        response_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request
        self.response_text = response_text

    @property
    def status(self) -> Optional[int]:
        return self.response.get("status")

    @property
    def data(self) -> Any:
        return self.response.get("data")

    @property
    def category(self) -> ErrorCategory:
        return categorize_status(self.status)

    def __repr__(self) -> str:
        config = self.response.get("config") or {}
        return (
            f"FetchClientError(status={self.status!r}, "
            f"method={config.get('method')!r}, url={config.get('url')!r})"
        )
