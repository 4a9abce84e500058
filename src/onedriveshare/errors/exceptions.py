"""Exception hierarchy for onedriveshare."""

from __future__ import annotations

from typing import Any, Optional


class OneDriveShareError(Exception):
    """
    Base exception for onedriveshare.

    Attributes:
        details: Optional structured information (e.g., URL, HTTP status, key path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class TransportError(OneDriveShareError):
    """
    Raised when a GET does not yield a JSON document.

    Covers network failures, non-2xx HTTP statuses and bodies that are not
    valid JSON. A missing folder and a transient outage look the same here;
    inspect `details["status_code"]` or `cause` to tell them apart.
    """


class MalformedResponseError(OneDriveShareError):
    """Raised when a mandatory field is missing from (or invalid in) a JSON item."""


class InvalidArgumentError(OneDriveShareError):
    """Raised when caller-supplied arguments are invalid."""


def transport_error_from_status(
    url: str,
    status_code: int,
    *,
    reason: str | None = None,
    message: str | None = None,
) -> TransportError:
    """Build a TransportError for a non-success HTTP response."""
    details: dict[str, Any] = {
        "url": url,
        "status_code": status_code,
        "reason": reason,
    }
    return TransportError(message or f"HTTP error {status_code}", details=details)
