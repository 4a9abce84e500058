"""Public error exports for onedriveshare."""

from __future__ import annotations

from .exceptions import (
    InvalidArgumentError,
    MalformedResponseError,
    OneDriveShareError,
    TransportError,
    transport_error_from_status,
)

__all__ = [
    "OneDriveShareError",
    "TransportError",
    "MalformedResponseError",
    "InvalidArgumentError",
    "transport_error_from_status",
]
