"""Transport exports for onedriveshare."""

from __future__ import annotations

from .http_transport import HttpTransport, Transport

__all__ = ["HttpTransport", "Transport"]
