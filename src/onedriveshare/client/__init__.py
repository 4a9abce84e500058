"""Client exports for onedriveshare."""

from __future__ import annotations

from .config import DEFAULT_DIVE_DEPTH, ClientConfig
from .share_client import OneDriveShareClient
from .urls import DEFAULT_API_ROOT, build_access_url

__all__ = [
    "OneDriveShareClient",
    "ClientConfig",
    "DEFAULT_API_ROOT",
    "DEFAULT_DIVE_DEPTH",
    "build_access_url",
]
