"""onedriveshare public API."""

from __future__ import annotations

import logging

from onedriveshare.client import (
    DEFAULT_API_ROOT,
    DEFAULT_DIVE_DEPTH,
    ClientConfig,
    OneDriveShareClient,
    build_access_url,
)
from onedriveshare.client.mapper import (
    extract_files,
    extract_folders,
    map_file,
    map_folder,
    map_full_folder,
)
from onedriveshare.errors import (
    InvalidArgumentError,
    MalformedResponseError,
    OneDriveShareError,
    TransportError,
)
from onedriveshare.models import OneDriveFile, OneDriveFolder, ParentReference, walk
from onedriveshare.printer import print_tree, render_tree
from onedriveshare.transport import HttpTransport, Transport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "OneDriveShareClient",
    "ClientConfig",
    "build_access_url",
    "DEFAULT_API_ROOT",
    "DEFAULT_DIVE_DEPTH",
    # Transport
    "Transport",
    "HttpTransport",
    # Mapping
    "map_file",
    "map_folder",
    "map_full_folder",
    "extract_folders",
    "extract_files",
    # Models
    "OneDriveFile",
    "OneDriveFolder",
    "ParentReference",
    "walk",
    # Printing
    "render_tree",
    "print_tree",
    # Errors
    "OneDriveShareError",
    "TransportError",
    "MalformedResponseError",
    "InvalidArgumentError",
]
