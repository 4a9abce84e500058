"""OneDriveShareClient: fetch folders/files of a public share and dive into them."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional

from onedriveshare.errors import InvalidArgumentError
from onedriveshare.models import OneDriveFolder
from onedriveshare.transport import HttpTransport, Transport

from . import urls
from .config import ClientConfig
from .mapper import extract_files, extract_folders, map_folder, map_full_folder

logger = logging.getLogger(__name__)


class OneDriveShareClient:
    """
    Read-only client for a publicly shared OneDrive folder.

    Notes:
        - Every call is a single blocking GET; there is no retry and no cache.
        - Records returned are fresh values. Methods that "fill in" children
          return a new folder and leave the argument untouched.
    """

    def __init__(
        self,
        public_url: str,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._config = config if config is not None else ClientConfig()
        self._access_url = urls.build_access_url(public_url, self._config.api_root)
        # Only a transport created here is closed by close().
        self._owned_transport: Optional[HttpTransport] = None
        if transport is None:
            self._owned_transport = HttpTransport(
                timeout_sec=self._config.timeout_sec,
                user_agent=self._config.user_agent,
            )
            transport = self._owned_transport
        self._transport: Transport = transport

    @classmethod
    def from_access_url(
        cls,
        access_url: str,
        transport: Transport,
        *,
        config: Optional[ClientConfig] = None,
    ) -> "OneDriveShareClient":
        """Create client for a pre-built access URL (useful for tests)."""
        if not isinstance(access_url, str) or not access_url:
            raise InvalidArgumentError("access_url must be a non-empty string")
        obj = cls.__new__(cls)
        obj._config = config if config is not None else ClientConfig()
        obj._access_url = access_url
        obj._owned_transport = None
        obj._transport = transport
        return obj

    @property
    def access_url(self) -> str:
        return self._access_url

    # ----------------------------
    # Public API
    # ----------------------------
    def get_json(self, url: str) -> Any:
        """Return the raw JSON document at url."""
        return self._transport.get_json(url)

    def fetch_root(self) -> OneDriveFolder:
        """Share root metadata, without children."""
        data = self._get(urls.root_url(self._access_url))
        return map_folder(data)

    def fetch_root_full(self) -> OneDriveFolder:
        """Share root with its immediate files and folders inlined."""
        data = self._get(urls.root_full_url(self._access_url))
        return map_full_folder(data)

    def fetch_root_children(self, folder: OneDriveFolder) -> OneDriveFolder:
        """Return a copy of folder whose children are the share root's listing."""
        data = self._get(urls.root_children_url(self._access_url))
        return _with_children(folder, data)

    def fetch_folder(self, name: str) -> OneDriveFolder:
        """
        Metadata of a folder below the share root, without children.

        `name` is a path relative to the root, e.g. "Photos" or "Photos/2019".
        """
        data = self._get(urls.folder_url(self._access_url, name))
        return map_folder(data)

    def fetch_folder_full(self, name: str) -> OneDriveFolder:
        """Folder at name with its immediate files and folders inlined."""
        data = self._get(urls.folder_full_url(self._access_url, name))
        return map_full_folder(data)

    def fetch_folder_children(self, name: str, folder: OneDriveFolder) -> OneDriveFolder:
        """Return a copy of folder whose children are the listing of the folder at name."""
        data = self._get(urls.folder_children_url(self._access_url, name))
        return _with_children(folder, data)

    def dive(self, folder: OneDriveFolder, depth: Optional[int] = None) -> OneDriveFolder:
        """
        Eagerly expand `depth` more levels below an already populated folder.

        One `fetch_folder_children` call is made per child folder at each
        level, strictly in order, depth-first. The path used for a node is
        the slash-joined chain of names starting at the level-1 folder (the
        starting folder's own name is not part of it). Folders at the last
        level keep the child folders their listing returned, unexpanded.

        Any error aborts the whole dive; no partial tree is returned.

        Raises:
            InvalidArgumentError: if depth is negative.
        """
        use_depth = self._config.dive_depth if depth is None else depth
        if isinstance(use_depth, bool) or not isinstance(use_depth, int) or use_depth < 0:
            raise InvalidArgumentError(
                "depth must be a non-negative int",
                details={"depth": use_depth},
            )

        logger.info("Diving %d level(s) below %r", use_depth, folder.name)
        children = [
            self._expand(child, child.name, use_depth)
            for child in folder.child_folders
        ]
        result = dataclasses.replace(
            folder,
            child_folders=children,
            child_files=list(folder.child_files),
        )
        logger.info("Dive below %r finished", folder.name)
        return result

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> "OneDriveShareClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ----------------------------
    # Internals
    # ----------------------------
    def _expand(self, folder: OneDriveFolder, path: str, remaining: int) -> OneDriveFolder:
        if remaining == 0:
            return folder

        fetched = self.fetch_folder_children(path, folder)
        children = [
            self._expand(child, f"{path}/{child.name}", remaining - 1)
            for child in fetched.child_folders
        ]
        return dataclasses.replace(fetched, child_folders=children)

    def _get(self, url: str) -> Any:
        logger.debug("Fetching %s", url)
        return self._transport.get_json(url)


def _with_children(folder: OneDriveFolder, listing: Any) -> OneDriveFolder:
    folders = extract_folders(listing)
    files = extract_files(listing)
    return dataclasses.replace(folder, child_folders=folders, child_files=files)
