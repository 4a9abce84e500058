"""URL shapes for the OneDrive public shares API."""

from __future__ import annotations

from onedriveshare.errors import InvalidArgumentError
from onedriveshare.util.encoding import encode_share_id

DEFAULT_API_ROOT: str = "https://api.onedrive.com/v1.0"

EXPAND_CHILDREN: str = "?expand=children"


def build_access_url(public_url: str, api_root: str = DEFAULT_API_ROOT) -> str:
    """
    Build the access URL of a share root from its public URL.

    Example:
        build_access_url("https://publicurl.com")
        -> "https://api.onedrive.com/v1.0/shares/u!aHR0cHM6Ly9wdWJsaWN1cmwuY29t/root"
    """
    if not isinstance(public_url, str) or not public_url.strip():
        raise InvalidArgumentError("public_url must be a non-empty string")
    return f"{api_root.rstrip('/')}/shares/u!{encode_share_id(public_url)}/root"


def root_url(access_url: str) -> str:
    return access_url


def root_full_url(access_url: str) -> str:
    return access_url + EXPAND_CHILDREN


def root_children_url(access_url: str) -> str:
    return access_url + "/children"


# Named subfolders are addressed with a colon-delimited path segment, unlike
# the root which takes bare suffixes.
def folder_url(access_url: str, name: str) -> str:
    return f"{access_url}:/{_check_name(name)}"


def folder_full_url(access_url: str, name: str) -> str:
    return f"{access_url}:/{_check_name(name)}{EXPAND_CHILDREN}"


def folder_children_url(access_url: str, name: str) -> str:
    return f"{access_url}:/{_check_name(name)}:/children"


def _check_name(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError("folder name must be a non-empty string")
    return name
