"""Blocking JSON-over-HTTP transport built on requests."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests

from onedriveshare.errors import TransportError, transport_error_from_status

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """The single I/O boundary used by OneDriveShareClient."""

    def get_json(self, url: str) -> Any:
        """GET url and return the decoded JSON body. Raises TransportError."""
        ...


class HttpTransport:
    """
    Transport backed by a `requests.Session`.

    Notes:
        - No retries: any failure is raised immediately as TransportError.
        - timeout_sec=None blocks until the server answers.
    """

    def __init__(
        self,
        *,
        timeout_sec: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout_sec
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

    def get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise TransportError(
                "Network error",
                details={"url": url},
                cause=exc,
            ) from exc

        if not response.ok:
            logger.warning("GET %s returned HTTP %s", url, response.status_code)
            raise transport_error_from_status(
                url,
                response.status_code,
                reason=response.reason,
                message=_error_message(response),
            )

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("GET %s returned a non-JSON body", url)
            raise TransportError(
                "Response body is not valid JSON",
                details={"url": url, "status_code": response.status_code},
                cause=exc,
            ) from exc

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _error_message(response: requests.Response) -> Optional[str]:
    """Pull `error.message` out of an API error body, if there is one."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if isinstance(err, dict) and isinstance(err.get("message"), str):
        return err["message"]
    return None
