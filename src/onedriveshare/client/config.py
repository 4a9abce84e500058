"""Client configuration for onedriveshare."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .urls import DEFAULT_API_ROOT

DEFAULT_DIVE_DEPTH: int = 3
DEFAULT_USER_AGENT: str = "onedriveshare"


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """
    Settings for OneDriveShareClient.

    Attributes:
        api_root: Base of the shares API (no trailing slash needed).
        timeout_sec: Per-request timeout; None blocks until the server answers.
        user_agent: User-Agent header sent with every request.
        dive_depth: Default number of levels expanded by dive().
    """

    api_root: str = DEFAULT_API_ROOT
    timeout_sec: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT
    dive_depth: int = DEFAULT_DIVE_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.api_root, str) or not self.api_root.strip():
            raise ValueError("ClientConfig.api_root must be a non-empty string")

        if self.timeout_sec is not None:
            if isinstance(self.timeout_sec, bool) or not isinstance(self.timeout_sec, (int, float)):
                raise TypeError("ClientConfig.timeout_sec must be a number or None")
            if self.timeout_sec <= 0:
                raise ValueError("ClientConfig.timeout_sec must be positive")

        if not isinstance(self.user_agent, str) or not self.user_agent.strip():
            raise ValueError("ClientConfig.user_agent must be a non-empty string")

        if isinstance(self.dive_depth, bool) or not isinstance(self.dive_depth, int):
            raise TypeError("ClientConfig.dive_depth must be an int")
        if self.dive_depth < 0:
            raise ValueError("ClientConfig.dive_depth must be >= 0")
