"""HTTP transport for the Congress API: one authenticated GET per call."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

import requests

from . import config
from .errors import TransportError


API_KEY_HEADER = "X-API-Key"


@dataclass(frozen=True)
class Transport:
    """
    Immutable connection settings for the API.

    Safe to share between call sites; nothing on it changes after
    construction. Pass it as the first argument to every operation.
    """
    endpoint: str
    api_key: str = field(repr=False)
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    @classmethod
    def from_env(cls) -> "Transport":
        """Build a transport from PROPUBLICA_API_KEY and friends."""
        api_key = config.get_api_key()
        if not api_key:
            raise ValueError(
                "Congress API key not configured. Set one of: " + ", ".join(config.API_KEY_VARS)
            )
        return cls(endpoint=config.get_endpoint(), api_key=api_key, timeout=config.get_timeout())

    def url_for(self, path: str) -> str:
        return f"{self.endpoint}{path}"

    def get(self, path: str) -> bytes:
        """
        Issue a GET against endpoint + path and return the raw body.

        The HTTP status is not checked; error pages are returned like any
        other body and left for decoding to reject.

        Args:
            path: Fully rendered path, e.g. "/115/senate/members.json"

        Returns:
            Response body bytes

        Raises:
            TransportError: if the URL is unusable, the network call fails,
                or the body cannot be read completely
        """
        url = self.url_for(path)
        try:
            response = requests.get(
                url,
                headers={API_KEY_HEADER: self.api_key},
                timeout=self.timeout,
            )
            return response.content
        except (requests.exceptions.RequestException, ValueError) as e:
            # ValueError: urllib3 rejects settings such as a zero timeout
            raise TransportError(f"GET {url} failed: {e}", url=url) from e
