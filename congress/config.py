"""Environment-driven configuration for the Congress API client."""

from __future__ import annotations
import math
import os
from typing import Optional


DEFAULT_ENDPOINT = "https://api.propublica.org/congress/v1"

# Checked in order; the first one set wins.
API_KEY_VARS = ("PROPUBLICA_API_KEY", "CONGRESS_API_KEY")
ENDPOINT_VAR = "CONGRESS_API_ENDPOINT"
TIMEOUT_VAR = "CONGRESS_API_TIMEOUT"


def get_api_key() -> Optional[str]:
    """Get the API key from the environment, or None if unset."""
    for name in API_KEY_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def get_endpoint() -> str:
    """Get the base endpoint URL, falling back to the public API."""
    return os.environ.get(ENDPOINT_VAR, "").strip() or DEFAULT_ENDPOINT


def get_timeout() -> Optional[float]:
    """
    Get the request timeout in seconds.

    Returns:
        Timeout as a float, or None when the variable is unset (no timeout)

    Raises:
        ValueError: if the variable is set but not a positive number
    """
    raw = os.environ.get(TIMEOUT_VAR, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        timeout = None
    if timeout is None or not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"{TIMEOUT_VAR} must be a positive number of seconds, got {raw!r}")
    return timeout
