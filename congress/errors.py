"""Exceptions raised by the Congress API client."""

from __future__ import annotations
from typing import List, Optional


class CongressAPIError(Exception):
    """Base class for every failure raised by this package."""


class TransportError(CongressAPIError):
    """The request could not be built, sent, or its body fully read."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DecodeError(CongressAPIError):
    """The response body is not JSON or does not have the envelope shape."""


class APIErrorResponse(DecodeError):
    """
    The body is an upstream error envelope rather than a results envelope.

    Example payload:
        {"status": "ERROR", "errors": [{"error": "Record not found"}]}
    """

    def __init__(self, status: str, messages: List[str]):
        detail = "; ".join(messages) if messages else "no error message given"
        super().__init__(f"API returned {status}: {detail}")
        self.status = status
        self.messages = messages
