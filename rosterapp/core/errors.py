# rosterapp/core/errors.py
from __future__ import annotations

from typing import Optional


class PuppyBowlError(Exception):
    """Base for every failure talking to the Puppy Bowl API."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.url:
            parts.append(f"url={self.url}")
        return " ".join(parts)


class NetworkFailure(PuppyBowlError):
    """The request never produced a response (DNS, refused, reset, timeout)."""


class DecodeFailure(PuppyBowlError):
    """The body was not JSON or lacked the expected envelope fields."""


class ServerRejection(PuppyBowlError):
    """The API answered but refused the operation."""
