# File: robots_scout/errors.py
"""robots_scout.errors: exceptions raised by the fetch layer.

The parser and validator never raise; only URL handling and network access do.
"""
from __future__ import annotations

from typing import Optional


class RobotsScoutError(Exception):
    """Base class for all RobotsScout errors."""


class InvalidInput(RobotsScoutError, ValueError):
    """The given URL cannot be turned into a robots.txt location."""


class FetchFailed(RobotsScoutError):
    """Transport failure or timeout while downloading robots.txt."""

    def __init__(self, url: str, cause: object, status: Optional[int] = None) -> None:
        self.url = url
        self.cause = cause
        self.status = status
        message = f"Failed to fetch robots.txt from {url}: {cause}"
        if status is not None:
            message += f" (HTTP {status})"
        super().__init__(message)


__all__ = ["RobotsScoutError", "InvalidInput", "FetchFailed"]
