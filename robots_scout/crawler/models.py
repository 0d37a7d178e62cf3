# robots_scout/crawler/models.py
"""
Data models for the robots.txt fetch layer.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FetchResult:
    """Body and response metadata of a downloaded robots.txt."""

    url: str
    content: bytes
    status: int
    redirected: bool = False
    truncated: bool = False
