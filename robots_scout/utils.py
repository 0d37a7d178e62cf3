# File: robots_scout/utils.py
"""robots_scout.utils: URL helpers shared by the validator and the fetch layer."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlsplit, urlunsplit

from robots_scout.errors import InvalidInput
from robots_scout.logger import logger

__all__: Sequence[str] = (
    "is_absolute_url",
    "normalize_robots_url",
)


def is_absolute_url(value: str) -> bool:
    """Check that *value* is a structurally valid absolute URL (scheme and host)."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlsplit(value)
        host = parsed.hostname
    except ValueError:
        # e.g. an unterminated IPv6 literal
        return False
    return bool(parsed.scheme) and bool(host)


def normalize_robots_url(url: str) -> str:
    """Turn any page URL of a site into the URL of its robots.txt.

    Scheme, host and port are kept. A path already ending in ``robots.txt`` is
    kept as is, anything else is replaced with ``/robots.txt``.

    Raises:
        InvalidInput: *url* has no scheme or host.
    """
    if not is_absolute_url(url):
        raise InvalidInput(f"Invalid URL provided: {url}")

    parsed = urlsplit(url)
    try:
        port = parsed.port
    except ValueError as exc:
        raise InvalidInput(f"Invalid URL format: {url}") from exc

    netloc = parsed.hostname or ""
    if ":" in netloc:
        netloc = f"[{netloc}]"
    if port is not None:
        netloc = f"{netloc}:{port}"

    path = parsed.path if parsed.path.lower().endswith("robots.txt") else "/robots.txt"
    normalized = urlunsplit((parsed.scheme, netloc, path, "", ""))
    logger.debug("Normalized robots URL: %s -> %s", url, normalized)
    return normalized
