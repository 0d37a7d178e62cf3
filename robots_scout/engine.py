# File: robots_scout/engine.py
"""robots_scout.engine: fetch a site's robots.txt and run the analyzer or validator on it."""

from __future__ import annotations

from typing import Optional

from aiohttp import ClientSession

from robots_scout.config import FetchConfig
from robots_scout.crawler.fetcher import RobotsFetcher
from robots_scout.crawler.models import FetchResult
from robots_scout.errors import FetchFailed
from robots_scout.logger import logger
from robots_scout.models import AnalysisResult, ValidationResult
from robots_scout.parser.analyzer import analyze
from robots_scout.parser.validator import validate
from robots_scout.utils import normalize_robots_url

__all__ = ["fetch_robots", "analyze_url", "validate_url"]


async def fetch_robots(url: str, config: Optional[FetchConfig] = None) -> FetchResult:
    """Normalise *url* to its robots.txt location and download it.

    Raises:
        InvalidInput: *url* is not an absolute URL (before any network access).
        FetchFailed: transport error or timeout.
    """
    cfg = config or FetchConfig()
    robots_url = normalize_robots_url(url)
    logger.info("Fetching %s", robots_url)
    async with ClientSession() as session:
        try:
            return await RobotsFetcher(session, cfg).fetch(robots_url)
        except FetchFailed as exc:
            logger.error("%s", exc)
            raise


async def analyze_url(url: str, config: Optional[FetchConfig] = None) -> AnalysisResult:
    """Download and analyze a site's robots.txt.

    A body cut off at the size limit is still analyzed; the result is then
    flagged with ``size_limit_exceeded`` and ``partial_content``.
    """
    fetched = await fetch_robots(url, config)
    result = analyze(fetched.content, status=fetched.status, redirected=fetched.redirected)
    if fetched.truncated:
        result.size_limit_exceeded = True
        result.partial_content = True
    return result


async def validate_url(url: str, config: Optional[FetchConfig] = None) -> ValidationResult:
    """Download and validate a site's robots.txt."""
    fetched = await fetch_robots(url, config)
    return validate(fetched.content)
