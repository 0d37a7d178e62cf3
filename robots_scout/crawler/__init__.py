# robots_scout/crawler/__init__.py
"""robots_scout.crawler: network access for robots.txt files."""

from robots_scout.crawler.fetcher import RobotsFetcher
from robots_scout.crawler.models import FetchResult

__all__ = ["RobotsFetcher", "FetchResult"]
