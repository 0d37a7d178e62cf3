# File: tests/conftest.py
import pytest

from robots_scout.config import FetchConfig
from robots_scout.logger import configure

BASIC_ROBOTS = """# Example robots.txt
User-agent: *
Disallow: /admin
Allow: /public

Sitemap: https://example.com/sitemap.xml
"""

COMPLEX_ROBOTS = """# www.robotstxt.org/
# www.google.com/support/webmasters/bin/answer.py?hl=en&answer=156449
Sitemap: https://www.example.com/sitemap.xml

User-agent: *
Disallow: /health
Disallow: /review/
Disallow: /arrange-viewings/add/
Disallow: /arrange-viewings/remove/
Disallow: /_*
Disallow: /data
Disallow: /*.json$
Disallow: /*/*-c*/entry-requirement-description?entryRequirementIndex=
Disallow: /*/*-c*/english-requirement-description?englishRequirementIndex=
Disallow: /*/courses/*/courses
Disallow: /*/*-c*/description
Disallow: /*/*-c*/fees

User-agent: ShopWiki
Disallow: /

User-agent: GPTBot
Disallow: /
"""


@pytest.fixture(autouse=True)
def reset_logger():
    """
    CLI tests re-point the project logger at CliRunner streams;
    restore a handler on the real stderr afterwards.
    """
    yield
    configure(level="WARNING")


@pytest.fixture()
def basic_robots() -> str:
    return BASIC_ROBOTS


@pytest.fixture()
def complex_robots() -> str:
    return COMPLEX_ROBOTS


@pytest.fixture()
def fetch_config() -> FetchConfig:
    """
    Small limits so size-cap tests do not need megabytes of data.
    """
    return FetchConfig(timeout=2.0, max_redirects=2, chunk_size=64, size_limit=1000)

