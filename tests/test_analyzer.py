# File: tests/test_analyzer.py
"""Tests for the directive analyzer: counts, sitemaps, size metrics."""
import pytest

from robots_scout import analyze
from robots_scout.config import GOOGLE_SIZE_LIMIT
from robots_scout.models import DirectiveCounts


def test_basic_robots(basic_robots):
    result = analyze(basic_robots)

    assert result.comment_count == 1
    assert result.size == len(basic_robots)
    assert result.size_kib == len(basic_robots) / 1024
    assert result.over_size_limit is False
    assert result.status == 200
    assert result.redirected is False

    assert result.by_type.user_agent == 1
    assert result.by_type.disallow == 1
    assert result.by_type.allow == 1
    assert result.by_type.sitemap == 1
    assert result.by_type.crawl_delay == 0

    assert result.by_user_agent["*"] == DirectiveCounts(allow=1, disallow=1)
    assert result.sitemaps == ["https://example.com/sitemap.xml"]


def test_complex_robots(complex_robots):
    result = analyze(complex_robots)

    assert result.comment_count == 2
    assert result.by_type.user_agent == 3
    assert result.by_type.disallow == 14
    assert result.by_type.sitemap == 1
    assert result.by_user_agent["*"].disallow == 12
    assert result.by_user_agent["ShopWiki"].disallow == 1
    assert result.by_user_agent["GPTBot"].disallow == 1
    assert result.sitemaps == ["https://www.example.com/sitemap.xml"]


def test_crawl_delay_alias():
    result = analyze("User-agent: *\nCrawl-delay: 10\nUser-agent: bot\nCrawldelay: 5")

    assert result.by_type.crawl_delay == 2
    assert result.by_user_agent["*"].crawl_delay == 1
    assert result.by_user_agent["bot"].crawl_delay == 1


def test_noindex_and_other_directives():
    result = analyze(
        "User-agent: *\nNoindex: /private\nRequest-rate: 1/10s\nVisit-time: 0400-0845\nHost: example.com"
    )

    assert result.by_type.noindex == 1
    assert result.by_type.other == 3
    assert result.by_user_agent["*"] == DirectiveCounts(noindex=1, other=3)


def test_multiple_sitemaps_keep_file_order():
    result = analyze(
        "User-agent: *\nDisallow: /admin\n\n"
        "Sitemap: https://example.com/sitemap.xml\n"
        "Sitemap: https://example.com/sitemap-news.xml\n"
        "Sitemap: https://example.com/sitemap-images.xml\n"
    )

    assert result.by_type.sitemap == 3
    assert result.sitemaps == [
        "https://example.com/sitemap.xml",
        "https://example.com/sitemap-news.xml",
        "https://example.com/sitemap-images.xml",
    ]


def test_empty_sitemap_is_counted_not_collected():
    result = analyze("User-agent: *\nDisallow: /admin\nSitemap:")

    assert result.by_type.sitemap == 1
    assert result.sitemaps == []


def test_sitemap_does_not_touch_agent_bucket():
    result = analyze("User-agent: *\nSitemap: https://example.com/s.xml")
    assert result.by_user_agent["*"] == DirectiveCounts()


def test_status_and_redirect_pass_through():
    result = analyze("User-agent: *", status=404, redirected=True)

    assert result.status == 404
    assert result.redirected is True


def test_empty_content():
    result = analyze("")

    assert result.size == 0
    assert result.comment_count == 0
    assert result.over_size_limit is False
    assert result.by_type.total() == 0
    assert result.by_user_agent == {}
    assert result.sitemaps == []


def test_only_comments_and_whitespace():
    assert analyze("# one\n# two\n# three").comment_count == 3
    only_ws = analyze("   \n\t\n  \r\n")
    assert only_ws.comment_count == 0
    assert only_ws.by_type.total() == 0


def test_mixed_line_endings():
    result = analyze("User-agent: *\r\nDisallow: /test\rAllow: /public\n")

    assert result.by_type.user_agent == 1
    assert result.by_type.disallow == 1
    assert result.by_type.allow == 1


def test_malformed_lines_are_ignored():
    result = analyze("User-agent *\nDisallow /admin\nAllow: /ok")

    assert result.by_type.total() == 1
    assert result.by_type.allow == 1
    assert result.by_user_agent == {}


def test_directives_before_any_user_agent_are_not_bucketed():
    result = analyze("Disallow: /admin\nUser-agent: *\nAllow: /")

    assert result.by_type.disallow == 1
    assert result.by_user_agent["*"] == DirectiveCounts(allow=1)


def test_empty_user_agent_is_tracked():
    result = analyze("User-agent:\nDisallow: /x")

    assert "" in result.by_user_agent
    assert result.by_user_agent[""].disallow == 1


def test_redeclared_agent_keeps_counts():
    result = analyze(
        "User-agent: Bot\nDisallow: /a\nUser-agent: Other\nAllow: /\nUser-agent: Bot\nDisallow: /b"
    )

    assert result.by_type.user_agent == 3
    assert result.by_user_agent["Bot"].disallow == 2
    assert result.by_user_agent["Other"].allow == 1


def test_agent_names_keep_case():
    result = analyze("User-agent: Googlebot\nUser-agent: googlebot")
    assert set(result.by_user_agent) == {"Googlebot", "googlebot"}


@pytest.mark.parametrize(
    "content",
    [
        "",
        "User-agent: *\nDisallow: /\nbroken line\n# comment\nFoo: bar\nSitemap:",
        "Allow: /\r\n\r\nUser-agent: a\rCrawl-delay: x\n   \nno colon here",
    ],
)
def test_type_total_matches_directive_lines(content):
    lines = [line.strip() for line in content.replace("\r\n", "\n").replace("\r", "\n").split("\n")]
    expected = sum(1 for line in lines if line and not line.startswith("#") and ":" in line)
    assert analyze(content).by_type.total() == expected


def test_size_limit_boundary():
    at_limit = "#" + "x" * (GOOGLE_SIZE_LIMIT - 1)
    over_limit = at_limit + "x"

    assert analyze(at_limit).size == GOOGLE_SIZE_LIMIT
    assert analyze(at_limit).over_size_limit is False
    assert analyze(over_limit).over_size_limit is True


def test_size_counts_utf8_bytes():
    content = "User-agent: é"
    assert analyze(content).size == len(content.encode("utf-8"))
    assert analyze(content.encode("utf-8")).size == len(content.encode("utf-8"))


def test_large_file_with_many_user_agents():
    block = "User-agent: bot{i}\nDisallow: /private/{i}/\nAllow: /public/{i}/\n\n"
    content = "".join(block.format(i=i) for i in range(12000))
    result = analyze(content)

    assert result.over_size_limit is True
    assert result.by_type.user_agent == 12000
    assert len(result.by_user_agent) == 12000
    assert result.by_user_agent["bot42"] == DirectiveCounts(allow=1, disallow=1)


def test_as_dict_shape(basic_robots):
    data = analyze(basic_robots).as_dict()

    assert data["over_google_limit"] is False
    assert data["record_counts"]["by_type"]["disallow"] == 1
    assert data["record_counts"]["by_useragent"]["*"]["allow"] == 1
    assert "size_limit_exceeded" not in data
    assert "partial_content" not in data


def test_analyze_is_idempotent(complex_robots):
    assert analyze(complex_robots) == analyze(complex_robots)
