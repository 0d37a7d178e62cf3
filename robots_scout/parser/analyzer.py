# File: robots_scout/parser/analyzer.py
"""robots_scout.parser.analyzer: directive statistics for a robots.txt file.

The analyzer is lenient: lines without a colon are skipped silently, reporting
them is the validator's job.
"""

from __future__ import annotations

from typing import Optional, Union

from robots_scout.config import GOOGLE_SIZE_LIMIT
from robots_scout.logger import logger
from robots_scout.models import AnalysisResult, DirectiveCounts, DirectiveLine, LineKind
from robots_scout.parser.tokenizer import directive_kind, tokenize

__all__ = ["analyze"]


def analyze(
    content: Union[str, bytes],
    *,
    status: int = 200,
    redirected: bool = False,
) -> AnalysisResult:
    """Count comments and directives of *content* in a single pass.

    Args:
        content: robots.txt text (``bytes`` are measured as-is and decoded as UTF-8).
        status: HTTP status the content was served with; passed through.
        redirected: whether the download followed a redirect; passed through.

    Returns:
        AnalysisResult with per-type and per-user-agent counts, sitemap URLs
        and size metrics. Never raises.
    """
    raw = content if isinstance(content, bytes) else content.encode("utf-8")
    size = len(raw)
    result = AnalysisResult(
        size=size,
        size_kib=size / 1024,
        over_size_limit=size > GOOGLE_SIZE_LIMIT,
        status=status,
        redirected=redirected,
    )

    current_agent: Optional[str] = None
    for line in tokenize(raw):
        if line.kind is LineKind.COMMENT:
            result.comment_count += 1
        elif line.kind is LineKind.DIRECTIVE:
            current_agent = _process_directive(line, current_agent, result)

    logger.debug(
        "Analyzed robots.txt: %d bytes, %d directives, %d user-agents, %d sitemaps",
        size,
        result.by_type.total(),
        len(result.by_user_agent),
        len(result.sitemaps),
    )
    return result


def _process_directive(
    line: DirectiveLine,
    current_agent: Optional[str],
    result: AnalysisResult,
) -> Optional[str]:
    """Apply one directive to *result* and return the user-agent now in effect."""
    kind = directive_kind(line.name)
    result.by_type.increment(kind)

    if kind == "user_agent":
        # re-declaring an agent keeps its counts
        result.by_user_agent.setdefault(line.value, DirectiveCounts())
        return line.value

    if kind == "sitemap":
        if line.value:
            result.sitemaps.append(line.value)
        return current_agent

    if current_agent is not None:
        result.by_user_agent[current_agent].increment(kind)
    return current_agent
