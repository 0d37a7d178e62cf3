# File: robots_scout/parser/tokenizer.py
"""robots_scout.parser.tokenizer: splitting robots.txt text into classified lines."""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Union

from robots_scout.models import DirectiveLine, LineKind

__all__ = (
    "split_lines",
    "classify",
    "tokenize",
    "directive_kind",
    "decode_content",
)

# not str.splitlines(): form feeds and unicode separators are not line breaks here
_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")

# whitespace trimmed around lines, names and values; form feeds and unicode spaces are kept
_TRIM_CHARS = " \t\n\r\0\x0b"

_KIND_BY_NAME: Dict[str, str] = {
    "user-agent": "user_agent",
    "allow": "allow",
    "disallow": "disallow",
    "crawl-delay": "crawl_delay",
    "crawldelay": "crawl_delay",
    "noindex": "noindex",
    "sitemap": "sitemap",
}


def decode_content(content: Union[str, bytes]) -> str:
    """Return *content* as text; undecodable bytes are replaced, never fatal."""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def split_lines(content: str) -> List[str]:
    """Split on ``\\r\\n``, ``\\n`` or a bare ``\\r``, in any mixture."""
    return _LINE_BREAK_RE.split(content)


def classify(raw: str, line_number: int) -> DirectiveLine:
    """Classify one line as blank, comment, malformed or a name/value directive."""
    line = raw.strip(_TRIM_CHARS)
    if not line:
        return DirectiveLine(line_number, raw, LineKind.BLANK)
    if line.startswith("#"):
        return DirectiveLine(line_number, raw, LineKind.COMMENT)

    name, sep, value = line.partition(":")
    if not sep:
        return DirectiveLine(line_number, raw, LineKind.MALFORMED)
    return DirectiveLine(
        line_number,
        raw,
        LineKind.DIRECTIVE,
        name.strip(_TRIM_CHARS).lower(),
        value.strip(_TRIM_CHARS),
    )


def tokenize(content: Union[str, bytes]) -> Iterator[DirectiveLine]:
    """Yield a :class:`DirectiveLine` for every line, numbered from 1."""
    for number, raw in enumerate(split_lines(decode_content(content)), start=1):
        yield classify(raw, number)


def directive_kind(name: str) -> str:
    """Map a lowercased directive name to its counter (``crawldelay`` → ``crawl_delay``)."""
    return _KIND_BY_NAME.get(name, "other")
