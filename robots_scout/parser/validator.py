# File: robots_scout/parser/validator.py
"""robots_scout.parser.validator: line-numbered syntax and semantics checks.

Every anomaly is reported as a message, nothing is raised. Errors make a file
invalid, warnings never do.
"""

from __future__ import annotations

import math
from typing import FrozenSet, Optional, Union

from robots_scout.logger import logger
from robots_scout.models import DirectiveLine, LineKind, ValidationResult
from robots_scout.parser.tokenizer import tokenize
from robots_scout.utils import is_absolute_url

__all__ = ["KNOWN_DIRECTIVES", "GROUP_DIRECTIVES", "validate"]

KNOWN_DIRECTIVES: FrozenSet[str] = frozenset(
    {
        "user-agent",
        "allow",
        "disallow",
        "crawl-delay",
        "crawldelay",
        "sitemap",
        "noindex",
        "request-rate",
        "visit-time",
        "host",
    }
)

# directives that belong to a user-agent group
GROUP_DIRECTIVES: FrozenSet[str] = frozenset(
    {"allow", "disallow", "crawl-delay", "crawldelay", "noindex"}
)

_CRAWL_DELAY = frozenset({"crawl-delay", "crawldelay"})


def validate(content: Union[str, bytes]) -> ValidationResult:
    """Check *content* line by line and collect warnings and errors.

    Messages are prefixed with ``"Line N: "`` and kept in file order.
    """
    result = ValidationResult()
    current_agent: Optional[str] = None

    for line in tokenize(content):
        if line.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue
        if line.kind is LineKind.MALFORMED:
            result.errors.append(
                f'Line {line.line_number}: Invalid syntax - missing colon: "{line.raw}"'
            )
            continue
        current_agent = _check_directive(line, current_agent, result)

    logger.debug(
        "Validated robots.txt: %d errors, %d warnings",
        len(result.errors),
        len(result.warnings),
    )
    return result


def _check_directive(
    line: DirectiveLine,
    current_agent: Optional[str],
    result: ValidationResult,
) -> Optional[str]:
    """Run all checks that apply to one directive; return the user-agent in effect."""
    prefix = f"Line {line.line_number}:"
    name, value = line.name, line.value

    if name not in KNOWN_DIRECTIVES:
        result.warnings.append(f'{prefix} Unknown directive "{name}"')

    if name == "user-agent":
        current_agent = value
        if not value:
            result.errors.append(f"{prefix} User-agent cannot be empty")

    if name in GROUP_DIRECTIVES and current_agent is None:
        result.warnings.append(
            f'{prefix} "{name}" directive should come after a User-agent directive'
        )

    if name in _CRAWL_DELAY and not _is_non_negative_number(value):
        result.errors.append(f"{prefix} Crawl-delay value must be a non-negative number")

    if name == "sitemap" and not is_absolute_url(value):
        result.errors.append(f'{prefix} Invalid sitemap URL: "{value}"')

    return current_agent


def _is_non_negative_number(value: str) -> bool:
    # float() also takes digit separators such as "1_000"
    if "_" in value:
        return False
    try:
        delay = float(value)
    except ValueError:
        return False
    return math.isfinite(delay) and delay >= 0
