# File: robots_scout/models.py
"""robots_scout.models: result containers for robots.txt analysis and validation."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LineKind(str, Enum):
    """Structural class of one robots.txt line."""

    BLANK = "blank"
    COMMENT = "comment"
    MALFORMED = "malformed"
    DIRECTIVE = "directive"


@dataclass(frozen=True, slots=True)
class DirectiveLine:
    """One tokenized line: its number, original text and name/value split."""

    line_number: int
    raw: str
    kind: LineKind
    name: str = ""
    value: str = ""


@dataclass(slots=True)
class DirectiveCounts:
    """Directive counters kept for a single user-agent group."""

    allow: int = 0
    crawl_delay: int = 0
    disallow: int = 0
    noindex: int = 0
    other: int = 0

    def increment(self, kind: str) -> None:
        setattr(self, kind, getattr(self, kind) + 1)


@dataclass(slots=True)
class TypeCounts:
    """Directive counters for the whole file, by directive kind."""

    allow: int = 0
    crawl_delay: int = 0
    disallow: int = 0
    noindex: int = 0
    other: int = 0
    sitemap: int = 0
    user_agent: int = 0

    def increment(self, kind: str) -> None:
        setattr(self, kind, getattr(self, kind) + 1)

    def total(self) -> int:
        return sum(asdict(self).values())


@dataclass(slots=True)
class AnalysisResult:
    """Aggregate statistics of a robots.txt file."""

    comment_count: int = 0
    size: int = 0
    size_kib: float = 0.0
    over_size_limit: bool = False
    by_type: TypeCounts = field(default_factory=TypeCounts)
    by_user_agent: Dict[str, DirectiveCounts] = field(default_factory=dict)
    sitemaps: List[str] = field(default_factory=list)
    status: int = 200
    redirected: bool = False
    # only set by the URL fetch path when the download was cut off
    size_limit_exceeded: Optional[bool] = None
    partial_content: Optional[bool] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the result in its serialised shape (``record_counts`` etc.)."""
        data: Dict[str, Any] = {
            "comment_count": self.comment_count,
            "over_google_limit": self.over_size_limit,
            "record_counts": {
                "by_type": asdict(self.by_type),
                "by_useragent": {ua: asdict(c) for ua, c in self.by_user_agent.items()},
            },
            "sitemaps": list(self.sitemaps),
            "redirected": self.redirected,
            "size": self.size,
            "size_kib": self.size_kib,
            "status": self.status,
        }
        if self.size_limit_exceeded is not None:
            data["size_limit_exceeded"] = self.size_limit_exceeded
        if self.partial_content is not None:
            data["partial_content"] = self.partial_content
        return data

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


@dataclass(slots=True)
class ValidationResult:
    """Line-numbered diagnostics of a robots.txt file."""

    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


__all__ = [
    "LineKind",
    "DirectiveLine",
    "DirectiveCounts",
    "TypeCounts",
    "AnalysisResult",
    "ValidationResult",
]
