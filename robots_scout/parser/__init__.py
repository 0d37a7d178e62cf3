# File: robots_scout/parser/__init__.py
"""robots_scout.parser: robots.txt tokenizer, analyzer and validator."""

from robots_scout.parser.analyzer import analyze
from robots_scout.parser.tokenizer import tokenize
from robots_scout.parser.validator import validate

__all__ = ["analyze", "tokenize", "validate"]
