# robots_scout/__init__.py
"""
RobotsScout package initializer.
Defines package version and exposes the analyzer, the validator and the CLI.
"""
__version__ = "0.1.0"

from robots_scout.parser.analyzer import analyze
from robots_scout.parser.validator import validate

# Expose CLI entry point; the name keeps `robots_scout.cli` bound to the module
from robots_scout.cli import cli as main_cli

__all__ = ["__version__", "analyze", "validate", "main_cli"]
