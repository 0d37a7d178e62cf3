# File: robots_scout/report/__init__.py
"""robots_scout.report: report writers used by the CLI."""

from robots_scout.report.json_report import render_json

__all__ = ["render_json"]
