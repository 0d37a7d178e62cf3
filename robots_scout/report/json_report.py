# robots_scout/report/json_report.py

"""
JSON report generation for RobotsScout.

Serialises an AnalysisResult or ValidationResult to a file.
"""
import json
from pathlib import Path
from typing import Union

from robots_scout.models import AnalysisResult, ValidationResult


def render_json(
    result: Union[AnalysisResult, ValidationResult],
    output_path: Union[Path, str],
    *,
    pretty: bool = True,
) -> Path:
    """
    Save *result* as JSON at the given path.

    :param result: analysis or validation result
    :param output_path: path of the JSON file
    :param pretty: indent the output (2 spaces)
    :return: Path of the saved file

    Example:
    ```python
    from robots_scout.report.json_report import render_json
    report_path = render_json(analyze(text), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.as_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
