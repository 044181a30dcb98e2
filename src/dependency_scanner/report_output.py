"""
Text and JSON renderings of dependency reports.
"""

import json
from pathlib import Path
from typing import List, Optional

from dependency_scanner.models import DependencyReport, ScanResult

SEPARATOR = "-" * 20


def format_report(report: DependencyReport) -> List[str]:
    """Lines printed for one file, separator included."""
    lines = [f"File: {report.file_path}", "Dependencies:"]
    lines.extend(f"  {dep}" for dep in report.dependencies)
    lines.append(SEPARATOR)
    return lines


class JSONReportWriter:
    """Serialize a whole scan as one JSON document."""

    @staticmethod
    def to_json(result: ScanResult) -> str:
        return json.dumps(result.to_dict(), indent=2)

    @classmethod
    def write(cls, result: ScanResult, output_path: Optional[Path] = None) -> str:
        """
        Render ``result`` and, when ``output_path`` is given, write it there.

        Returns:
            The JSON text
        """
        text = cls.to_json(result)
        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text + "\n", encoding="utf-8")
        return text
