"""
Scan result data models.
"""

from dataclasses import dataclass, field, asdict
from typing import List


@dataclass
class DependencyReport:
    """The module specifiers imported by one source file."""

    file_path: str
    dependencies: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"file": self.file_path, "dependencies": list(self.dependencies)}


@dataclass
class ScanIssue:
    """A file or directory that was skipped because of an error."""

    file_path: str
    kind: str  # "read", "traversal"
    message: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["file"] = data.pop("file_path")
        return data


@dataclass
class ScanResult:
    """Everything a single scan produced."""

    root: str
    reports: List[DependencyReport] = field(default_factory=list)
    issues: List[ScanIssue] = field(default_factory=list)

    @property
    def files_scanned(self) -> int:
        return len(self.reports)

    @property
    def unique_dependencies(self) -> List[str]:
        seen: dict[str, None] = {}
        for report in self.reports:
            for dep in report.dependencies:
                seen.setdefault(dep, None)
        return list(seen)

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "files": [report.to_dict() for report in self.reports],
            "errors": [issue.to_dict() for issue in self.issues],
        }
