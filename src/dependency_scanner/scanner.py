"""
File system traversal and per-file dependency extraction.
"""

import logging
import os
import stat
from typing import Callable, Iterator, List, Optional

from dependency_scanner.config import ScanConfig
from dependency_scanner.errors import FileReadError, TraversalError
from dependency_scanner.extractor import DependencyExtractor
from dependency_scanner.filters import filter_by_extension, filter_ignored_files
from dependency_scanner.models import DependencyReport, ScanIssue, ScanResult

logger = logging.getLogger(__name__)


def walk_files(
    root: str,
    on_error: Optional[Callable[[TraversalError], None]] = None,
) -> Iterator[str]:
    """
    Yield every file path under ``root``, depth first.

    Directory entries are visited in sorted order and subdirectories are
    expanded in place. A directory that cannot be listed, or an entry that
    cannot be stat-ed, is reported to ``on_error`` and skipped.
    """
    try:
        names = sorted(os.listdir(root))
    except OSError as exc:
        _report(TraversalError(root, exc), on_error)
        return

    for name in names:
        full_path = os.path.normpath(os.path.join(root, name))
        try:
            is_dir = stat.S_ISDIR(os.stat(full_path).st_mode)
        except OSError as exc:
            _report(TraversalError(full_path, exc), on_error)
            continue

        if is_dir:
            yield from walk_files(full_path, on_error)
        else:
            yield full_path


def _report(error: TraversalError, on_error: Optional[Callable[[TraversalError], None]]):
    logger.warning("%s", error)
    if on_error is not None:
        on_error(error)


class Scanner:
    """
    Find JavaScript/TypeScript files under a root and extract their imports.
    """

    def __init__(self, config: ScanConfig):
        self.config = config
        self.root = str(config.root)
        self.issues: List[ScanIssue] = []

    def _record_traversal_error(self, error: TraversalError):
        self.issues.append(ScanIssue(file_path=error.path, kind="traversal", message=str(error.cause)))

    def collect_files(self) -> List[str]:
        """All scannable files, in traversal order, after both filters."""
        files = list(walk_files(self.root, on_error=self._record_traversal_error))
        files = filter_by_extension(files, self.config.extensions)
        files = filter_ignored_files(files, self.config.ignore_patterns)
        logger.debug("%d files to scan under %s", len(files), self.root)
        return files

    def read_file(self, file_path: str) -> str:
        """Read a source file as UTF-8, raising FileReadError on failure."""
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(file_path, exc) from exc

    def scan(self, on_read_error: Optional[Callable[[FileReadError], None]] = None) -> Iterator[DependencyReport]:
        """
        Yield one report per readable file.

        Unreadable files are recorded in ``issues``, passed to
        ``on_read_error`` and skipped; they never stop the scan.
        """
        for file_path in self.collect_files():
            try:
                content = self.read_file(file_path)
            except FileReadError as e:
                logger.debug("skipping %s: %s", file_path, e.cause)
                self.issues.append(ScanIssue(file_path=file_path, kind="read", message=str(e.cause)))
                if on_read_error is not None:
                    on_read_error(e)
                continue

            extractor = DependencyExtractor(file_path)
            yield DependencyReport(file_path=file_path, dependencies=extractor.extract(content))

    def run(self, on_read_error: Optional[Callable[[FileReadError], None]] = None) -> ScanResult:
        """Scan everything and return the collected result."""
        self.issues = []
        reports = list(self.scan(on_read_error))
        return ScanResult(root=self.root, reports=reports, issues=list(self.issues))
