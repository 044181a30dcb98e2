"""
Path filtering by ignore pattern and by file extension.
"""

import os
from typing import Iterable, List, Optional

from dependency_scanner.glob_matcher import match_wildcard

DEFAULT_EXTENSIONS = (".js", ".ts")


def parse_ignore_patterns(ignore_str: Optional[str]) -> List[str]:
    """
    Parse a comma-separated list of ignore patterns.

    Args:
        ignore_str: e.g. "node_modules/*, src/ignore.ts"

    Returns:
        Trimmed, non-empty patterns in their original order
    """
    if not ignore_str:
        return []
    return [part.strip() for part in ignore_str.split(",") if part.strip()]


def is_ignored(file_path: str, ignore_patterns: Iterable[str]) -> bool:
    """True if any pattern matches the full path or its basename."""
    base_name = os.path.basename(file_path)
    return any(
        match_wildcard(file_path, pattern) or match_wildcard(base_name, pattern)
        for pattern in ignore_patterns
    )


def filter_ignored_files(file_paths: Iterable[str], ignore_patterns: List[str]) -> List[str]:
    """Drop every path matched by an ignore pattern, keeping the rest in order."""
    return [path for path in file_paths if not is_ignored(path, ignore_patterns)]


def extname(file_path: str) -> str:
    """
    Extension of the last path segment, leading dot included.

    Like Node's path.extname: ".eslintrc" and ".." have none, "..ts" has ".ts".
    """
    base_name = os.path.basename(file_path)
    dot = base_name.rfind(".")
    if dot <= 0 or base_name == "..":
        return ""
    return base_name[dot:]


def filter_by_extension(file_paths: Iterable[str], extensions: Iterable[str]) -> List[str]:
    """Keep only paths whose extension (".ts", ".js", ...) is in ``extensions``."""
    allowed = set(extensions)
    return [path for path in file_paths if extname(path) in allowed]
