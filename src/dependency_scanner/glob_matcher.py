"""
Wildcard matching for ignore patterns.

Supported syntax:
    *    any run of characters except "/"
    **   any run of characters, "/" included
    **/  as a prefix, an optional leading directory path

Everything else matches literally, and matching is case-sensitive and
anchored at both ends of the path.
"""

import re
from functools import lru_cache

# Stands in for "**" while single stars are rewritten
_DOUBLE_STAR = "\0"

_REGEX_SPECIALS = re.compile(r"([.+?^${}()|\[\]\\])")


def glob_to_regex(pattern: str) -> str:
    """
    Translate a wildcard pattern into an anchored regular expression.

    Args:
        pattern: Wildcard pattern, e.g. "src/**/*.ts"

    Returns:
        Regular expression source, anchored with "^" and "\\Z"
    """
    prefix = "^"
    if pattern.startswith("**/"):
        prefix = "^(?:.*/)?"
        pattern = pattern[3:]

    body = pattern.replace("**", _DOUBLE_STAR)
    body = _REGEX_SPECIALS.sub(r"\\\1", body)
    body = body.replace("*", "[^/]*")
    body = body.replace(_DOUBLE_STAR, ".*")

    return prefix + body + r"\Z"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(glob_to_regex(pattern))


def match_wildcard(file_path: str, pattern: str) -> bool:
    """Return True if the whole of ``file_path`` matches ``pattern``."""
    return _compile(pattern).match(file_path) is not None
