"""
JavaScript/TypeScript import extraction.
"""

import logging
import re
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

# import foo from 'bar';  import { baz } from "qux";  import 'side-effect';
ES6_IMPORT_RE = re.compile(r"""import\s+(?:[^'"]+\s+from\s+)?['"]([^'"]+)['"]""")

# const x = require('module');
REQUIRE_RE = re.compile(r"""require\s*\(\s*['"]([^'"]+)['"]\s*\)""")


def extract_dependencies(content: str) -> List[str]:
    """
    Extract module specifiers imported by a JavaScript/TypeScript source.

    ES6 imports are collected first, then CommonJS require calls. Each
    specifier is kept once, at the position of its first occurrence.
    This is pattern matching over raw text, so imports inside comments or
    string literals are reported too.
    """
    dependencies: dict[str, None] = {}

    for pattern in (ES6_IMPORT_RE, REQUIRE_RE):
        for match in pattern.finditer(content):
            dependencies.setdefault(match.group(1), None)

    return list(dependencies)


class DependencyExtractor:
    """Extract imports from one JavaScript/TypeScript file."""

    def __init__(self, filename: str | Path):
        self.filename = str(filename)
        self.imports: List[str] = []

    def extract(self, content: str) -> List[str]:
        """Extract and remember the module specifiers in ``content``."""
        self.imports = extract_dependencies(content)
        logger.debug("%s: %d dependencies", self.filename, len(self.imports))
        return self.imports
