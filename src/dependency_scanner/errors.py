"""
Scan error types and user-friendly validation.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False, soft_wrap=True)


class ScanError(Exception):
    """Base class for scanner errors."""

    pass


class UsageError(ScanError):
    """The scan cannot start: bad root directory or bad configuration."""

    pass


class FileReadError(ScanError):
    """A single source file could not be read. The scan continues without it."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading file {path}: {cause}")


class TraversalError(ScanError):
    """A directory could not be listed or an entry could not be stat-ed."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error traversing {path}: {cause}")


def validate_directory_exists(dirpath: str, dir_description: str) -> Path:
    """
    Validate that a directory exists and is accessible.

    Args:
        dirpath: Path to check
        dir_description: User-friendly description

    Returns:
        Path object if valid

    Raises:
        UsageError with helpful message
    """
    path = Path(dirpath)

    if not path.exists():
        console.print(f"[red]Error:[/red] {escape(dir_description)} not found")
        console.print(f"[dim]Looked for: {escape(str(path.absolute()))}[/dim]")
        raise UsageError(f"{dir_description} not found: {dirpath}")

    if not path.is_dir():
        console.print(f"[red]Error:[/red] {escape(dirpath)} is not a directory")
        raise UsageError(f"{dirpath} is not a directory")

    return path


def show_no_files_help(root: str, ignore_patterns: list[str]):
    """Show a hint when nothing was left to scan."""
    console.print(f"\n[yellow]No JavaScript/TypeScript files found under {escape(root)}[/yellow]")

    if ignore_patterns:
        console.print("\n[cyan]Active ignore patterns:[/cyan]")
        for pattern in ignore_patterns:
            console.print(f"  • {escape(pattern)}")
        console.print(
            "\n[yellow]Tip:[/yellow] A pattern is checked against both the full path and the file name"
        )
