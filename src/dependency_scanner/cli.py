import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dependency_scanner.config import load_config
from dependency_scanner.errors import (
    FileReadError,
    UsageError,
    show_no_files_help,
    validate_directory_exists,
)
from dependency_scanner.models import ScanResult
from dependency_scanner.report_output import JSONReportWriter, format_report
from dependency_scanner.scanner import Scanner

app = typer.Typer(
    help="Dependency Scanner: list the modules imported by JavaScript/TypeScript files",
    add_completion=False,
)
err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

OUTPUT_FORMATS = ("text", "json")


def _print_read_error(error: FileReadError):
    typer.echo(f"Error reading file {error.path}: {error.cause}", err=True)


def _print_summary(result: ScanResult):
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    read_errors = sum(1 for issue in result.issues if issue.kind == "read")
    traversal_errors = len(result.issues) - read_errors

    table.add_row("Files Scanned", str(result.files_scanned))
    table.add_row("Unique Dependencies", str(len(result.unique_dependencies)))
    table.add_row("Unreadable Files", f"[red]{read_errors}[/red]")
    table.add_row("Skipped Directories", f"[yellow]{traversal_errors}[/yellow]")

    err_console.print(table)


@app.command()
def scan(
    root: str = typer.Argument(..., help="Root directory to scan"),
    ignore: Optional[str] = typer.Argument(
        None, help='Comma-separated ignore patterns, e.g. "**/node_modules/**, *test*"'
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML config file (default: <root>/.depscan.toml)"
    ),
    format: str = typer.Option("text", help="Output format (text, json)"),
    output: Optional[Path] = typer.Option(None, help="Write the JSON report to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging and a summary"),
):
    """
    Scan ROOT for .js/.ts files and print the dependencies each one imports.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if format not in OUTPUT_FORMATS:
        err_console.print(f"[red]Error:[/red] unknown format {escape(format)!r}, expected text or json")
        raise typer.Exit(code=1)

    try:
        validate_directory_exists(root, "Root directory")
    except UsageError:
        # already reported by the validator
        raise typer.Exit(code=1)

    try:
        scan_config = load_config(Path(root), ignore=ignore, config_path=config)
    except UsageError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    scanner = Scanner(scan_config)

    if format == "text":
        result = ScanResult(root=scanner.root)
        for report in scanner.scan(on_read_error=_print_read_error):
            result.reports.append(report)
            for line in format_report(report):
                typer.echo(line)
        result.issues = list(scanner.issues)
    else:
        result = scanner.run(on_read_error=_print_read_error)
        text = JSONReportWriter.write(result, output)
        if output is None:
            typer.echo(text)
        else:
            err_console.print(f"[bold green]✓[/bold green] JSON report written to: {escape(str(output))}")

    if verbose:
        if not result.reports and not result.issues:
            show_no_files_help(scanner.root, scan_config.ignore_patterns)
        _print_summary(result)


if __name__ == "__main__":
    app()
