"""
Tests for the command-line interface.
"""
import json
import os
from pathlib import Path

from typer.testing import CliRunner

from dependency_scanner.cli import app

runner = CliRunner()

SAMPLE_PROJECT = Path(__file__).parent / "fixtures" / "sample-project"


def test_text_output_format():
    """Test the exact per-file text report, using the project's .depscan.toml."""
    root = str(SAMPLE_PROJECT)
    result = runner.invoke(app, [root])

    assert result.exit_code == 0
    expected = "\n".join(
        [
            f"File: {os.path.join(root, 'src', 'config.ts')}",
            "Dependencies:",
            "--------------------",
            f"File: {os.path.join(root, 'src', 'index.ts')}",
            "Dependencies:",
            "  express",
            "  ./config",
            "  ./polyfills",
            "  path",
            "--------------------",
            f"File: {os.path.join(root, 'src', 'lib', 'util.js')}",
            "Dependencies:",
            "  fs",
            "  path",
            "  lodash",
            "--------------------",
            f"File: {os.path.join(root, 'src', 'lib', 'util.test.js')}",
            "Dependencies:",
            "  ./util",
            "  assert",
            "--------------------",
        ]
    )
    assert result.stdout == expected + "\n"


def test_ignore_argument_replaces_config_patterns():
    """Test that the positional ignore string wins over .depscan.toml."""
    result = runner.invoke(app, [str(SAMPLE_PROJECT), "*.ts, *test*, util.js"])

    assert result.exit_code == 0
    files = [line[len("File: "):] for line in result.stdout.splitlines() if line.startswith("File: ")]
    assert [os.path.relpath(f, SAMPLE_PROJECT) for f in files] == [
        "jest.config.js",
        os.path.join("node_modules", "left-pad", "index.js"),
    ]


def test_missing_root_argument():
    """Test that running without a root directory is a usage error."""
    result = runner.invoke(app, [])

    assert result.exit_code != 0


def test_nonexistent_root(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "nope")])

    assert result.exit_code == 1
    assert "not found" in result.output
    assert result.output.count("not found") == 1


def test_root_is_a_file(tmp_path):
    target = tmp_path / "file.js"
    target.write_text("require('x');")

    result = runner.invoke(app, [str(target)])

    assert result.exit_code == 1
    assert "is not a directory" in result.output


def test_unreadable_file_reported_and_skipped(tmp_path):
    """Test that a read failure is reported and the scan still succeeds."""
    (tmp_path / "bad.js").write_bytes(b"\xff\xfe\xfa")
    (tmp_path / "good.ts").write_text("import x from 'x';")

    result = runner.invoke(app, [str(tmp_path)])

    assert result.exit_code == 0
    assert f"Error reading file {tmp_path / 'bad.js'}" in result.output
    assert f"File: {tmp_path / 'good.ts'}" in result.output
    assert f"File: {tmp_path / 'bad.js'}" not in result.output


def test_json_output(tmp_path):
    (tmp_path / "a.ts").write_text("import a from 'a';\nconst b = require('b');")

    result = runner.invoke(app, [str(tmp_path), "--format", "json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["root"] == str(tmp_path)
    assert data["files"] == [{"file": str(tmp_path / "a.ts"), "dependencies": ["a", "b"]}]
    assert data["errors"] == []


def test_json_output_file(tmp_path):
    project = tmp_path / "project"
    project.mkdir()
    (project / "index.js").write_text("require('react');")
    report_path = tmp_path / "out" / "deps.json"

    result = runner.invoke(app, [str(project), "--format", "json", "--output", str(report_path)])

    assert result.exit_code == 0
    data = json.loads(report_path.read_text())
    assert data["files"][0]["dependencies"] == ["react"]


def test_unknown_format(tmp_path):
    result = runner.invoke(app, [str(tmp_path), "--format", "xml"])

    assert result.exit_code == 1
    assert "unknown format" in result.output


def test_verbose_summary(tmp_path):
    (tmp_path / "a.ts").write_text("import a from 'a';")

    result = runner.invoke(app, [str(tmp_path), "--verbose"])

    assert result.exit_code == 0
    assert "Files Scanned" in result.output
    assert "Unique Dependencies" in result.output


def test_text_output_keeps_specifier_characters(tmp_path):
    """Test that tabs and other control characters in a specifier are printed as-is."""
    (tmp_path / "a.js").write_text("require('a\tb');\nrequire('c\fd');\n")

    result = runner.invoke(app, [str(tmp_path)])

    assert result.exit_code == 0
    assert "Dependencies:\n  a\tb\n  c\fd\n--------------------\n" in result.stdout


def test_json_output_keeps_line_endings(tmp_path):
    """Test that a CRLF inside a specifier survives into the JSON report."""
    (tmp_path / "a.js").write_bytes(b"require('x\r\ny');\r\n")

    result = runner.invoke(app, [str(tmp_path), "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["files"][0]["dependencies"] == ["x\r\ny"]
