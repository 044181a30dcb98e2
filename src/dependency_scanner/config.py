"""Scan configuration: pydantic model plus optional TOML file."""

import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from dependency_scanner.errors import UsageError
from dependency_scanner.filters import DEFAULT_EXTENSIONS, parse_ignore_patterns

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_CONFIG_NAME = ".depscan.toml"


class ScanConfig(BaseModel):
    """What to scan and what to leave out."""

    root: Path
    ignore_patterns: list[str] = Field(
        default_factory=list,
        description="Wildcard patterns matched against full paths and basenames",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions to scan, dot included",
    )

    @field_validator("ignore_patterns", mode="before")
    @classmethod
    def _split_ignore_string(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return parse_ignore_patterns(value)
        return value

    @field_validator("extensions")
    @classmethod
    def _check_extensions(cls, value: list[str]) -> list[str]:
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.': {ext!r}")
        return value


class ConfigLoader:
    """Merge the [scan] table of a TOML file with command-line values."""

    def __init__(self, config_path: Path | None = None) -> None:
        """
        Args:
            config_path: Explicit config file. When None, ``.depscan.toml``
                in the scanned root is used if it exists.
        """
        self.config_path = config_path

    def load(self, root: Path, ignore: str | None = None) -> ScanConfig:
        """Load configuration with priority: CLI > config file > defaults.

        Args:
            root: Directory to scan
            ignore: Comma-separated ignore patterns from the command line

        Returns:
            Validated ScanConfig

        Raises:
            UsageError: If the config file is unreadable or has bad values
        """
        values: dict[str, Any] = {"root": root}

        path = self.config_path or root / DEFAULT_CONFIG_NAME
        if self.config_path is not None or path.is_file():
            scan_table = self._load_toml(path).get("scan", {})
            if "ignore" in scan_table:
                values["ignore_patterns"] = scan_table["ignore"]
            if "extensions" in scan_table:
                values["extensions"] = scan_table["extensions"]

        if ignore is not None:
            values["ignore_patterns"] = ignore

        try:
            return ScanConfig(**values)
        except ValidationError as exc:
            raise UsageError(f"Invalid configuration in {path}: {exc}") from exc

    def _load_toml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except OSError as exc:
            raise UsageError(f"Cannot read config file {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise UsageError(f"Invalid TOML in {path}: {exc}") from exc


def load_config(root: Path, ignore: str | None = None, config_path: Path | None = None) -> ScanConfig:
    """Helper to load configuration for a scan root with CLI overrides."""
    return ConfigLoader(config_path=config_path).load(root, ignore=ignore)
