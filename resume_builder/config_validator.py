"""Configuration validator for Resume Builder startup checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

REPORT_FORMATS = ("markdown", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Config dict as returned by ``load_raw_config``

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Report format ---
    report = raw_config.get("report", {})
    if not isinstance(report, dict):
        errors.append(ConfigError(
            field="report",
            message="report must be a mapping",
            severity=Severity.ERROR,
        ))
        report = {}
    fmt = report.get("format", "markdown")
    if fmt not in REPORT_FORMATS:
        errors.append(ConfigError(
            field="report.format",
            message=f"report.format must be one of {', '.join(REPORT_FORMATS)}, got {fmt!r}",
            severity=Severity.ERROR,
        ))

    # --- Logging ---
    logging_cfg = raw_config.get("logging", {})
    level = logging_cfg.get("level", "WARNING") if isinstance(logging_cfg, dict) else logging_cfg
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        errors.append(ConfigError(
            field="logging.level",
            message=f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}",
            severity=Severity.ERROR,
        ))

    # --- Store path ---
    store_path = raw_config.get("store_path", "")
    if not store_path or not isinstance(store_path, str):
        errors.append(ConfigError(
            field="store_path",
            message="store_path must be a non-empty string",
            severity=Severity.ERROR,
        ))

    # --- Workspace ---
    workspace_dir = raw_config.get("workspace_dir", ".")
    if not Path(str(workspace_dir)).exists():
        errors.append(ConfigError(
            field="workspace_dir",
            message=f"Workspace directory does not exist: {workspace_dir}",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
