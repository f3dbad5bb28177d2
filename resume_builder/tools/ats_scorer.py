"""ATS (Applicant Tracking System) scoring tool for resume snapshots."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..domain.ats_scorer import calculate_ats_score, format_ats_report, score_label
from ..domain.models import ResumeSnapshot
from ..storage import StoreError, is_store_payload, snapshot_from_store_payload
from .base import BaseTool, ToolResult

logger = logging.getLogger(__name__)


class ATSScorerTool(BaseTool):
    """Score a saved resume snapshot for ATS compatibility."""

    name = "ats_score"
    description = """Score a resume snapshot (JSON) for ATS compatibility. Returns a score (0-100),
a letter grade, a breakdown over seven sections and an ordered list of suggestions.
Accepts either a plain snapshot or a saved form-state store file."""
    parameters = {
        "path": {
            "type": "string",
            "description": "Path to the JSON snapshot or store file to score",
            "required": True,
        },
    }

    def __init__(self, workspace_dir: str = "."):
        self.workspace_dir = Path(workspace_dir).resolve()

    async def execute(self, path: str = "") -> ToolResult:
        missing = self.missing_parameters(path=path)
        if missing:
            return ToolResult.failure(f"Missing required parameter(s): {', '.join(missing)}")

        try:
            file_path = self._resolve_path(path)
            if not file_path.exists():
                return ToolResult.failure(f"File not found: {path}")

            content = file_path.read_text(encoding="utf-8")
            if not content.strip():
                return ToolResult.failure(f"File is empty: {path}")

            snapshot = self._parse_snapshot(content)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON in %s: %s", path, e)
            return ToolResult.failure(f"Invalid JSON in {path}: {e}")
        except (ValidationError, StoreError) as e:
            logger.warning("Unreadable resume snapshot %s: %s", path, e)
            return ToolResult.failure(f"Not a valid resume snapshot: {path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            return ToolResult.failure(str(e))

        result = calculate_ats_score(snapshot)
        logger.debug("Scored %s: %d (%s)", file_path, result.total_score, result.grade)

        data = result.to_dict()
        data["label"] = score_label(result.total_score)
        return ToolResult(success=True, output=format_ats_report(result), data=data)

    @staticmethod
    def _parse_snapshot(content: str) -> ResumeSnapshot:
        data = json.loads(content)
        if is_store_payload(data):
            return snapshot_from_store_payload(data)
        if not isinstance(data, dict):
            raise StoreError("Top-level JSON value must be an object")
        return ResumeSnapshot.from_dict(data)

    def _resolve_path(self, path: str) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p
