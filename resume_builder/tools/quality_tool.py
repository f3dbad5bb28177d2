"""Content quality tool - score free text for resume writing strength."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.quality_evaluator import (
    MAX_QUALITY_SCORE,
    QualityScore,
    evaluate_content_quality,
    evaluate_multiple_texts,
    quality_feedback,
)
from .base import BaseTool, ToolResult

logger = logging.getLogger(__name__)


class ContentQualityTool(BaseTool):
    """Evaluate a summary or a set of bullet points for quality signals."""

    name = "content_quality"
    description = """Score resume text on action verbs, quantified metrics, technical depth
and professional tone (0-25). Pass `text` for one block or `texts` to score
several bullet points as one corpus."""
    parameters = {
        "text": {
            "type": "string",
            "description": "A single block of text to evaluate",
        },
        "texts": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Several texts (e.g. bullet points) evaluated together",
        },
    }

    async def execute(self, text: str = "", texts: Optional[List[str]] = None) -> ToolResult:
        if texts is not None:
            score = evaluate_multiple_texts(texts)
            logger.debug("Evaluated %d texts: %d/%d", len(texts), score.total_score, MAX_QUALITY_SCORE)
        else:
            score = evaluate_content_quality(text)
            logger.debug("Evaluated text: %d/%d", score.total_score, MAX_QUALITY_SCORE)

        return ToolResult(success=True, output=self._format_report(score), data=score.to_dict())

    @staticmethod
    def _format_report(score: QualityScore) -> str:
        d = score.details
        lines = [
            f"## Content Quality: {score.total_score}/{MAX_QUALITY_SCORE}",
            quality_feedback(score.total_score),
            "",
            "| Signal            | Score | Found |",
            "|-------------------|-------|-------|",
            f"| Action verbs      | {score.action_verbs_score:2d}/8  | {d.action_verbs_found:5d} |",
            f"| Metrics           | {score.metrics_score:2d}/8  | {d.metrics_found:5d} |",
            f"| Technical depth   | {score.technical_depth_score:2d}/6  | {d.technical_terms_found:5d} |",
            f"| Professional tone | {score.professional_tone_score:2d}/3  | {'generic' if d.has_generic_phrases else 'ok':>5} |",
        ]
        if d.has_generic_phrases:
            lines.append("")
            lines.append("Replace generic phrases (e.g. 'responsible for', 'team player') with concrete achievements.")
        return "\n".join(lines)
