"""Resume Builder Domain - Pure scoring logic for resume snapshots.

This package contains pure functions with no file system dependencies.
All I/O is handled by the tools and storage layers; this package operates on
strings and :class:`ResumeSnapshot` values.
"""

from .ats_scorer import (
    SECTION_CEILINGS,
    ATSScore,
    ScoreBreakdown,
    calculate_ats_score,
    format_ats_report,
    score_label,
    score_to_grade,
    section_rating,
)
from .models import Education, Experience, Leadership, PersonalInfo, Project, ResumeSnapshot, is_present
from .quality_evaluator import (
    QualityDetails,
    QualityScore,
    evaluate_content_quality,
    evaluate_multiple_texts,
    quality_feedback,
)

__all__ = [
    # Models
    "ResumeSnapshot",
    "PersonalInfo",
    "Education",
    "Experience",
    "Project",
    "Leadership",
    "is_present",
    # Quality evaluator
    "evaluate_content_quality",
    "evaluate_multiple_texts",
    "quality_feedback",
    "QualityScore",
    "QualityDetails",
    # ATS scorer
    "calculate_ats_score",
    "format_ats_report",
    "score_to_grade",
    "score_label",
    "section_rating",
    "SECTION_CEILINGS",
    "ATSScore",
    "ScoreBreakdown",
]
