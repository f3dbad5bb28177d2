"""Pure domain logic for ATS (Applicant Tracking System) resume scoring.

Scores a structured :class:`ResumeSnapshot` across seven weighted sections,
delegating text quality to the content quality evaluator.
All functions operate on in-memory data -- no file I/O.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Tuple

from .models import ResumeSnapshot, is_present
from .quality_evaluator import MAX_QUALITY_SCORE, evaluate_content_quality, evaluate_multiple_texts

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SECTION_CEILINGS: Dict[str, int] = {
    "contact_info": 10,
    "summary": 15,
    "experience": 30,
    "education": 15,
    "skills": 10,
    "projects": 10,
    "formatting": 10,
}

SECTION_TITLES: Dict[str, str] = {
    "contact_info": "Contact Info",
    "summary": "Summary",
    "experience": "Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "formatting": "Formatting",
}

GRADE_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (95, "A+"),
    (90, "A"),
    (85, "B+"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)

SUMMARY_WORD_RANGE = (30, 100)
SUMMARY_MAX_CHARS = 600
MIN_SECTIONS = 3


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-section points; each field is capped by :data:`SECTION_CEILINGS`."""

    contact_info: int = 0
    summary: int = 0
    experience: int = 0
    education: int = 0
    skills: int = 0
    projects: int = 0
    formatting: int = 0

    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> Dict[str, int]:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ATSScore:
    """Structured result from ATS scoring."""

    total_score: int
    breakdown: ScoreBreakdown
    feedback: Tuple[str, ...]
    grade: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "breakdown": self.breakdown.as_dict(),
            "feedback": list(self.feedback),
            "grade": self.grade,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_ats_score(resume: ResumeSnapshot) -> ATSScore:
    """Score *resume* out of 100 with a letter grade and ordered feedback.

    The first feedback entry is always a headline for the overall score;
    the rest follow section order (contact, summary, experience, education,
    skills, projects, formatting).
    """
    feedback: List[str] = []
    scores: Dict[str, int] = {}

    for section, check in _SECTION_CHECKS:
        points, issues = check(resume)
        scores[section] = _clamp(points, 0, SECTION_CEILINGS[section])
        feedback.extend(issues)

    breakdown = ScoreBreakdown(**scores)
    total = _clamp(breakdown.total(), 0, 100)
    feedback.insert(0, _headline(total))

    return ATSScore(
        total_score=total,
        breakdown=breakdown,
        feedback=tuple(feedback),
        grade=score_to_grade(total),
    )


def score_to_grade(score: int) -> str:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return "F"


def score_label(score: int) -> str:
    """Coarse label for an overall 0-100 score."""
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 60:
        return "Fair"
    else:
        return "Needs Work"


def section_rating(score: int, ceiling: int) -> str:
    """Rate a section score by how close it is to its ceiling."""
    percentage = score / ceiling * 100 if ceiling else 0
    if percentage >= 80:
        return "strong"
    if percentage >= 60:
        return "good"
    if percentage >= 40:
        return "fair"
    return "weak"


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_ats_report(result: ATSScore) -> str:
    """Render an :class:`ATSScore` as a human-readable Markdown report."""
    lines = [
        f"## ATS Score: {result.total_score}/100 (Grade {result.grade}) {score_label(result.total_score)}",
        _score_bar(result.total_score),
        "",
        "| Section      | Score | Max |",
        "|--------------|-------|-----|",
    ]
    for f in fields(result.breakdown):
        score = getattr(result.breakdown, f.name)
        lines.append(f"| {SECTION_TITLES[f.name]:<12} | {score:3d}   | {SECTION_CEILINGS[f.name]:3d} |")

    if result.feedback:
        lines.append("")
        lines.append(f"**{result.feedback[0]}**")
    if len(result.feedback) > 1:
        lines.append("")
        lines.append("### Suggestions")
        for i, s in enumerate(result.feedback[1:], 1):
            lines.append(f"{i}. {s}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private section checks
# ---------------------------------------------------------------------------


def _check_contact_info(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    info = resume.personal_info
    score = 0
    issues: List[str] = []

    if is_present(info.first_name) and is_present(info.last_name):
        score += 3
    else:
        issues.append("Add your full name")

    if is_present(info.email) and "@" in info.email:
        score += 3
    else:
        issues.append("Add a valid email address")

    if is_present(info.phone):
        score += 2
    else:
        issues.append("Add your phone number")

    if is_present(info.linkedin) or is_present(info.github):
        score += 2
    else:
        issues.append("Add LinkedIn or GitHub profile")

    return score, issues


def _check_summary(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    if not is_present(resume.summary):
        return 0, ["Add a professional summary"]

    issues: List[str] = []
    quality = evaluate_content_quality(resume.summary)
    word_count = len(resume.summary.split())

    score = 5 + min(8, quality.total_score / 3)

    low, high = SUMMARY_WORD_RANGE
    if low <= word_count <= high:
        score += 2
    elif word_count < low:
        issues.append(f"Summary is too short (aim for {low}-{high} words)")
    else:
        issues.append(f"Summary is too long (aim for {low}-{high} words)")

    return _round_half_up(score), issues


def _check_experience(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    if not resume.experience:
        return 0, ["Add work experience entries"]

    score = 0.0
    issues: List[str] = []

    valid = [
        exp
        for exp in resume.experience
        if is_present(exp.company) and is_present(exp.title) and is_present(exp.start_date)
    ]
    if len(valid) >= 2:
        score += 10
    elif len(valid) == 1:
        score += 7

    bullets = [b for exp in resume.experience for b in exp.bullet_points if is_present(b)]
    if bullets:
        quality = evaluate_multiple_texts(bullets)
        score += min(15, quality.total_score / MAX_QUALITY_SCORE * 15)

        if len(bullets) >= 5:
            score += 5
        elif len(bullets) >= 3:
            score += 3
        else:
            issues.append("Add more bullet points to your experience (aim for 3-5 per role)")
    else:
        issues.append("Add bullet points describing your responsibilities and achievements")

    return _round_half_up(score), issues


def _check_education(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    if not resume.education:
        return 0, ["Add education information"]

    valid = [
        edu
        for edu in resume.education
        if is_present(edu.university) and is_present(edu.degree) and is_present(edu.field)
    ]
    if not valid:
        return 0, ["Complete your education information (university, degree, field)"]

    score = 10
    if any(is_present(edu.start_date) and is_present(edu.end_date) for edu in valid):
        score += 3
    if any(is_present(edu.city) for edu in valid):
        score += 2
    return score, []


def _check_skills(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    count = len({s.strip().lower() for s in resume.skills if is_present(s)})

    if count == 0:
        return 0, ["Add your technical and professional skills"]
    if count >= 8:
        return 10, []
    if count >= 5:
        return 8, []
    if count >= 3:
        return 6, []
    return 3, ["Add more skills (aim for at least 5-8 relevant skills)"]


def _check_projects(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    if not resume.projects:
        return 0, ["Consider adding relevant projects"]

    valid = [
        proj
        for proj in resume.projects
        if is_present(proj.name)
        and any(is_present(t) for t in proj.technologies)
        and any(is_present(b) for b in proj.bullet_points)
    ]
    if len(valid) >= 2:
        score = 10
    elif len(valid) == 1:
        score = 7
    else:
        score = 0

    if any(is_present(proj.link) for proj in valid):
        score += 1

    return min(SECTION_CEILINGS["projects"], score), []


def _check_formatting(resume: ResumeSnapshot) -> Tuple[float, List[str]]:
    sections = sum(
        [
            is_present(resume.summary),
            _has_entries(resume.experience),
            _has_entries(resume.education),
            any(is_present(s) for s in resume.skills),
            _has_entries(resume.projects),
        ]
    )
    # Nothing to lay out yet.
    if sections == 0:
        return 0, ["Add more sections for a complete resume"]

    score = 10
    issues: List[str] = []

    if is_present(resume.summary) and len(resume.summary) > SUMMARY_MAX_CHARS:
        score -= 2
        issues.append("Summary is too long (may be truncated by ATS)")

    if sections < MIN_SECTIONS:
        score -= 3
        issues.append("Add more sections for a complete resume")

    return score, issues


_SECTION_CHECKS = (
    ("contact_info", _check_contact_info),
    ("summary", _check_summary),
    ("experience", _check_experience),
    ("education", _check_education),
    ("skills", _check_skills),
    ("projects", _check_projects),
    ("formatting", _check_formatting),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _headline(total: int) -> str:
    if total >= 90:
        return "Excellent! Your resume is well-optimized for ATS systems."
    elif total >= 75:
        return "Good resume! Minor improvements will make it even better."
    elif total >= 60:
        return "Fair resume. Follow the suggestions below to improve."
    else:
        return "Your resume needs improvement. Focus on the key areas below."


def _has_entries(entries) -> bool:
    """True when any entry has a non-blank text field or list item."""
    for entry in entries:
        for value in entry.model_dump().values():
            if isinstance(value, str) and is_present(value):
                return True
            if isinstance(value, (list, tuple)) and any(is_present(item) for item in value):
                return True
    return False


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: int, high: int) -> int:
    return int(max(low, min(high, _round_half_up(value))))


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
