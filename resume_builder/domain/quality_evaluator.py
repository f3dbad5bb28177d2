"""Pure domain logic for rule-based content quality evaluation.

Scores a block of free text on four independent signals: action verbs,
quantified metrics, technical depth and professional tone.
All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Pattern, Tuple

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_VERB_THEMES: Dict[str, Tuple[str, ...]] = {
    "leadership": (
        "led",
        "managed",
        "directed",
        "coordinated",
        "supervised",
        "mentored",
        "coached",
        "guided",
        "oversaw",
        "facilitated",
        "orchestrated",
        "spearheaded",
        "championed",
    ),
    "achievement": (
        "achieved",
        "accomplished",
        "delivered",
        "exceeded",
        "surpassed",
        "attained",
        "completed",
        "won",
        "earned",
        "secured",
        "obtained",
    ),
    "improvement": (
        "improved",
        "enhanced",
        "optimized",
        "streamlined",
        "increased",
        "boosted",
        "maximized",
        "reduced",
        "decreased",
        "minimized",
        "eliminated",
        "resolved",
        "refined",
    ),
    "creation": (
        "developed",
        "created",
        "designed",
        "built",
        "engineered",
        "established",
        "implemented",
        "launched",
        "initiated",
        "introduced",
        "founded",
        "formulated",
        "constructed",
        "architected",
    ),
    "analysis": (
        "analyzed",
        "evaluated",
        "assessed",
        "investigated",
        "researched",
        "identified",
        "diagnosed",
        "strategized",
        "planned",
        "forecasted",
        "projected",
    ),
    "collaboration": (
        "collaborated",
        "partnered",
        "presented",
        "communicated",
        "negotiated",
        "liaised",
        "interfaced",
        "consulted",
        "advised",
    ),
    "technical_execution": (
        "automated",
        "integrated",
        "deployed",
        "migrated",
        "configured",
        "programmed",
        "coded",
        "debugged",
        "tested",
        "validated",
        "documented",
        "executed",
        "performed",
    ),
}

ACTION_VERBS: frozenset = frozenset(verb for verbs in _VERB_THEMES.values() for verb in verbs)

# Matched against the original-case text; every match counts.
METRIC_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\d+%", re.ASCII),
    re.compile(r"\d+x", re.IGNORECASE | re.ASCII),
    re.compile(r"\$\d+", re.ASCII),
    re.compile(r"\d+\+", re.ASCII),
    re.compile(r"\d+\s*(?:million|thousand|billion|k|m|b)", re.IGNORECASE | re.ASCII),
    re.compile(
        r"\d+\s*(?:users|customers|clients|people|employees|members|engineers|developers)",
        re.IGNORECASE | re.ASCII,
    ),
    re.compile(r"\d+\s*(?:hours|days|weeks|months|years)", re.IGNORECASE | re.ASCII),
    re.compile(r"\d+\s*(?:projects|tasks|features|bugs|issues)", re.IGNORECASE | re.ASCII),
)

TECHNICAL_INDICATORS: Tuple[str, ...] = (
    # architectures and patterns
    "architecture",
    "microservices",
    "api",
    "rest",
    "graphql",
    "websocket",
    "mvc",
    "mvvm",
    "design pattern",
    "solid",
    "scalable",
    "distributed",
    # development practice
    "ci/cd",
    "devops",
    "agile",
    "scrum",
    "git",
    "testing",
    "unit test",
    "integration test",
    "deployment",
    "docker",
    "kubernetes",
    "cloud",
    # performance and quality
    "optimization",
    "performance",
    "security",
    "authentication",
    "authorization",
    "encryption",
    "caching",
    "database",
    "query",
    "algorithm",
    "data structure",
    # broad tooling categories
    "framework",
    "library",
    "sdk",
    "platform",
    "system",
    "infrastructure",
    "pipeline",
    "workflow",
    "automation",
    "monitoring",
    "logging",
)

GENERIC_PHRASES: Tuple[str, ...] = (
    "hard worker",
    "team player",
    "fast learner",
    "detail oriented",
    "self-motivated",
    "responsible for",
    "assisted with",
    "helped with",
)

MAX_QUALITY_SCORE = 25
_PROFESSIONAL_TONE_POINTS = 3


@dataclass(frozen=True)
class QualityDetails:
    """Raw counts behind a :class:`QualityScore`."""

    action_verbs_found: int = 0
    metrics_found: int = 0
    technical_terms_found: int = 0
    has_generic_phrases: bool = False


@dataclass(frozen=True)
class QualityScore:
    """Structured result from content quality evaluation."""

    action_verbs_score: int = 0
    metrics_score: int = 0
    technical_depth_score: int = 0
    professional_tone_score: int = 0
    total_score: int = 0
    details: QualityDetails = field(default_factory=QualityDetails)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape the form layer displays."""
        details = asdict(self.details)
        return {
            "actionVerbsScore": self.action_verbs_score,
            "metricsScore": self.metrics_score,
            "technicalDepthScore": self.technical_depth_score,
            "professionalToneScore": self.professional_tone_score,
            "totalScore": self.total_score,
            "details": {
                "actionVerbsFound": details["action_verbs_found"],
                "metricsFound": details["metrics_found"],
                "technicalTermsFound": details["technical_terms_found"],
                "hasGenericPhrases": details["has_generic_phrases"],
            },
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def evaluate_content_quality(text: str) -> QualityScore:
    """Score *text* for action verbs, metrics, technical depth and tone.

    Matching is case-insensitive for verbs, technical terms and generic
    phrases. Empty or whitespace-only text scores zero on every signal.
    """
    if not text or not text.strip():
        return QualityScore()

    lower_text = text.lower()
    words = set(lower_text.split())

    verbs_found = _count_action_verbs(words)
    metrics_found = _count_metrics(text)
    terms_found = sum(1 for term in TECHNICAL_INDICATORS if term in lower_text)
    has_generic = any(phrase in lower_text for phrase in GENERIC_PHRASES)

    action_verbs_score = _tiered(verbs_found, [(5, 8), (3, 6), (2, 4), (1, 2)])
    metrics_score = _tiered(metrics_found, [(5, 8), (3, 6), (2, 4), (1, 2)])
    technical_depth_score = _tiered(terms_found, [(5, 6), (3, 4), (1, 2)])
    professional_tone_score = 0 if has_generic else _PROFESSIONAL_TONE_POINTS

    return QualityScore(
        action_verbs_score=action_verbs_score,
        metrics_score=metrics_score,
        technical_depth_score=technical_depth_score,
        professional_tone_score=professional_tone_score,
        total_score=action_verbs_score + metrics_score + technical_depth_score + professional_tone_score,
        details=QualityDetails(
            action_verbs_found=verbs_found,
            metrics_found=metrics_found,
            technical_terms_found=terms_found,
            has_generic_phrases=has_generic,
        ),
    )


def evaluate_multiple_texts(texts: Iterable[str]) -> QualityScore:
    """Evaluate several texts (e.g. bullet points) as one corpus."""
    combined = " ".join(t for t in texts if t and t.strip())
    return evaluate_content_quality(combined)


def quality_feedback(score: int) -> str:
    """One-line verdict for a 0-25 quality total."""
    if score >= 20:
        return "Excellent! Strong action verbs and quantifiable achievements."
    if score >= 15:
        return "Good! Consider adding more metrics and specific achievements."
    if score >= 10:
        return "Fair. Add more action verbs and quantify your impact."
    if score >= 5:
        return "Needs improvement. Focus on action verbs and measurable results."
    return "Weak content. Use strong action verbs and include specific metrics."


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _count_action_verbs(words: set) -> int:
    return sum(
        1 for verb in ACTION_VERBS if verb in words or verb + "ed" in words or verb + "ing" in words
    )


def _count_metrics(text: str) -> int:
    return sum(len(pattern.findall(text)) for pattern in METRIC_PATTERNS)


def _tiered(count: int, tiers: List[Tuple[int, int]]) -> int:
    """Map *count* to points using descending ``(minimum, points)`` tiers."""
    for minimum, points in tiers:
        if count >= minimum:
            return points
    return 0
