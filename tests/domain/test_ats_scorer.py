"""Tests for the ATS resume scoring engine."""

import copy

import pytest

from resume_builder.domain.ats_scorer import (
    SECTION_CEILINGS,
    calculate_ats_score,
    format_ats_report,
    score_label,
    score_to_grade,
    section_rating,
)
from resume_builder.domain.models import ResumeSnapshot

NEEDS_IMPROVEMENT = "Your resume needs improvement. Focus on the key areas below."


def _snapshot(data, **changes):
    updated = copy.deepcopy(data)
    updated.update(changes)
    return ResumeSnapshot.from_dict(updated)


def _assert_within_ceilings(result):
    for section, ceiling in SECTION_CEILINGS.items():
        assert 0 <= getattr(result.breakdown, section) <= ceiling, section
    assert isinstance(result.total_score, int)
    assert 0 <= result.total_score <= 100


class TestCeilings:

    def test_ceilings_sum_to_100(self):
        assert sum(SECTION_CEILINGS.values()) == 100

    def test_strong_resume_within_ceilings(self, strong_resume):
        _assert_within_ceilings(calculate_ats_score(strong_resume))

    def test_empty_resume_within_ceilings(self, empty_resume):
        _assert_within_ceilings(calculate_ats_score(empty_resume))

    def test_oversized_summary_within_ceilings(self):
        result = calculate_ats_score(ResumeSnapshot(summary="word " * 400))
        _assert_within_ceilings(result)


class TestStrongResume:

    def test_scores_high(self, strong_resume):
        result = calculate_ats_score(strong_resume)
        assert result.total_score >= 90
        assert result.grade in ("A", "A+")

    def test_breakdown(self, strong_resume):
        result = calculate_ats_score(strong_resume)
        assert result.breakdown.contact_info == 10
        assert result.breakdown.summary == 13
        assert result.breakdown.experience == 30
        assert result.breakdown.education == 15
        assert result.breakdown.skills == 10
        assert result.breakdown.projects == 10
        assert result.breakdown.formatting == 10
        assert result.total_score == 98
        assert result.grade == "A+"

    def test_only_headline_feedback(self, strong_resume):
        result = calculate_ats_score(strong_resume)
        assert result.feedback == ("Excellent! Your resume is well-optimized for ATS systems.",)

    def test_idempotent(self, strong_resume):
        assert calculate_ats_score(strong_resume) == calculate_ats_score(strong_resume)

    def test_does_not_mutate_snapshot(self, strong_resume):
        before = strong_resume.to_dict()
        calculate_ats_score(strong_resume)
        assert strong_resume.to_dict() == before


class TestEmptyResume:

    def test_scores_zero(self, empty_resume):
        result = calculate_ats_score(empty_resume)
        assert result.total_score == 0
        assert result.grade == "F"

    def test_feedback_lists_every_missing_section(self, empty_resume):
        result = calculate_ats_score(empty_resume)
        assert list(result.feedback) == [
            NEEDS_IMPROVEMENT,
            "Add your full name",
            "Add a valid email address",
            "Add your phone number",
            "Add LinkedIn or GitHub profile",
            "Add a professional summary",
            "Add work experience entries",
            "Add education information",
            "Add your technical and professional skills",
            "Consider adding relevant projects",
            "Add more sections for a complete resume",
        ]

    def test_whitespace_fields_count_as_empty(self):
        snapshot = ResumeSnapshot.from_dict(
            {"personalInfo": {"firstName": "  ", "lastName": "Doe", "phone": " "}, "summary": "   "}
        )
        result = calculate_ats_score(snapshot)
        assert result.breakdown.contact_info == 0
        assert result.breakdown.summary == 0


class TestFeedbackOrder:

    def test_section_order_preserved(self, strong_resume_data):
        personal = dict(strong_resume_data["personalInfo"], phone="")
        result = calculate_ats_score(_snapshot(strong_resume_data, personalInfo=personal, projects=[]))
        assert result.total_score == 86
        assert result.grade == "B+"
        assert list(result.feedback) == [
            "Good resume! Minor improvements will make it even better.",
            "Add your phone number",
            "Consider adding relevant projects",
        ]


class TestContactInfo:

    def test_invalid_email(self, strong_resume_data):
        personal = dict(strong_resume_data["personalInfo"], email="jane.smith")
        result = calculate_ats_score(_snapshot(strong_resume_data, personalInfo=personal))
        assert result.breakdown.contact_info == 7
        assert "Add a valid email address" in result.feedback

    def test_github_satisfies_profile(self, strong_resume_data):
        personal = dict(strong_resume_data["personalInfo"], linkedin="", github="github.com/jane")
        result = calculate_ats_score(_snapshot(strong_resume_data, personalInfo=personal))
        assert result.breakdown.contact_info == 10

    def test_missing_last_name(self, strong_resume_data):
        personal = dict(strong_resume_data["personalInfo"], lastName="")
        result = calculate_ats_score(_snapshot(strong_resume_data, personalInfo=personal))
        assert result.breakdown.contact_info == 7
        assert "Add your full name" in result.feedback


class TestSummary:

    def test_short_summary(self):
        result = calculate_ats_score(ResumeSnapshot(summary="Led teams."))
        # 5 base + 5/3 quality, no length bonus
        assert result.breakdown.summary == 7
        assert "Summary is too short (aim for 30-100 words)" in result.feedback

    def test_long_summary(self):
        result = calculate_ats_score(ResumeSnapshot(summary="word " * 130))
        assert "Summary is too long (aim for 30-100 words)" in result.feedback
        assert "Summary is too long (may be truncated by ATS)" in result.feedback
        # -2 for length, -3 for a single section
        assert result.breakdown.formatting == 5


class TestExperience:

    def test_single_entry_few_bullets(self):
        snapshot = ResumeSnapshot.from_dict(
            {
                "experience": [
                    {
                        "company": "Acme",
                        "title": "Engineer",
                        "startDate": "2020",
                        "bulletPoints": ["Led the migration", "Wrote docs", ""],
                    }
                ]
            }
        )
        result = calculate_ats_score(snapshot)
        # 7 for one valid entry + 3 for a 5/25 corpus
        assert result.breakdown.experience == 10
        assert "Add more bullet points to your experience (aim for 3-5 per role)" in result.feedback

    def test_no_bullets(self):
        snapshot = ResumeSnapshot.from_dict(
            {"experience": [{"company": "Acme", "title": "Engineer", "startDate": "2020", "bulletPoints": ["  "]}]}
        )
        result = calculate_ats_score(snapshot)
        assert result.breakdown.experience == 7
        assert "Add bullet points describing your responsibilities and achievements" in result.feedback

    def test_entry_without_start_date_is_not_valid(self):
        snapshot = ResumeSnapshot.from_dict({"experience": [{"company": "Acme", "title": "Engineer"}]})
        assert calculate_ats_score(snapshot).breakdown.experience == 0


class TestEducation:

    def test_incomplete_entry(self):
        snapshot = ResumeSnapshot.from_dict({"education": [{"university": "State U", "degree": "B.S."}]})
        result = calculate_ats_score(snapshot)
        assert result.breakdown.education == 0
        assert "Complete your education information (university, degree, field)" in result.feedback

    def test_base_points_without_dates_or_city(self):
        snapshot = ResumeSnapshot.from_dict(
            {"education": [{"university": "State U", "degree": "B.S.", "field": "Math", "startDate": "2012"}]}
        )
        assert calculate_ats_score(snapshot).breakdown.education == 10


class TestSkills:

    @pytest.mark.parametrize("count,expected", [(0, 0), (1, 3), (2, 3), (3, 6), (5, 8), (7, 8), (8, 10), (12, 10)])
    def test_thresholds(self, count, expected):
        skills = [f"skill-{i}" for i in range(count)]
        assert calculate_ats_score(ResumeSnapshot(skills=skills)).breakdown.skills == expected

    def test_few_skills_feedback(self):
        result = calculate_ats_score(ResumeSnapshot(skills=["Python"]))
        assert "Add more skills (aim for at least 5-8 relevant skills)" in result.feedback

    def test_adding_a_skill_never_decreases_score(self):
        previous = 0
        skills = []
        for i in range(10):
            skills.append(f"skill-{i}")
            current = calculate_ats_score(ResumeSnapshot(skills=skills)).breakdown.skills
            assert current >= previous
            previous = current

    def test_duplicate_and_blank_skills_ignored(self):
        skills = ["Python", "python", " PYTHON ", "", "Go"]
        assert calculate_ats_score(ResumeSnapshot(skills=skills)).breakdown.skills == 3


class TestProjects:

    def _project(self, **overrides):
        project = {"name": "Tool", "technologies": ["Go"], "bulletPoints": ["Built a CLI"]}
        project.update(overrides)
        return project

    def test_single_project_with_link(self):
        snapshot = ResumeSnapshot.from_dict({"projects": [self._project(link="https://example.com")]})
        assert calculate_ats_score(snapshot).breakdown.projects == 8

    def test_single_project_without_link(self):
        snapshot = ResumeSnapshot.from_dict({"projects": [self._project()]})
        assert calculate_ats_score(snapshot).breakdown.projects == 7

    def test_project_without_technologies_is_not_valid(self):
        snapshot = ResumeSnapshot.from_dict({"projects": [self._project(technologies=[])]})
        result = calculate_ats_score(snapshot)
        assert result.breakdown.projects == 0
        assert "Consider adding relevant projects" not in result.feedback

    def test_two_projects_capped(self):
        projects = [self._project(link="https://a.example"), self._project(name="Other")]
        snapshot = ResumeSnapshot.from_dict({"projects": projects})
        assert calculate_ats_score(snapshot).breakdown.projects == 10


class TestFormatting:

    def test_too_few_sections(self):
        result = calculate_ats_score(ResumeSnapshot(summary="Led teams.", skills=["Python"]))
        assert result.breakdown.formatting == 7
        assert "Add more sections for a complete resume" in result.feedback

    def test_three_sections_no_penalty(self):
        result = calculate_ats_score(
            ResumeSnapshot.from_dict({"summary": "Led teams.", "skills": ["Python"], "projects": [{"name": "x"}]})
        )
        assert result.breakdown.formatting == 10

    def test_blank_entries_do_not_count_as_sections(self):
        snapshot = ResumeSnapshot.from_dict(
            {
                "summary": "Led teams.",
                "skills": ["", "  "],
                "projects": [{"name": " ", "technologies": [""]}],
                "education": [{"university": "State U"}],
            }
        )
        result = calculate_ats_score(snapshot)
        # summary and education only
        assert result.breakdown.formatting == 7
        assert "Add your technical and professional skills" in result.feedback
        assert "Add more sections for a complete resume" in result.feedback



class TestGrades:

    @pytest.mark.parametrize(
        "score,grade",
        [(100, "A+"), (95, "A+"), (94, "A"), (90, "A"), (89, "B+"), (85, "B+"), (84, "B"),
         (80, "B"), (79, "C"), (70, "C"), (69, "D"), (60, "D"), (59, "F"), (0, "F")],
    )
    def test_thresholds(self, score, grade):
        assert score_to_grade(score) == grade

    @pytest.mark.parametrize(
        "score,label", [(95, "Excellent"), (90, "Excellent"), (80, "Good"), (60, "Fair"), (10, "Needs Work")]
    )
    def test_labels(self, score, label):
        assert score_label(score) == label

    @pytest.mark.parametrize("score,ceiling,rating", [(30, 30, "strong"), (6, 10, "good"), (6, 15, "fair"), (0, 10, "weak")])
    def test_section_rating(self, score, ceiling, rating):
        assert section_rating(score, ceiling) == rating


class TestReport:

    def test_to_dict_shape(self, strong_resume):
        data = calculate_ats_score(strong_resume).to_dict()
        assert data["totalScore"] == 98
        assert data["grade"] == "A+"
        assert list(data["breakdown"]) == [
            "contactInfo",
            "summary",
            "experience",
            "education",
            "skills",
            "projects",
            "formatting",
        ]
        assert isinstance(data["feedback"], list)

    def test_report_contains_sections(self, empty_resume):
        report = format_ats_report(calculate_ats_score(empty_resume))
        assert "## ATS Score: 0/100 (Grade F) Needs Work" in report
        for title in ("Contact Info", "Summary", "Experience", "Education", "Skills", "Projects", "Formatting"):
            assert title in report
        assert "### Suggestions" in report
        assert "1. Add your full name" in report
