"""Shared fixtures for resume scoring tests."""

import json

import pytest

from resume_builder.domain.models import ResumeSnapshot

STRONG_SUMMARY = (
    "Senior software engineer who led platform teams and built scalable distributed systems "
    "over 8 years. I designed microservices architecture on cloud infrastructure and optimized "
    "database performance for a product serving 2 million requests each day, with a focus on "
    "security, observability and clean code that other teams can extend safely."
)


@pytest.fixture
def strong_resume_data():
    """Camel-case form data for a complete, well-written resume."""
    return {
        "personalInfo": {
            "firstName": "Jane",
            "lastName": "Smith",
            "email": "jane.smith@email.com",
            "phone": "(555) 123-4567",
            "linkedin": "linkedin.com/in/janesmith",
            "github": "",
            "address": "Seattle, WA",
        },
        "summary": STRONG_SUMMARY,
        "experience": [
            {
                "id": "exp-1",
                "company": "Acme Corp",
                "title": "Senior Software Engineer",
                "location": "Seattle, WA",
                "startDate": "Jan 2020",
                "endDate": "",
                "current": True,
                "bulletPoints": [
                    "Led a team of 6 engineers to deliver a microservices platform, reducing deployment time by 40%",
                    "Developed automated testing framework that increased code coverage from 60% to 95%",
                    "Implemented CI/CD pipeline serving 200+ deployments per month",
                    "Optimized database query performance, cutting latency by 3x",
                ],
            },
            {
                "id": "exp-2",
                "company": "StartupCo",
                "title": "Software Engineer",
                "location": "Portland, OR",
                "startDate": "Jun 2016",
                "endDate": "Dec 2019",
                "current": False,
                "bulletPoints": [
                    "Built REST API integrations for 50000 users with caching and monitoring",
                    "Migrated legacy system to Docker and Kubernetes in 3 months",
                    "Designed scalable architecture that saved $120000 annually",
                    "Mentored 4 developers and launched 5 features ahead of schedule",
                ],
            },
        ],
        "education": [
            {
                "id": "edu-1",
                "university": "State University",
                "degree": "B.S.",
                "field": "Computer Science",
                "startDate": "2012",
                "endDate": "2016",
                "city": "Austin",
            }
        ],
        "skills": ["Python", "TypeScript", "Go", "AWS", "Docker", "Kubernetes", "PostgreSQL", "Redis"],
        "projects": [
            {
                "id": "proj-1",
                "name": "Trace Viewer",
                "technologies": ["React", "D3"],
                "bulletPoints": ["Built an interactive viewer for distributed traces"],
                "link": "https://github.com/jane/trace-viewer",
            },
            {
                "id": "proj-2",
                "name": "Queue Bench",
                "technologies": ["Go"],
                "bulletPoints": ["Benchmarked message queue throughput across 4 brokers"],
                "link": "https://github.com/jane/queue-bench",
            },
        ],
        "leadership": [
            {
                "id": "lead-1",
                "title": "Organizer",
                "organization": "Seattle Go Meetup",
                "startDate": "2019",
                "endDate": "2022",
                "bulletPoints": ["Organized monthly talks for 120 members"],
            }
        ],
    }


@pytest.fixture
def strong_resume(strong_resume_data):
    return ResumeSnapshot.from_dict(strong_resume_data)


@pytest.fixture
def empty_resume():
    return ResumeSnapshot()


@pytest.fixture
def snapshot_file(tmp_path, strong_resume_data):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(strong_resume_data), encoding="utf-8")
    return path


@pytest.fixture
def store_file(tmp_path, strong_resume_data):
    """The same resume saved the way the form layer persists it."""
    path = tmp_path / "resume_store.json"
    payload = {key: json.dumps(value) for key, value in strong_resume_data.items()}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
