"""Shared fixtures for unit and integration tests."""

from datetime import date
from pathlib import Path

import pytest

from tailor.contexts.history.job_data_structure import (
    Achievement,
    Company,
    Keywords,
    NormalizedJob,
    Project,
    RelevanceWeights,
)
from tailor.contexts.history.skills import Skill, SkillsData
from tailor.contexts.intake.job_requirements import JobRequirements

FIXTURES_PATH = Path(__file__).parent / "fixtures"

# Every date-dependent test pins the calendar here
TODAY = date(2025, 6, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def fixtures_path():
    return FIXTURES_PATH


@pytest.fixture
def make_job():
    """Factory for NormalizedJob records with sensible defaults."""

    def _make_job(**overrides):
        values = dict(
            company_name="Acme",
            title="Engineer",
            location="Remote",
            start_date="2023-01",
            duration_months=12,
            end_date=None,
        )
        values.update(overrides)
        return NormalizedJob(**values)

    return _make_job


@pytest.fixture
def make_requirements():
    """Factory for JobRequirements with sensible defaults."""

    def _make_requirements(**overrides):
        values = dict(title="Software Engineer")
        values.update(overrides)
        return JobRequirements(**values)

    return _make_requirements


@pytest.fixture
def ios_job(make_job):
    """Current senior fintech iOS job with projects, achievements and relevance weights."""
    return make_job(
        company_name="Finlytics",
        title="Senior iOS Engineer",
        company_info=Company(name="Finlytics", industry="Fintech"),
        level="senior",
        start_date="2022-03",
        technologies=["Swift", "SwiftUI", "UIKit", "XCTest", "Fastlane"],
        projects=[
            Project(name="Payments SDK", technologies=["Swift"], impact="Cut drop-off by 18%", team_size=3),
            Project(name="Internal Wiki", technologies=["Notion"]),
        ],
        achievements=[
            Achievement(description="Reduced crash rate by 40%", category="quality", quantifiable=True),
            Achievement(description="Organized team offsites", category="team", quantifiable=False),
        ],
        responsibilities=["Own the payments experience"],
        relevance_weights=RelevanceWeights(mobile=1.0, startup=0.8, leadership=0.5),
        keywords=Keywords(domains=["fintech", "payments"]),
    )


@pytest.fixture
def ios_requirements(make_requirements):
    return make_requirements(
        title="Senior iOS Engineer",
        seniority="senior",
        company_type="startup",
        domain="fintech",
        required_technologies=["Swift", "SwiftUI"],
        preferred_technologies=["Kotlin"],
        keywords=["payments"],
    )


@pytest.fixture
def skills_data():
    """Small inventory covering required, preferred, featured, deprecated and filler skills."""
    return SkillsData(
        categories={
            "languages": [
                Skill(name="Swift", level="expert", years_used=7, last_used=2025),
                Skill(name="Kotlin", level="intermediate", years_used=2, last_used=2022),
                Skill(name="PHP", level="expert", years_used=4, last_used=2017),
            ],
            "tools": [
                Skill(name="Fastlane", level="advanced", years_used=5, last_used=2024),
                Skill(name="Bash", level="beginner", years_used=1, last_used=2020),
                Skill(name="Rust", level="beginner", years_used=1, last_used=2024, want_to_use=True),
            ],
        },
        featured=["Fastlane"],
        deprecated=["PHP"],
    )
