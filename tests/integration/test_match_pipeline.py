"""
End-to-end matching over the fixture job history, skills and requirements files.

Loads everything from tests/fixtures the way scripts/match_job.py does and
checks the assembled MatchResult.
"""

from dataclasses import replace

import pytest

from tailor.contexts.history import SkillsData, load_jobs
from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.contexts.history.normalizer import normalize_jobs
from tailor.contexts.history.skills import Skill
from tailor.contexts.intake import JobRequirements, keyword_based_extraction
from tailor.contexts.targeting import (
    format_match_report,
    load_match_config,
    match_against_requirements,
    recommend_summary_template,
    score_job,
)


@pytest.fixture
def jobs(fixtures_path):
    return load_jobs(fixtures_path / "jobs")


@pytest.fixture
def skills(fixtures_path):
    return SkillsData.from_file(fixtures_path / "skills.yaml")


@pytest.fixture
def requirements(fixtures_path):
    return JobRequirements.from_file(fixtures_path / "requirements" / "senior_ios.yaml")


@pytest.fixture
def result(jobs, skills, requirements, today):
    return match_against_requirements(jobs, skills, requirements, today=today)


@pytest.mark.integration
class TestFixturePipeline:
    """Full pipeline over the fixture files."""

    def test_ranking(self, result):
        ranked = [job.company_name for job in result.ranked_jobs]

        assert ranked[0] == "Finlytics"
        assert set(ranked) == {"Finlytics", "Pixel Agency", "Old Corp"}
        assert result.ranked_jobs[0].total_score == pytest.approx(0.915)
        assert all(a.total_score >= b.total_score for a, b in zip(result.ranked_jobs, result.ranked_jobs[1:]))

    def test_coverage(self, result):
        coverage = result.technology_coverage

        assert coverage.coverage_percent == 70
        assert {e.tech: e.source for e in coverage.required} == {
            "Swift": "skill: Swift",
            "SwiftUI": "skill: Swift",
            "XCTest": "skill: XCTest",
        }
        assert [(e.tech, e.covered) for e in coverage.preferred] == [("Kotlin", False), ("GraphQL", False)]

    def test_summary(self, result):
        summary = result.summary

        assert summary.overall_fit == "good"
        assert summary.strengths == ["Highly relevant work experience"]
        assert summary.gaps == ["Missing technologies: Kotlin, GraphQL, Swift"]
        assert summary.recommendations == ["Consider addressing gaps in cover letter"]

    def test_selection(self, result):
        assert [s.skill.name for s in result.selected_skills] == ["Swift", "SwiftUI", "XCTest", "Rust"]
        assert [p.project.name for p in result.selected_projects] == ["Payments SDK", "Card Controls"]
        assert [p.score for p in result.selected_projects] == pytest.approx([0.95, 0.7])

        descriptions = [a.achievement.description for a in result.selected_achievements]
        assert descriptions[0] == "Reduced crash rate by 40% across iOS apps"
        assert len(descriptions) == 3

    def test_new_skill_raises_coverage(self, jobs, skills, requirements, today):
        skills.categories["languages"].append(Skill(name="Kotlin", level="intermediate", years_used=1, last_used=2023))

        result = match_against_requirements(jobs, skills, requirements, today=today)

        assert result.technology_coverage.coverage_percent == 85
        assert result.summary.overall_fit == "excellent"

    def test_min_job_score(self, jobs, skills, requirements, today):
        result = match_against_requirements(jobs, skills, requirements, min_job_score=0.9, today=today)

        assert [job.company_name for job in result.ranked_jobs] == ["Finlytics"]
        assert result.technology_coverage.coverage_percent == 70

    def test_custom_config(self, jobs, skills, requirements, today):
        config = load_match_config(overrides=["max_skills_to_show=2", "min_skills_to_show=1"])

        result = match_against_requirements(jobs, skills, requirements, config, today=today)

        assert [s.skill.name for s in result.selected_skills] == ["Swift", "SwiftUI"]

    def test_deterministic(self, jobs, skills, requirements, today):
        first = match_against_requirements(jobs, skills, requirements, today=today)
        second = match_against_requirements(jobs, skills, requirements, today=today)

        assert first == second
        assert format_match_report(first, skills) == format_match_report(second, skills)

    def test_bad_record_fails_whole_match(self, jobs, skills, requirements, today):
        with pytest.raises(UnknownJobFormatError):
            match_against_requirements([*jobs, {"foo": 1}], skills, requirements, today=today)

    def test_report_renders(self, result, skills):
        report = format_match_report(result, skills)

        assert "MATCH REPORT: Senior iOS Engineer" in report
        assert "Overall Fit: GOOD" in report
        assert "Pixel Agency" in report

    def test_template(self, requirements):
        assert recommend_summary_template(requirements) == "mobile"


@pytest.mark.integration
class TestMonotonicity:
    """Adding evidence never lowers a job's technology score or total."""

    def test_adding_required_technology(self, jobs, requirements, today):
        pixel = normalize_jobs(jobs, today)[1]
        baseline = score_job(pixel, requirements, today=today)

        for tech in requirements.all_technologies:
            richer = replace(pixel, technologies=[*pixel.technologies, tech])
            scored = score_job(richer, requirements, today=today)

            assert scored.scores.technology_match >= baseline.scores.technology_match
            assert scored.total_score >= baseline.total_score


@pytest.mark.integration
class TestFallbackPipeline:
    """Requirements extracted from a raw description feed the matcher."""

    def test_match_from_description(self, fixtures_path, jobs, skills, today):
        text = (fixtures_path / "requirements" / "job_description.md").read_text()
        requirements = keyword_based_extraction(text)

        result = match_against_requirements(jobs, skills, requirements, today=today)

        sources = {e.tech: e.source for e in result.technology_coverage.required}
        assert sources["iOS"] == "skill: Swift"
        assert sources["GitHub Actions"] == "job: Finlytics"
        assert sources["PostgreSQL"] is None
        assert result.technology_coverage.coverage_percent == 77
        assert result.ranked_jobs[0].company_name == "Finlytics"
        assert "Leadership experience available" in result.summary.strengths
        assert recommend_summary_template(requirements) == "leadership"
