"""
Unit tests for job record shapes and variant discrimination.

Tests tailor.contexts.history.job_data_structure.
"""

import pytest

from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.contexts.history.job_data_structure import (
    Achievement,
    BasicJob,
    EnhancedJob,
    Responsibilities,
    Technologies,
    parse_job,
)
from tailor.contexts.history.normalizer import normalize_job
from tailor.contexts.intake.job_requirements import JobRequirements
from tailor.contexts.targeting.scorers import score_seniority_match, score_technology_match


@pytest.fixture
def enhanced_record():
    return {
        "company": {"name": "Finlytics", "industry": "Fintech"},
        "role": {"title": "Senior iOS Engineer", "level": "senior", "teamSize": 6},
        "duration": {"start": "2022-03", "totalMonths": 30},
        "technologies": {"languages": ["Swift"], "testing": ["XCTest"]},
        "achievements": ["Shipped v2", {"description": "Cut crashes by 40%", "category": "quality"}],
        "relevanceWeights": {"mobile": 1, "startup": "0.8"},
    }


@pytest.mark.unit
class TestParseJob:
    """Tests for parse_job discrimination."""

    def test_mapping_company_is_enhanced(self, enhanced_record):
        job = parse_job(enhanced_record)

        assert isinstance(job, EnhancedJob)
        assert job.company.name == "Finlytics"
        assert job.role.team_size == 6
        assert job.duration.total_months == 30
        assert job.relevance_weights.mobile == 1.0
        assert job.relevance_weights.startup == pytest.approx(0.8)

    def test_string_achievements_are_wrapped(self, enhanced_record):
        job = parse_job(enhanced_record)

        assert job.achievements[0] == Achievement(description="Shipped v2")
        assert job.achievements[1].category == "quality"
        assert job.achievements[1].quantifiable is None

    def test_string_company_is_basic(self):
        job = parse_job({"company": "Old Corp", "position": "Developer", "startDate": "2015-01"})

        assert isinstance(job, BasicJob)
        assert job.position == "Developer"
        assert job.start_date == "2015-01"

    def test_basic_description_string_becomes_one_bullet(self):
        job = parse_job({"company": "Old Corp", "position": "Developer", "description": "Kept the lights on"})

        assert job.description == ["Kept the lights on"]

    def test_basic_legacy_duration(self):
        job = parse_job({"company": "Old Corp", "position": "Developer", "duration": {"start": "2019-02"}})

        assert job.duration.start == "2019-02"
        assert job.duration.end is None

    def test_parsed_variants_pass_through(self, enhanced_record):
        job = parse_job(enhanced_record)
        assert parse_job(job) is job

    def test_unknown_fields_are_ignored(self):
        job = parse_job({"company": "Old Corp", "position": "Developer", "salary": 100})
        assert isinstance(job, BasicJob)


@pytest.mark.unit
class TestUnknownJobFormat:
    """Tests for records that match neither shape."""

    @pytest.mark.parametrize(
        "record",
        [
            {"foo": 1},
            {"company": 42, "position": "Developer"},
            {"company": "Old Corp"},
            {"company": {"name": "Finlytics"}, "duration": {"start": "2022-03"}},
            {"company": {"name": "Finlytics"}, "role": {"title": "Engineer"}},
            {"company": {"industry": "Fintech"}, "role": {"title": "Engineer"}, "duration": {"start": "2020-01"}},
            {"company": {"name": "  "}, "role": {"title": "Engineer"}, "duration": {"start": "2020-01"}},
            {"company": "", "position": "Developer"},
            {"company": "   ", "position": "Developer"},
            "Finlytics, 2022",
            None,
        ],
    )
    def test_rejected(self, record):
        with pytest.raises(UnknownJobFormatError):
            parse_job(record)

    def test_source_is_reported(self):
        with pytest.raises(UnknownJobFormatError) as exc_info:
            parse_job({"company": "Old Corp"}, source="jobs/old.yaml")

        assert exc_info.value.source == "jobs/old.yaml"
        assert "jobs/old.yaml" in str(exc_info.value)

    def test_long_records_are_truncated_in_message(self):
        record = {"foo": "x" * 500}

        with pytest.raises(UnknownJobFormatError) as exc_info:
            parse_job(record)

        assert exc_info.value.record is record
        assert "..." in str(exc_info.value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_job({"foo": 1})


@pytest.mark.unit
class TestFlattening:
    """Tests for technology and responsibility flattening order."""

    def test_technologies_in_category_order(self):
        techs = Technologies.from_dict({"testing": ["Jest"], "languages": ["TypeScript"], "cloud": ["AWS"]})
        assert techs.flatten() == ["TypeScript", "AWS", "Jest"]

    def test_responsibilities_in_category_order(self):
        responsibilities = Responsibilities.from_dict(
            {"business": ["Talk to customers"], "primary": ["Build the app"], "leadership": ["Mentor"]}
        )
        assert responsibilities.flatten() == ["Build the app", "Mentor", "Talk to customers"]


@pytest.mark.unit
class TestListFields:
    """Tests for coercion of list-valued fields."""

    def test_single_string_is_one_item(self):
        job = parse_job({"company": "Acme", "position": "Developer", "technologies": "Haskell"})
        assert job.technologies == ["Haskell"]

    def test_blank_items_are_dropped(self):
        job = parse_job({"company": "Acme", "position": "Developer", "technologies": ["", "  ", "Swift ", None]})
        assert job.technologies == ["Swift"]

    def test_enhanced_category_string(self, enhanced_record):
        enhanced_record["technologies"] = {"languages": "Swift", "tools": [""]}

        job = parse_job(enhanced_record)

        assert job.technologies.flatten() == ["Swift"]

    @pytest.mark.parametrize("technologies", ["Haskell", [""], ["  "]])
    def test_unrelated_technologies_do_not_match(self, technologies):
        job = normalize_job({"company": "Acme", "position": "Developer", "technologies": technologies})
        requirements = JobRequirements(title="Backend Engineer", required_technologies=["Kotlin", "Elixir", "Scala"])

        assert score_technology_match(job, requirements) == 0.0


@pytest.mark.unit
class TestRoleLevel:
    """Tests for role level casing."""

    def test_level_is_lowercased(self, enhanced_record):
        enhanced_record["role"]["level"] = "Senior"
        assert parse_job(enhanced_record).role.level == "senior"

    def test_mixed_case_levels_match(self, enhanced_record):
        enhanced_record["role"]["level"] = "Senior"
        requirements = JobRequirements.from_dict({"title": "iOS Engineer", "seniority": "Senior"})

        assert score_seniority_match(normalize_job(enhanced_record), requirements) == 1.0
