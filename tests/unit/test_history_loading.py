"""
Unit tests for loading job history and skills inventories from disk.

Tests tailor.contexts.history.job_loader and tailor.contexts.history.skills.
"""

import json

import pytest

from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.contexts.history.job_data_structure import BasicJob, EnhancedJob
from tailor.contexts.history.job_loader import load_job_file, load_jobs
from tailor.contexts.history.normalizer import normalize_jobs
from tailor.contexts.history.skills import Skill, SkillsData
from tailor.utils.structured_file import StructuredFileError


@pytest.mark.unit
class TestLoadJobs:
    """Tests for load_jobs and load_job_file."""

    def test_directory_in_sorted_file_order(self, fixtures_path):
        jobs = load_jobs(fixtures_path / "jobs")

        assert [type(job) for job in jobs] == [EnhancedJob, BasicJob, BasicJob]
        assert [job.company if isinstance(job, BasicJob) else job.company.name for job in jobs] == [
            "Finlytics",
            "Pixel Agency",
            "Old Corp",
        ]

    def test_fixture_jobs_normalize(self, fixtures_path, today):
        finlytics, pixel, old_corp = normalize_jobs(load_jobs(fixtures_path / "jobs"), today)

        assert finlytics.duration_months == 39
        assert finlytics.location == "Berlin"
        assert finlytics.work_style == "hybrid"
        assert [a.quantifiable for a in finlytics.achievements] == [True, False]
        assert finlytics.projects[0].team_size == 3

        assert pixel.duration_months == 47
        assert (old_corp.start_date, old_corp.end_date, old_corp.duration_months) == ("2014-06", "2017-12", 42)

    def test_single_record_file(self, tmp_path):
        job_file = tmp_path / "job.json"
        job_file.write_text(json.dumps({"company": "Acme", "position": "Engineer"}))

        jobs = load_job_file(job_file)

        assert len(jobs) == 1
        assert jobs[0].company == "Acme"

    def test_list_file(self, tmp_path):
        job_file = tmp_path / "jobs.json"
        job_file.write_text(json.dumps([{"company": "A", "position": "Dev"}, {"company": "B", "position": "Dev"}]))

        assert [job.company for job in load_jobs(job_file)] == ["A", "B"]

    def test_non_job_files_are_skipped(self, tmp_path):
        (tmp_path / "a.yaml").write_text("company: Acme\nposition: Engineer\n")
        (tmp_path / "notes.txt").write_text("not a job")

        assert len(load_jobs(tmp_path)) == 1

    def test_bad_record_names_file(self, tmp_path):
        job_file = tmp_path / "broken.yaml"
        job_file.write_text("company: Acme\n")

        with pytest.raises(UnknownJobFormatError) as exc_info:
            load_jobs(job_file)

        assert exc_info.value.source == str(job_file)

    @pytest.mark.parametrize("name, content", [("broken.yaml", "company: [Acme\n"), ("broken.json", '{"company": ')])
    def test_syntax_error_names_file(self, tmp_path, name, content):
        job_file = tmp_path / name
        job_file.write_text(content)

        with pytest.raises(StructuredFileError) as exc_info:
            load_jobs(job_file)

        assert exc_info.value.path == job_file
        assert isinstance(exc_info.value, ValueError)


@pytest.mark.unit
class TestSkillsData:
    """Tests for SkillsData loading and lookups."""

    def test_from_fixture_file(self, fixtures_path):
        skills = SkillsData.from_file(fixtures_path / "skills.yaml")

        assert list(skills.categories) == ["languages", "frameworks", "tools"]
        assert skills.featured == ["Swift", "SwiftUI"]
        assert skills.deprecated == ["jQuery", "PHP"]

        swift = skills.categories["languages"][0]
        assert swift == Skill(name="Swift", level="expert", years_used=7, last_used=2025, keywords=["ios"])

        rust = skills.categories["tools"][-1]
        assert rust.want_to_use

    def test_all_skills_in_category_order(self, fixtures_path):
        skills = SkillsData.from_file(fixtures_path / "skills.yaml")

        names = [s.name for s in skills.all_skills()]
        assert names[:5] == ["Swift", "Objective-C", "JavaScript", "PHP", "SwiftUI"]
        assert len(names) == 11

    def test_flat_layout(self):
        skills = SkillsData.from_dict({"languages": [{"name": "Go"}], "featured": ["Go"], "notes": "ignored"})

        assert list(skills.categories) == ["languages"]
        assert skills.categories["languages"][0] == Skill(name="Go")
        assert skills.featured == ["Go"]

    def test_json_file(self, tmp_path):
        skills_file = tmp_path / "skills.json"
        skills_file.write_text(json.dumps({"categories": {"tools": [{"name": "Docker", "level": "Advanced"}]}}))

        skills = SkillsData.from_file(skills_file)

        assert skills.categories["tools"][0].level == "advanced"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="guru"):
            Skill.from_dict({"name": "Go", "level": "guru"})

    @pytest.mark.parametrize("record", [{"level": "expert"}, {"name": "  "}, "Swift"])
    def test_skill_without_name_rejected(self, record):
        with pytest.raises(ValueError):
            SkillsData.from_dict({"languages": [record]})

    def test_string_and_blank_list_items(self):
        skills = SkillsData.from_dict(
            {"languages": [{"name": "Swift", "keywords": "ios"}], "featured": "Swift", "deprecated": ["", "PHP"]}
        )

        assert skills.categories["languages"][0].keywords == ["ios"]
        assert skills.featured == ["Swift"]
        assert skills.deprecated == ["PHP"]

    def test_category_of(self, skills_data):
        assert skills_data.category_of("Fastlane") == "tools"
        assert skills_data.category_of("Haskell") == ""
