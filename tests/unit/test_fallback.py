"""
Unit tests for keyword-based requirements extraction.

Tests tailor.contexts.intake.fallback.
"""

import pytest

from tailor.contexts.intake.fallback import (
    detect_domain,
    detect_seniority,
    detect_work_arrangement,
    extract_buzzwords,
    extract_technologies,
    extract_title,
    keyword_based_extraction,
)


@pytest.fixture
def job_description(fixtures_path):
    return (fixtures_path / "requirements" / "job_description.md").read_text()


@pytest.mark.unit
class TestExtractTechnologies:
    """Tests for extract_technologies."""

    def test_table_order_and_canonical_names(self):
        text = "We use postgres, k8s and React with TypeScript."
        assert extract_technologies(text) == ["TypeScript", "React", "PostgreSQL", "Kubernetes"]

    def test_java_is_not_javascript(self):
        assert extract_technologies("Modern JavaScript only") == ["JavaScript"]
        assert extract_technologies("Java and Spring") == ["Java"]

    def test_react_native_is_not_react(self):
        assert extract_technologies("Ship React Native apps") == ["React Native"]

    def test_nothing_found(self):
        assert extract_technologies("We value kindness") == []


@pytest.mark.unit
class TestDetectors:
    """Tests for seniority, domain, work arrangement, buzzwords and title."""

    @pytest.mark.parametrize(
        "text, level",
        [
            ("Junior developer, entry-level welcome", "junior"),
            ("Senior engineer with 5+ years of experience", "senior"),
            ("Staff engineer, 10+ years", "staff"),
            ("Engineering Manager for the platform group", "manager"),
            ("Software engineer", "mid"),
        ],
    )
    def test_seniority(self, text, level):
        assert detect_seniority(text) == level

    def test_seniority_tie_goes_to_first_level(self):
        # One senior hit, one lead hit
        assert detect_seniority("Senior engineer to lead the team") == "senior"

    def test_domain_first_hit_wins(self):
        assert detect_domain("A marketplace for payments") == "fintech"
        assert detect_domain("Online retail") == "ecommerce"
        assert detect_domain("We build tools") == "other"

    def test_work_arrangement(self):
        assert detect_work_arrangement("Fully remote team") == "remote"
        assert detect_work_arrangement("Hybrid, two days in office") == "hybrid"
        assert detect_work_arrangement("Based in Paris") is None

    def test_buzzwords_deduplicated_lowercase(self):
        text = "Agile team, agile rituals, Cross-functional and self-starter"
        assert extract_buzzwords(text) == ["agile", "cross-functional", "self-starter"]

    def test_title_from_markdown_header(self):
        assert extract_title("## **Platform Engineer**\nMore text.") == "Platform Engineer"

    def test_title_from_field(self):
        text = "We are a growing company hiring across several teams right now.\nPosition: Data Engineer\n"
        assert extract_title(text) == "Data Engineer"

    def test_title_unknown(self):
        assert extract_title("We are hiring.") == "Unknown Position"


@pytest.mark.unit
class TestKeywordBasedExtraction:
    """Tests for keyword_based_extraction."""

    def test_fixture_description(self, job_description):
        requirements = keyword_based_extraction(job_description)

        assert requirements.title == "Senior Mobile Engineer"
        assert requirements.seniority == "senior"
        assert requirements.domain == "fintech"
        assert requirements.work_arrangement == "remote"
        assert requirements.leadership_required
        assert requirements.mentorship_expected
        assert requirements.required_technologies == [
            "Swift",
            "iOS",
            "SwiftUI",
            "PostgreSQL",
            "GitHub Actions",
            "GraphQL",
        ]
        assert requirements.preferred_technologies == []
        assert requirements.keywords == requirements.required_technologies
        assert "fast-paced" in requirements.buzzwords

    def test_unknown_domain_left_empty(self):
        requirements = keyword_based_extraction("Python developer\nBuild internal tools.")

        assert requirements.domain is None
        assert requirements.required_technologies == ["Python"]
        assert requirements.seniority == "mid"

    def test_deterministic(self, job_description):
        assert keyword_based_extraction(job_description) == keyword_based_extraction(job_description)
