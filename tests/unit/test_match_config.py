"""
Unit tests for match configuration loading and validation.

Tests tailor.contexts.targeting.match_config.
"""

from pathlib import Path

import pytest

from tailor.contexts.targeting import match_config
from tailor.contexts.targeting.exceptions import InvalidMatchConfigError
from tailor.contexts.targeting.match_config import MatchConfig, ScoreWeights, load_match_config

DEFAULT_CONFIG_FILE = Path(__file__).parents[2] / "configs" / "match_config.yaml"


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    """Ignore any MATCH_CONFIG_PATH set in the developer's environment."""
    monkeypatch.setattr(match_config, "MATCH_CONFIG_PATH", None)


@pytest.mark.unit
class TestDefaults:
    """Tests for the built-in defaults."""

    def test_default_weights_sum_to_one(self):
        assert ScoreWeights().total() == pytest.approx(1.0)

    def test_defaults_without_file(self):
        assert load_match_config() == MatchConfig()

    def test_shipped_file_matches_defaults(self):
        assert load_match_config(DEFAULT_CONFIG_FILE) == MatchConfig()


@pytest.mark.unit
class TestLoadMatchConfig:
    """Tests for load_match_config."""

    def test_file_overrides_defaults(self, tmp_path):
        config_file = tmp_path / "match.yaml"
        config_file.write_text("recency_decay: 0.25\nweights:\n  technology: 0.5\n  domain: 0.05\n")

        config = load_match_config(config_file)

        assert config.recency_decay == pytest.approx(0.25)
        assert config.weights.technology == pytest.approx(0.5)
        assert config.weights.domain == pytest.approx(0.05)
        # Untouched keys keep their defaults
        assert config.weights.seniority == pytest.approx(0.15)
        assert config.max_skills_to_show == 15

    def test_dotlist_overrides_win_over_file(self, tmp_path):
        config_file = tmp_path / "match.yaml"
        config_file.write_text("recency_decay: 0.25\n")

        config = load_match_config(config_file, ["recency_decay=0.3", "max_projects_to_show=4"])

        assert config.recency_decay == pytest.approx(0.3)
        assert config.max_projects_to_show == 4

    def test_dict_overrides(self):
        config = load_match_config(overrides={"weights": {"recency": 0.1, "relevance": 0.2}})

        assert config.weights.recency == pytest.approx(0.1)
        assert config.weights.relevance == pytest.approx(0.2)
        assert isinstance(config.weights, ScoreWeights)

    def test_env_path_used_when_no_path_given(self, tmp_path, monkeypatch):
        config_file = tmp_path / "env_match.yaml"
        config_file.write_text("min_skills_to_show: 4\n")
        monkeypatch.setattr(match_config, "MATCH_CONFIG_PATH", str(config_file))

        assert load_match_config().min_skills_to_show == 4

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidMatchConfigError):
            load_match_config(overrides={"bogus_weight": 1})

    def test_unknown_key_in_file_reports_path(self, tmp_path):
        config_file = tmp_path / "match.yaml"
        config_file.write_text("weights:\n  charisma: 0.5\n")

        with pytest.raises(InvalidMatchConfigError) as exc_info:
            load_match_config(config_file)

        assert exc_info.value.config_path == config_file
        assert str(config_file) in str(exc_info.value)

    def test_yaml_syntax_error_rejected(self, tmp_path):
        config_file = tmp_path / "match.yaml"
        config_file.write_text("weights: [technology\n")

        with pytest.raises(InvalidMatchConfigError) as exc_info:
            load_match_config(config_file)

        assert exc_info.value.config_path == config_file

    def test_mistyped_value_rejected(self):
        with pytest.raises(InvalidMatchConfigError):
            load_match_config(overrides=["recency_decay=soon"])

    def test_negative_weight_rejected(self):
        with pytest.raises(InvalidMatchConfigError, match="non-negative"):
            load_match_config(overrides={"weights": {"domain": -0.1}})

    def test_unbalanced_weights_only_warn(self):
        config = load_match_config(overrides=["weights.technology=0.5"])

        assert config.weights.total() == pytest.approx(1.15)


@pytest.mark.unit
class TestValidate:
    """Tests for MatchConfig.validate."""

    def test_returns_self(self):
        config = MatchConfig()
        assert config.validate() is config

    def test_min_above_max(self):
        with pytest.raises(InvalidMatchConfigError, match="min_skills_to_show"):
            MatchConfig(min_skills_to_show=10, max_skills_to_show=5).validate()

    def test_negative_bound(self):
        with pytest.raises(InvalidMatchConfigError, match="achievements"):
            MatchConfig(min_achievements_to_show=-1).validate()

    def test_negative_decay(self):
        with pytest.raises(InvalidMatchConfigError, match="recency_decay"):
            MatchConfig(recency_decay=-0.1).validate()

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            MatchConfig(max_projects_to_show=1).validate()
