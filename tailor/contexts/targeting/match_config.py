"""
Match configuration for the Targeting context.

Defaults live in the dataclasses below; a YAML file (``configs/match_config.yaml``
or ``$MATCH_CONFIG_PATH``) and explicit overrides are merged on top with
OmegaConf, which also rejects unknown keys and mistyped values.

Examples:
    # Defaults only
    >>> config = MatchConfig()

    # File + dotlist overrides (later wins)
    >>> config = load_match_config(Path("configs/match_config.yaml"), ["weights.technology=0.5"])
"""

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from tailor.contexts.targeting.exceptions import InvalidMatchConfigError
from tailor.contexts.targeting.logger import _log_debug, _log_warning

load_dotenv()
MATCH_CONFIG_PATH = os.getenv("MATCH_CONFIG_PATH")


@dataclass
class ScoreWeights:
    """Weights of the five job sub-scores in the composite total (meant to sum to 1)."""

    technology: float = 0.35
    domain: float = 0.20
    seniority: float = 0.15
    recency: float = 0.15
    relevance: float = 0.15

    def total(self) -> float:
        return self.technology + self.domain + self.seniority + self.recency + self.relevance


@dataclass
class MatchConfig:
    """
    Tunable parameters of the matching algorithm.

    Attributes:
        weights: Composite score weights
        recency_decay: Score lost per year beyond the two-year grace period
        min_*_to_show / max_*_to_show: Selection bounds for projects, achievements, skills
    """

    weights: ScoreWeights = field(default_factory=ScoreWeights)
    recency_decay: float = 0.1
    min_projects_to_show: int = 2
    max_projects_to_show: int = 5
    min_achievements_to_show: int = 3
    max_achievements_to_show: int = 8
    min_skills_to_show: int = 8
    max_skills_to_show: int = 15

    def validate(self, config_path: Optional[Path] = None) -> "MatchConfig":
        """
        Check the configuration for values the algorithm cannot work with.

        Returns:
            self, for chaining

        Raises:
            InvalidMatchConfigError: On negative weights/decay/bounds or min > max
        """
        for name in ("technology", "domain", "seniority", "recency", "relevance"):
            if getattr(self.weights, name) < 0:
                raise InvalidMatchConfigError(f"Weight '{name}' must be non-negative", config_path)

        if self.recency_decay < 0:
            raise InvalidMatchConfigError("recency_decay must be non-negative", config_path)

        for kind in ("projects", "achievements", "skills"):
            lower = getattr(self, f"min_{kind}_to_show")
            upper = getattr(self, f"max_{kind}_to_show")
            if lower < 0 or upper < 0:
                raise InvalidMatchConfigError(f"Bounds for {kind} must be non-negative", config_path)
            if lower > upper:
                raise InvalidMatchConfigError(
                    f"min_{kind}_to_show ({lower}) exceeds max_{kind}_to_show ({upper})", config_path
                )

        # Composite stays within [0, 1] only when weights sum to 1
        if not math.isclose(self.weights.total(), 1.0, abs_tol=1e-6):
            _log_warning(f"Score weights sum to {self.weights.total():.3f}, not 1.0")

        return self


def load_match_config(
    config_path: Optional[Path] = None,
    overrides: Union[Dict[str, Any], List[str], None] = None,
) -> MatchConfig:
    """
    Build a MatchConfig from defaults, an optional YAML file, and overrides.

    Args:
        config_path: YAML file (defaults to $MATCH_CONFIG_PATH when set)
        overrides: Nested dict or OmegaConf dotlist (e.g. ["recency_decay=0.2"])

    Returns:
        Validated MatchConfig

    Raises:
        InvalidMatchConfigError: On YAML syntax errors, unknown keys, mistyped values, or failed validation
    """
    if config_path is None and MATCH_CONFIG_PATH:
        config_path = Path(MATCH_CONFIG_PATH)

    try:
        merged = OmegaConf.structured(MatchConfig)

        if config_path is not None:
            file_config = OmegaConf.load(config_path)
            merged = OmegaConf.merge(merged, file_config)
            _log_debug(f"Loaded match config from {config_path}")

        if overrides:
            if isinstance(overrides, dict):
                override_config = OmegaConf.create(overrides)
            else:
                override_config = OmegaConf.from_dotlist(list(overrides))
            merged = OmegaConf.merge(merged, override_config)

        config = OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidMatchConfigError(f"Invalid match configuration: {e}", config_path) from e

    return config.validate(config_path)
