"""
Targeting Context

Responsibilities:
- Scores relevance of past jobs, projects, achievements and skills against job requirements
- Selects which content to surface, within configurable bounds
- Reports which requested technologies the candidate can evidence, and where
- Summarizes overall fit with strengths, gaps and recommendations
- Curates selected technology lists and bullet points

Owns: Technology alias table, scoring algorithms, selection logic, match configuration
Never: Reads job descriptions directly or renders documents
"""

from tailor.contexts.targeting.curation import filter_technologies, process_bullets, process_technologies, score_impact
from tailor.contexts.targeting.exceptions import InvalidMatchConfigError
from tailor.contexts.targeting.match_config import MatchConfig, ScoreWeights, load_match_config
from tailor.contexts.targeting.match_result import (
    JobScore,
    MatchResult,
    MatchSummary,
    ScoredAchievement,
    ScoredProject,
    ScoredSkill,
    SubScores,
    TechCoverageEntry,
    TechnologyCoverage,
)
from tailor.contexts.targeting.matcher import (
    MinimumRequirementsCheck,
    match,
    match_against_requirements,
    meets_minimum_requirements,
    quick_match,
    recommend_summary_template,
)
from tailor.contexts.targeting.report import format_match_report
from tailor.contexts.targeting.scorers import score_job
from tailor.contexts.targeting.technology_matcher import (
    TECH_ALIASES,
    find_matching_techs,
    normalize_tech_name,
    tech_matches,
)

__all__ = [
    # Orchestration
    "match",
    "match_against_requirements",
    "quick_match",
    "meets_minimum_requirements",
    "recommend_summary_template",
    "MinimumRequirementsCheck",
    "score_job",
    # Configuration
    "MatchConfig",
    "ScoreWeights",
    "load_match_config",
    "InvalidMatchConfigError",
    # Results
    "MatchResult",
    "JobScore",
    "SubScores",
    "ScoredProject",
    "ScoredAchievement",
    "ScoredSkill",
    "TechCoverageEntry",
    "TechnologyCoverage",
    "MatchSummary",
    # Technology matching
    "TECH_ALIASES",
    "normalize_tech_name",
    "tech_matches",
    "find_matching_techs",
    # Curation and reporting
    "filter_technologies",
    "process_technologies",
    "process_bullets",
    "score_impact",
    "format_match_report",
]
