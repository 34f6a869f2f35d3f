"""
Result records produced by the Targeting context.

Plain dataclasses: the matcher builds them once and callers only read them.
``MatchResult.to_dict()`` gives a JSON-ready view for scripts and downstream
generators.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional

from tailor.contexts.history.job_data_structure import Achievement, Project
from tailor.contexts.history.skills import Skill
from tailor.contexts.intake.job_requirements import JobRequirements

OverallFit = Literal["excellent", "good", "moderate", "weak"]


@dataclass
class SubScores:
    """Per-dimension job scores, each in [0, 1]."""

    technology_match: float
    domain_match: float
    seniority_match: float
    recency: float
    relevance_weight: float


@dataclass
class JobScore:
    job_id: str
    company_name: str
    title: str
    scores: SubScores
    total_score: float
    matched_technologies: List[str] = field(default_factory=list)
    missing_technologies: List[str] = field(default_factory=list)
    matched_keywords: List[str] = field(default_factory=list)


@dataclass
class ScoredProject:
    project: Project
    score: float
    matched_technologies: List[str] = field(default_factory=list)
    relevance_reason: str = ""


@dataclass
class ScoredAchievement:
    achievement: Achievement
    score: float
    relevance_reason: str = ""


@dataclass
class ScoredSkill:
    skill: Skill
    score: float
    is_required: bool = False
    is_preferred: bool = False


@dataclass
class TechCoverageEntry:
    """
    Whether one requested technology is evidenced.

    ``source`` reads "skill: <name>" or "job: <company>" when covered, else None.
    """

    tech: str
    covered: bool
    source: Optional[str] = None


@dataclass
class TechnologyCoverage:
    required: List[TechCoverageEntry] = field(default_factory=list)
    preferred: List[TechCoverageEntry] = field(default_factory=list)
    coverage_percent: int = 0


@dataclass
class MatchSummary:
    overall_fit: OverallFit
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


@dataclass
class MatchResult:
    """
    Full outcome of matching a work history against one set of requirements.

    Attributes:
        requirements: The requirements matched against
        ranked_jobs: Job scores, best first
        selected_projects: Chosen projects, best first
        selected_achievements: Chosen achievements, best first
        selected_skills: Chosen skills (required, then preferred, then by score)
        technology_coverage: Per-technology evidence and weighted percentage
        summary: Fit bucket with strengths, gaps and recommendations
    """

    requirements: JobRequirements
    ranked_jobs: List[JobScore]
    selected_projects: List[ScoredProject]
    selected_achievements: List[ScoredAchievement]
    selected_skills: List[ScoredSkill]
    technology_coverage: TechnologyCoverage
    summary: MatchSummary

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
