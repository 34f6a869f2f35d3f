"""
Content selection.

Chooses which projects, achievements and skills to surface for a set of
requirements, reports which requested technologies the candidate can evidence,
and summarizes the overall fit.

Selection bounds: every selector keeps
``min(max(min_to_show, relevant_count), max_to_show)`` items, where
"relevant" means score > 0.5 for projects/achievements and required-or-preferred
for skills. When fewer items exist than the lower bound, all are returned.
"""

import math
from datetime import date
from typing import Iterable, List, Optional, Sequence

from tailor.contexts.history.job_data_structure import NormalizedJob
from tailor.contexts.history.skills import Skill, SkillsData
from tailor.contexts.intake.job_requirements import JobRequirements
from tailor.contexts.targeting.match_config import MatchConfig
from tailor.contexts.targeting.match_result import (
    JobScore,
    MatchSummary,
    ScoredAchievement,
    ScoredProject,
    ScoredSkill,
    TechCoverageEntry,
    TechnologyCoverage,
)
from tailor.contexts.targeting.scorers import NEUTRAL_SCORE, score_achievement, score_project
from tailor.contexts.targeting.technology_matcher import (
    find_matching_skills,
    is_deprecated,
    is_featured,
    skill_matches,
    tech_matches,
)
from tailor.utils.timestamp import today as resolve_today

SKILL_LEVEL_BONUS = {
    "expert": 0.25,
    "advanced": 0.15,
    "intermediate": 0.1,
    "beginner": 0.05,
}

REQUIRED_SKILL_BASE = 0.4
PREFERRED_SKILL_BASE = 0.25

# Fit buckets by coverage percent, checked in order
FIT_THRESHOLDS = (
    (85, "excellent"),
    (70, "good"),
    (50, "moderate"),
)

STRONG_TECH_MATCH_COUNT = 5
HIGHLY_RELEVANT_JOB_SCORE = 0.8
MAX_GAPS_LISTED = 3


def _selection_count(relevant: int, lower: int, upper: int) -> int:
    return min(max(lower, relevant), upper)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# PROJECTS AND ACHIEVEMENTS
# =============================================================================


def select_projects(
    jobs: Iterable[NormalizedJob],
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
) -> List[ScoredProject]:
    """Score every project across all jobs and keep the best, within the configured bounds."""
    config = config or MatchConfig()

    scored = [score_project(project, requirements) for job in jobs for project in job.projects]
    scored.sort(key=lambda p: p.score, reverse=True)

    relevant = sum(1 for p in scored if p.score > NEUTRAL_SCORE)
    count = _selection_count(relevant, config.min_projects_to_show, config.max_projects_to_show)
    return scored[:count]


def select_achievements(
    jobs: Iterable[NormalizedJob],
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
) -> List[ScoredAchievement]:
    """Score every achievement across all jobs and keep the best, within the configured bounds."""
    config = config or MatchConfig()

    scored = [score_achievement(achievement, requirements) for job in jobs for achievement in job.achievements]
    scored.sort(key=lambda a: a.score, reverse=True)

    relevant = sum(1 for a in scored if a.score > NEUTRAL_SCORE)
    count = _selection_count(relevant, config.min_achievements_to_show, config.max_achievements_to_show)
    return scored[:count]


# =============================================================================
# SKILLS
# =============================================================================


def calculate_skill_score(
    skill: Skill,
    skills: SkillsData,
    is_required: bool,
    is_preferred: bool,
    today: Optional[date] = None,
) -> float:
    """
    Score a skill for display priority, in [0, 1].

    Components:
    - Requirement match: required 0.4, preferred 0.25
    - Level: expert 0.25, advanced 0.15, intermediate 0.1, beginner 0.05
    - Recency of last use: this year 0.15, within 2 years 0.1, within 5 years 0.05
    - Featured 0.1, want-to-use 0.05
    - Experience: 5+ years 0.1, 3+ years 0.05
    """
    score = 0.0

    if is_required:
        score += REQUIRED_SKILL_BASE
    elif is_preferred:
        score += PREFERRED_SKILL_BASE

    score += SKILL_LEVEL_BONUS.get(skill.level, 0)

    years_ago = resolve_today(today).year - skill.last_used
    if years_ago == 0:
        score += 0.15
    elif years_ago <= 2:
        score += 0.1
    elif years_ago <= 5:
        score += 0.05

    if is_featured(skill.name, skills):
        score += 0.1

    if skill.want_to_use:
        score += 0.05

    if skill.years_used >= 5:
        score += 0.1
    elif skill.years_used >= 3:
        score += 0.05

    return min(1.0, score)


def select_skills(
    skills: SkillsData,
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
    today: Optional[date] = None,
) -> List[ScoredSkill]:
    """
    Select skills to display.

    Required-matching skills come first, then preferred-matching, then other
    skills worth showing (featured, expert level, or flagged want-to-use).
    Deprecated skills are only ever shown when a requirement asks for them.
    """
    config = config or MatchConfig()

    partition = find_matching_skills(
        skills.all_skills(),
        requirements.required_technologies,
        requirements.preferred_technologies,
    )

    scored: List[ScoredSkill] = []

    for skill in partition.required:
        scored.append(
            ScoredSkill(skill, calculate_skill_score(skill, skills, True, False, today), is_required=True)
        )

    for skill in partition.preferred:
        scored.append(
            ScoredSkill(skill, calculate_skill_score(skill, skills, False, True, today), is_preferred=True)
        )

    for skill in partition.other:
        if is_deprecated(skill.name, skills):
            continue
        if is_featured(skill.name, skills) or skill.level == "expert" or skill.want_to_use:
            scored.append(ScoredSkill(skill, calculate_skill_score(skill, skills, False, False, today)))

    scored.sort(key=lambda s: (not s.is_required, not s.is_preferred, -s.score))

    relevant = sum(1 for s in scored if s.is_required or s.is_preferred)
    count = _selection_count(relevant, config.min_skills_to_show, config.max_skills_to_show)
    return scored[:count]


# =============================================================================
# COVERAGE AND SUMMARY
# =============================================================================


def _coverage_entry(tech: str, matched_skills: Sequence[Skill], jobs: Sequence[NormalizedJob]) -> TechCoverageEntry:
    # Skill evidence first, then jobs in the order given
    for skill in matched_skills:
        if skill_matches(skill, tech):
            return TechCoverageEntry(tech=tech, covered=True, source=f"skill: {skill.name}")

    for job in jobs:
        if any(tech_matches(job_tech, tech) for job_tech in job.technologies):
            return TechCoverageEntry(tech=tech, covered=True, source=f"job: {job.company_name}")

    return TechCoverageEntry(tech=tech, covered=False)


def analyze_technology_coverage(
    skills: SkillsData,
    jobs: Sequence[NormalizedJob],
    requirements: JobRequirements,
) -> TechnologyCoverage:
    """
    Report, for every required and preferred technology, whether and where it is evidenced.

    ``coverage_percent`` is the 70/30 weighted share of covered required and
    preferred technologies, rounded half-up to an integer. An empty list
    counts as fully covered.
    """
    partition = find_matching_skills(
        skills.all_skills(),
        requirements.required_technologies,
        requirements.preferred_technologies,
    )
    matched_skills = [*partition.required, *partition.preferred]

    required = [_coverage_entry(tech, matched_skills, jobs) for tech in requirements.required_technologies]
    preferred = [_coverage_entry(tech, matched_skills, jobs) for tech in requirements.preferred_technologies]

    required_covered = sum(1 for entry in required if entry.covered)
    preferred_covered = sum(1 for entry in preferred if entry.covered)

    required_ratio = required_covered / len(required) if required else 1.0
    preferred_ratio = preferred_covered / len(preferred) if preferred else 1.0
    ratio = required_ratio * 0.7 + preferred_ratio * 0.3

    return TechnologyCoverage(
        required=required,
        preferred=preferred,
        coverage_percent=_round_half_up(ratio * 100),
    )


def overall_fit_for(coverage_percent: float) -> str:
    for threshold, fit in FIT_THRESHOLDS:
        if coverage_percent >= threshold:
            return fit
    return "weak"


def generate_match_summary(
    coverage_percent: float,
    scored_jobs: Sequence[JobScore],
    requirements: JobRequirements,
) -> MatchSummary:
    """
    Summarize fit from coverage and the ranked job scores.

    Strengths and gaps are fixed phrases; matched and missing technologies are
    collected across all scored jobs in first-seen order.
    """
    overall_fit = overall_fit_for(coverage_percent)

    all_matched = list(dict.fromkeys(t for job in scored_jobs for t in job.matched_technologies))
    all_missing = list(dict.fromkeys(t for job in scored_jobs for t in job.missing_technologies))

    strengths = []
    if len(all_matched) >= STRONG_TECH_MATCH_COUNT:
        strengths.append(f"Strong technology match ({len(all_matched)} skills aligned)")
    if any(job.total_score > HIGHLY_RELEVANT_JOB_SCORE for job in scored_jobs):
        strengths.append("Highly relevant work experience")
    if requirements.leadership_required:
        # Not verified against job data
        strengths.append("Leadership experience available")

    gaps = []
    if all_missing:
        gaps.append(f"Missing technologies: {', '.join(all_missing[:MAX_GAPS_LISTED])}")

    recommendations = []
    if coverage_percent < 70:
        recommendations.append("Highlight transferable skills and learning agility")
    if len(all_missing) > MAX_GAPS_LISTED:
        recommendations.append("Consider addressing gaps in cover letter")
    if overall_fit == "excellent":
        recommendations.append("Strong fit - emphasize achievements and impact")

    return MatchSummary(
        overall_fit=overall_fit,
        strengths=strengths,
        gaps=gaps,
        recommendations=recommendations,
    )
