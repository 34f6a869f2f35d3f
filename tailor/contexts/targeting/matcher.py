"""
Match orchestrator.

Entry point of the Targeting context: normalizes a work history, ranks jobs
against a JobRequirements record, selects content and summarizes fit.

Example:
    from tailor.contexts.history import SkillsData, load_jobs
    from tailor.contexts.intake import JobRequirements
    from tailor.contexts.targeting import match_against_requirements

    result = match_against_requirements(
        load_jobs(Path("data/jobs")),
        SkillsData.from_file(Path("data/skills.yaml")),
        JobRequirements.from_file(Path("senior_ios.yaml")),
    )
    print(result.summary.overall_fit)
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Sequence

from tailor.contexts.history.normalizer import get_all_technologies, normalize_jobs
from tailor.contexts.history.skills import SkillsData
from tailor.contexts.intake.job_requirements import JobRequirements
from tailor.contexts.targeting.logger import _log_debug, log_match_start
from tailor.contexts.targeting.match_config import MatchConfig
from tailor.contexts.targeting.match_result import JobScore, MatchResult
from tailor.contexts.targeting.scorers import score_job
from tailor.contexts.targeting.selector import (
    analyze_technology_coverage,
    generate_match_summary,
    select_achievements,
    select_projects,
    select_skills,
)
from tailor.utils.timestamp import today as resolve_today

TEMPLATE_MOBILE_TECHS = ("Swift", "Kotlin", "iOS", "Android", "React Native", "Flutter", "UIKit", "SwiftUI")
TEMPLATE_FRONTEND_TECHS = ("React", "Vue", "Angular", "Next.js")
TEMPLATE_BACKEND_TECHS = ("Node.js", "Python", "Go", "PostgreSQL", "MongoDB")


@dataclass
class MinimumRequirementsCheck:
    meets: bool
    coverage_percent: int
    gaps: List[str] = field(default_factory=list)


def match_against_requirements(
    jobs: Sequence[Any],
    skills: SkillsData,
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
    *,
    min_job_score: Optional[float] = None,
    today: Optional[date] = None,
) -> MatchResult:
    """
    Match a work history and skills inventory against job requirements.

    Steps:
    1. Normalize every job (an unrecognized record raises UnknownJobFormatError)
    2. Score jobs and rank them best first (ties keep input order)
    3. Drop jobs below ``min_job_score``, if given
    4. Select projects and achievements from the retained jobs, and skills
    5. Analyze technology coverage against all jobs, retained or not
    6. Summarize fit from coverage and the ranked jobs

    Args:
        jobs: Raw job mappings or parsed BasicJob/EnhancedJob records
        skills: Candidate skills inventory
        requirements: Requirements to match against
        config: Scoring weights and selection bounds (defaults if None)
        min_job_score: Minimum composite score for a job to be ranked
        today: Reference date for durations and recency (defaults to today)

    Returns:
        MatchResult
    """
    config = config or MatchConfig()
    today = resolve_today(today)

    normalized = normalize_jobs(jobs, today)
    log_match_start(requirements.title, len(normalized), len(skills.all_skills()))

    scored = [(job, score_job(job, requirements, config, today)) for job in normalized]
    scored.sort(key=lambda pair: pair[1].total_score, reverse=True)

    if min_job_score is not None:
        kept = [pair for pair in scored if pair[1].total_score >= min_job_score]
        _log_debug(f"{len(kept)}/{len(scored)} job(s) at or above min score {min_job_score}")
        scored = kept

    ranked_jobs = [job_score for _, job_score in scored]
    relevant_jobs = [job for job, _ in scored]

    selected_projects = select_projects(relevant_jobs, requirements, config)
    selected_achievements = select_achievements(relevant_jobs, requirements, config)
    selected_skills = select_skills(skills, requirements, config, today)

    coverage = analyze_technology_coverage(skills, normalized, requirements)
    summary = generate_match_summary(coverage.coverage_percent, ranked_jobs, requirements)

    for job_score in ranked_jobs:
        _log_debug(f"  {job_score.job_id}: {job_score.total_score:.3f}")
    _log_debug(
        f"Coverage {coverage.coverage_percent}% ({summary.overall_fit}); selected "
        f"{len(selected_projects)} project(s), {len(selected_achievements)} achievement(s), "
        f"{len(selected_skills)} skill(s)"
    )

    return MatchResult(
        requirements=requirements,
        ranked_jobs=ranked_jobs,
        selected_projects=selected_projects,
        selected_achievements=selected_achievements,
        selected_skills=selected_skills,
        technology_coverage=coverage,
        summary=summary,
    )


match = match_against_requirements


def quick_match(
    jobs: Sequence[Any],
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
    today: Optional[date] = None,
) -> List[JobScore]:
    """Job scores only, best first (no content selection)."""
    scores = [score_job(job, requirements, config, today) for job in normalize_jobs(jobs, today)]
    return sorted(scores, key=lambda s: s.total_score, reverse=True)


def meets_minimum_requirements(
    jobs: Sequence[Any],
    requirements: JobRequirements,
    min_coverage_percent: float = 50,
) -> MinimumRequirementsCheck:
    """
    Quick screen: what share of required technologies appear anywhere in the job history.

    Uses plain case-insensitive substring containment (no alias table), so it is
    stricter than the scorers for spellings like "k8s" vs "Kubernetes".
    """
    all_techs = [t.lower() for t in get_all_technologies(normalize_jobs(jobs))]

    gaps = []
    covered = 0
    for required in requirements.required_technologies:
        needle = required.lower()
        if any(tech in needle or needle in tech for tech in all_techs):
            covered += 1
        else:
            gaps.append(required)

    total = len(requirements.required_technologies)
    coverage_percent = int(covered / total * 100 + 0.5) if total else 100

    return MinimumRequirementsCheck(
        meets=coverage_percent >= min_coverage_percent,
        coverage_percent=coverage_percent,
        gaps=gaps,
    )


def recommend_summary_template(requirements: JobRequirements) -> str:
    """
    Pick a summary template for the resume header.

    Priority: leadership, mobile, startup, enterprise, fullstack, default.
    """
    if requirements.leadership_required or requirements.seniority in ("lead", "manager", "director"):
        return "leadership"

    required = requirements.required_technologies

    if any(tech in TEMPLATE_MOBILE_TECHS for tech in required):
        return "mobile"

    if requirements.company_type in ("startup", "scaleup"):
        return "startup"
    if requirements.company_type in ("enterprise", "faang"):
        return "enterprise"

    has_frontend = any(tech in TEMPLATE_FRONTEND_TECHS for tech in required)
    has_backend = any(tech in TEMPLATE_BACKEND_TECHS for tech in required)
    if has_frontend and has_backend:
        return "fullstack"

    return "default"
