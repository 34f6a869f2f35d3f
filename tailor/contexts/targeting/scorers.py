"""
Relevance scorers.

Each job is scored on five dimensions, each in [0, 1]:

- technology: coverage of required technologies and non-buzzword keywords,
  plus a bonus for preferred technologies
- domain: industry overlap, author-supplied relevance weights, domain keywords
- seniority: distance between the job level and the requested seniority
- recency: full marks for the last two years, then linear decay
- relevance: average of the job's relevance weights that the requirements call for

``score_job`` combines them with the configured weights. Projects and
achievements are scored independently of their job and carry a
human-readable reason.

All scorers are pure functions; besides the records they only read the
match config and the reference date for recency.
"""

import re
from datetime import date
from typing import Optional

from tailor.contexts.history.job_data_structure import Achievement, NormalizedJob, Project
from tailor.contexts.history.normalizer import get_job_end_year
from tailor.contexts.intake.job_requirements import JobRequirements
from tailor.contexts.targeting.match_config import MatchConfig
from tailor.contexts.targeting.match_result import (
    JobScore,
    ScoredAchievement,
    ScoredProject,
    SubScores,
)
from tailor.contexts.targeting.technology_matcher import find_matching_techs, tech_matches
from tailor.utils.text_processing import contains_ci
from tailor.utils.timestamp import today as resolve_today

NEUTRAL_SCORE = 0.5

# Ordered from least to most senior; "lead" sits below "principal" here
SENIORITY_SCALE = ("junior", "mid", "senior", "staff", "lead", "principal", "manager", "director")

# Required technologies that mark a role as mobile-focused (exact names)
MOBILE_TECHNOLOGIES = ("Swift", "Kotlin", "iOS", "Android", "React Native")

# Years a job counts as fully recent
RECENCY_GRACE_YEARS = 2
RECENCY_FLOOR = 0.2

HIGHLIGHT_ACHIEVEMENT_CATEGORIES = ("performance", "quality", "business")

PERCENT_PATTERN = re.compile(r"\d+%")
NUMBER_PATTERN = re.compile(r"\d+%?")
LEADERSHIP_VERBS = re.compile(r"\b(led|managed|mentored|coached|hired|built team)\b", re.IGNORECASE)


# =============================================================================
# JOB SUB-SCORES
# =============================================================================


def score_technology_match(job: NormalizedJob, requirements: JobRequirements) -> float:
    all_required = [*requirements.required_technologies, *requirements.non_buzzword_keywords]
    if not all_required:
        return NEUTRAL_SCORE

    matched = find_matching_techs(job.technologies, all_required).matched
    score = len(matched) / len(all_required)

    preferred = requirements.preferred_technologies
    if preferred:
        preferred_matched = find_matching_techs(job.technologies, preferred).matched
        score += len(preferred_matched) / len(preferred) * 0.2

    return min(1.0, score)


def score_domain_match(job: NormalizedJob, requirements: JobRequirements) -> float:
    """
    Score industry/domain alignment.

    Starts neutral (0.5) and adds:
    - 0.3 if the company industry and requested domain contain one another
    - weighted relevance bonuses keyed off domain, company type and leadership
    - 0.2 if one of the job's domain keywords contains the requested domain
    """
    score = NEUTRAL_SCORE
    domain = requirements.domain
    company_type = requirements.company_type

    industry = job.company_info.industry if job.company_info else None
    if industry and domain:
        industry_lower, domain_lower = industry.lower(), domain.lower()
        if industry_lower in domain_lower or domain_lower in industry_lower:
            score += 0.3

    weights = job.relevance_weights
    if weights:
        if domain in ("fintech", "crypto"):
            score += (weights.mobile or 0) * 0.1
        if company_type in ("startup", "scaleup"):
            score += (weights.startup or 0) * 0.15
        if company_type in ("enterprise", "faang"):
            score += (weights.enterprise or 0) * 0.15
        if requirements.leadership_required:
            score += (weights.leadership or 0) * 0.1

    if job.keywords and job.keywords.domains and domain:
        if any(contains_ci(d, domain) for d in job.keywords.domains):
            score += 0.2

    return min(1.0, score)


def score_seniority_match(job: NormalizedJob, requirements: JobRequirements) -> float:
    """
    Score how well the job level fits the requested seniority.

    Equal → 1.0, one above → 0.9, one below → 0.7, further below loses 0.15 per
    step down to 0.3, further above → 0.8. Unrecognized levels are neutral.
    """
    job_level = job.level or "mid"
    required_level = requirements.seniority

    if job_level not in SENIORITY_SCALE or required_level not in SENIORITY_SCALE:
        return NEUTRAL_SCORE

    gap = SENIORITY_SCALE.index(job_level) - SENIORITY_SCALE.index(required_level)

    if gap == 0:
        return 1.0
    if gap == 1:
        return 0.9
    if gap == -1:
        return 0.7
    if gap < -1:
        return max(0.3, 0.7 - (-gap - 1) * 0.15)
    return 0.8


def score_recency(job: NormalizedJob, config: Optional[MatchConfig] = None, today: Optional[date] = None) -> float:
    recency_decay = (config or MatchConfig()).recency_decay
    current_year = resolve_today(today).year
    years_ago = current_year - get_job_end_year(job, today)

    if years_ago <= RECENCY_GRACE_YEARS:
        return 1.0

    return max(RECENCY_FLOOR, 1 - recency_decay * (years_ago - RECENCY_GRACE_YEARS))


def score_relevance_weights(job: NormalizedJob, requirements: JobRequirements) -> float:
    """Average of the job's relevance weights that apply to these requirements (neutral if none)."""
    weights = job.relevance_weights
    if not weights:
        return NEUTRAL_SCORE

    applicable = []

    if any(tech in MOBILE_TECHNOLOGIES for tech in requirements.required_technologies):
        if weights.mobile:
            applicable.append(weights.mobile)

    if requirements.leadership_required or requirements.seniority in ("lead", "manager"):
        if weights.leadership:
            applicable.append(weights.leadership)

    if requirements.company_type in ("startup", "scaleup"):
        if weights.startup:
            applicable.append(weights.startup)
    elif requirements.company_type in ("enterprise", "faang"):
        if weights.enterprise:
            applicable.append(weights.enterprise)

    if not applicable:
        return NEUTRAL_SCORE
    return sum(applicable) / len(applicable)


# =============================================================================
# COMPOSITES
# =============================================================================


def score_job(
    job: NormalizedJob,
    requirements: JobRequirements,
    config: Optional[MatchConfig] = None,
    today: Optional[date] = None,
) -> JobScore:
    """
    Score a job on all dimensions and combine them with the configured weights.

    The weighted total is not clamped; it stays in [0, 1] when weights sum to 1.
    """
    config = config or MatchConfig()
    weights = config.weights

    scores = SubScores(
        technology_match=score_technology_match(job, requirements),
        domain_match=score_domain_match(job, requirements),
        seniority_match=score_seniority_match(job, requirements),
        recency=score_recency(job, config, today),
        relevance_weight=score_relevance_weights(job, requirements),
    )

    total_score = (
        scores.technology_match * weights.technology
        + scores.domain_match * weights.domain
        + scores.seniority_match * weights.seniority
        + scores.recency * weights.recency
        + scores.relevance_weight * weights.relevance
    )

    tech_match = find_matching_techs(job.technologies, requirements.all_technologies)

    matched_keywords = [
        keyword
        for keyword in requirements.keywords
        if any(tech_matches(tech, keyword) for tech in job.technologies)
        or any(contains_ci(responsibility, keyword) for responsibility in job.responsibilities)
    ]

    return JobScore(
        job_id=job.job_id,
        company_name=job.company_name,
        title=job.title,
        scores=scores,
        total_score=total_score,
        matched_technologies=tech_match.matched,
        missing_technologies=tech_match.missing,
        matched_keywords=matched_keywords,
    )


def score_project(project: Project, requirements: JobRequirements) -> ScoredProject:
    score = NEUTRAL_SCORE
    reasons = []

    matched = find_matching_techs(project.technologies, requirements.all_technologies).matched
    if matched:
        score += len(matched) * 0.1
        reasons.append(f"Uses {', '.join(matched)}")

    if project.impact:
        if any(contains_ci(project.impact, keyword) for keyword in requirements.keywords):
            score += 0.15
            reasons.append("Relevant impact")
        if PERCENT_PATTERN.search(project.impact):
            score += 0.1
            reasons.append("Quantified impact")

    if requirements.leadership_required and project.team_size and project.team_size > 1:
        score += 0.1
        reasons.append(f"Led team of {project.team_size}")

    return ScoredProject(
        project=project,
        score=min(1.0, score),
        matched_technologies=matched,
        relevance_reason="; ".join(reasons) or "General relevance",
    )


def score_achievement(achievement: Achievement, requirements: JobRequirements) -> ScoredAchievement:
    score = NEUTRAL_SCORE
    reasons = []
    description = achievement.description

    mentioned = [keyword for keyword in requirements.keywords if contains_ci(description, keyword)]
    if mentioned:
        score += len(mentioned) * 0.1
        reasons.append(f"Mentions {', '.join(mentioned)}")

    if achievement.quantifiable or NUMBER_PATTERN.search(description):
        score += 0.2
        reasons.append("Quantified result")

    if achievement.category:
        if requirements.leadership_required and achievement.category == "team":
            score += 0.15
            reasons.append("Team achievement")
        if achievement.category in HIGHLIGHT_ACHIEVEMENT_CATEGORIES:
            score += 0.1
            reasons.append(f"{achievement.category} achievement")

    if requirements.leadership_required and LEADERSHIP_VERBS.search(description):
        score += 0.15
        reasons.append("Leadership demonstrated")

    if achievement.impact:
        score += 0.1
        reasons.append("Has impact statement")

    return ScoredAchievement(
        achievement=achievement,
        score=min(1.0, score),
        relevance_reason="; ".join(reasons) or "General achievement",
    )
