"""
Job normalizer for the History context.

Converts both job variants (basic and enhanced) into the single NormalizedJob
shape consumed by the Targeting context, deriving YYYY-MM dates and durations
along the way.

Design principle: discriminate once, here. Scorers never look at the raw
variants.
"""

import re
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.contexts.history.job_data_structure import (
    Achievement,
    BasicJob,
    EnhancedJob,
    NormalizedJob,
    parse_job,
)
from tailor.utils.text_processing import dedupe_preserving_order
from tailor.utils.timestamp import today as resolve_today

# Any digit (optionally followed by %) marks an achievement as quantifiable
QUANTIFIABLE_PATTERN = re.compile(r"\d+%?")

YEAR_MONTH_PREFIX = re.compile(r"^(\d{4})-(\d{2})")
FOUR_DIGIT_YEAR = re.compile(r"\d{4}")

MONTHS_FULL = {
    "january": "01",
    "february": "02",
    "march": "03",
    "april": "04",
    "may": "05",
    "june": "06",
    "july": "07",
    "august": "08",
    "september": "09",
    "october": "10",
    "november": "11",
    "december": "12",
}

MONTHS_ABBREVIATED = {
    "jan": "01",
    "feb": "02",
    "mar": "03",
    "apr": "04",
    "jun": "06",
    "jul": "07",
    "aug": "08",
    "sep": "09",
    "oct": "10",
    "nov": "11",
    "dec": "12",
}

DEFAULT_LOCATION = "Remote"


# =============================================================================
# DATES
# =============================================================================


def normalize_date(date_str: Optional[str]) -> str:
    """
    Normalize a date string to YYYY-MM.

    Handles three input shapes:
    - Already prefixed YYYY-MM (anything after the month is dropped)
    - "Month Year" with full or 3-letter month name, case-insensitive
    - Any string containing a 4-digit year (degrades to YEAR-01)

    Unparsable strings are returned unchanged rather than raising.

    Examples:
        >>> normalize_date("2021-03-15")
        '2021-03'
        >>> normalize_date("May 2017")
        '2017-05'
        >>> normalize_date("Summer 2019")
        '2019-01'
    """
    if not date_str:
        return ""

    date_str = str(date_str).strip()

    if YEAR_MONTH_PREFIX.match(date_str):
        return date_str[:7]

    parts = date_str.lower().split()
    if len(parts) == 2:
        month = MONTHS_FULL.get(parts[0]) or MONTHS_ABBREVIATED.get(parts[0])
        if month and re.fullmatch(r"\d{4}", parts[1]):
            return f"{parts[1]}-{month}"

    year_match = FOUR_DIGIT_YEAR.search(date_str)
    if year_match:
        return f"{year_match.group(0)}-01"

    return date_str


def parse_year_month(date_str: Optional[str]) -> Optional[Tuple[int, int]]:
    """Return (year, month) for a date string, or None when it cannot be parsed."""
    match = YEAR_MONTH_PREFIX.match(normalize_date(date_str))
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        month = 1
    return year, month


def calculate_months(start: Optional[str], end: Optional[str] = None, today: Optional[date] = None) -> int:
    """
    Whole months elapsed between start and end (end defaults to today).

    Always at least 1. An unparsable start yields 1; an unparsable end is
    treated as today.
    """
    start_ym = parse_year_month(start)
    if start_ym is None:
        return 1

    end_ym = parse_year_month(end) if end else None
    if end_ym is None:
        ref = resolve_today(today)
        end_ym = (ref.year, ref.month)

    months = (end_ym[0] - start_ym[0]) * 12 + (end_ym[1] - start_ym[1])
    return max(1, months)


def get_job_end_year(job: NormalizedJob, today: Optional[date] = None) -> int:
    """End year of a job; the current year if the job is ongoing or the end date is unparsable."""
    current_year = resolve_today(today).year
    if not job.end_date:
        return current_year
    year_part = job.end_date.split("-")[0]
    return int(year_part) if year_part.isdigit() else current_year


# =============================================================================
# NORMALIZATION
# =============================================================================


def is_quantifiable(text: str) -> bool:
    return bool(QUANTIFIABLE_PATTERN.search(text or ""))


def normalize_job(job: Any, today: Optional[date] = None) -> NormalizedJob:
    """
    Normalize a job record to the common NormalizedJob shape.

    Args:
        job: BasicJob, EnhancedJob, a raw mapping in either shape, or an
             already-normalized job (returned unchanged)
        today: Reference date for ongoing-job durations (defaults to today)

    Returns:
        NormalizedJob

    Raises:
        UnknownJobFormatError: If the record matches neither job shape
    """
    if isinstance(job, NormalizedJob):
        return job

    job = parse_job(job)

    if isinstance(job, EnhancedJob):
        return _normalize_enhanced_job(job, today)
    if isinstance(job, BasicJob):
        return _normalize_basic_job(job, today)

    raise UnknownJobFormatError(record=job)


def _normalize_enhanced_job(job: EnhancedJob, today: Optional[date]) -> NormalizedJob:
    duration = job.duration
    end_date = normalize_date(duration.end) if duration.end else None

    return NormalizedJob(
        company_name=job.company.name,
        company_description=job.company.description,
        company_info=job.company,
        title=job.role.title,
        level=job.role.level,
        location=job.company.location or DEFAULT_LOCATION,
        start_date=normalize_date(duration.start),
        end_date=end_date,
        duration_months=duration.total_months or calculate_months(duration.start, duration.end, today),
        technologies=_collect_technologies(job),
        projects=list(job.projects),
        achievements=_normalize_achievements(job.achievements),
        responsibilities=job.responsibilities.flatten() if job.responsibilities else [],
        relevance_weights=job.relevance_weights,
        keywords=job.keywords,
        work_style=job.context.work_style if job.context else None,
    )


def _normalize_basic_job(job: BasicJob, today: Optional[date]) -> NormalizedJob:
    # Legacy files nest dates in a duration object
    start = job.start_date or (job.duration.start if job.duration else "") or ""
    end = job.end_date or (job.duration.end if job.duration else None)

    achievements = [
        Achievement(description=text, quantifiable=is_quantifiable(text)) for text in job.achievements
    ]

    return NormalizedJob(
        company_name=job.company,
        company_description=job.company_description,
        title=job.position,
        location=job.location or "",
        start_date=normalize_date(start),
        end_date=normalize_date(end) if end else None,
        duration_months=calculate_months(start, end, today),
        technologies=dedupe_preserving_order(job.technologies),
        projects=[],
        achievements=achievements,
        responsibilities=list(job.description),
    )


def _collect_technologies(job: EnhancedJob) -> List[str]:
    """All technologies of an enhanced job (categories, then projects), deduplicated."""
    techs: List[str] = []
    if job.technologies:
        techs.extend(job.technologies.flatten())
    for project in job.projects:
        techs.extend(project.technologies)
    return dedupe_preserving_order(techs)


def _normalize_achievements(achievements: Iterable[Achievement]) -> List[Achievement]:
    """Copy achievements, inferring ``quantifiable`` where the source left it unset."""
    return [
        a if a.quantifiable is not None else replace(a, quantifiable=is_quantifiable(a.description))
        for a in achievements
    ]


def normalize_jobs(jobs: Iterable[Any], today: Optional[date] = None) -> List[NormalizedJob]:
    """Normalize a list of job records (errors propagate on the first bad record)."""
    return [normalize_job(job, today) for job in jobs]


def get_all_technologies(jobs: Iterable[NormalizedJob]) -> List[str]:
    """Unique technologies across jobs, in first-seen order."""
    techs: List[str] = []
    for job in jobs:
        techs.extend(job.technologies)
    return dedupe_preserving_order(techs)
