"""
Keyword-based requirements extraction.

Fallback path for when no model-backed extractor is available: detects
technologies, seniority, domain, work arrangement and buzzwords with the static
patterns in ``extraction_patterns`` and assembles a JobRequirements record.
This module has no network or model dependencies.
"""

from typing import List, Optional

from tailor.contexts.intake.extraction_patterns import (
    BUZZWORD_PATTERNS,
    DOMAIN_PATTERNS,
    SENIORITY_PATTERNS,
    TECH_PATTERNS,
    WORK_ARRANGEMENT_PATTERNS,
    RequirementSignalPatterns,
)
from tailor.contexts.intake.job_requirements import JobRequirements
from tailor.contexts.intake.logger import _log_debug

DEFAULT_SENIORITY = "mid"
UNKNOWN_TITLE = "Unknown Position"

_SIGNALS = RequirementSignalPatterns()


def extract_technologies(text: str) -> List[str]:
    """Canonical names of every technology mentioned in the text, in table order."""
    return [tech for tech, pattern in TECH_PATTERNS.items() if pattern.search(text)]


def detect_seniority(text: str) -> str:
    """
    Detect the seniority level with the most indicator hits.

    Ties go to the level listed first; no hits at all means "mid".
    """
    best_level = DEFAULT_SENIORITY
    best_hits = 0
    for level, patterns in SENIORITY_PATTERNS.items():
        hits = sum(1 for pattern in patterns if pattern.search(text))
        if hits > best_hits:
            best_level, best_hits = level, hits
    return best_level


def detect_domain(text: str) -> str:
    """First domain (in table order) with any indicator hit, else "other"."""
    for domain, patterns in DOMAIN_PATTERNS.items():
        if any(pattern.search(text) for pattern in patterns):
            return domain
    return "other"


def detect_work_arrangement(text: str) -> Optional[str]:
    for arrangement, patterns in WORK_ARRANGEMENT_PATTERNS.items():
        if any(pattern.search(text) for pattern in patterns):
            return arrangement
    return None


def extract_buzzwords(text: str) -> List[str]:
    """Lower-cased buzzword matches, deduplicated in first-seen order."""
    found = {}
    for pattern in BUZZWORD_PATTERNS:
        for match in pattern.finditer(text):
            found.setdefault(match.group(0).lower(), None)
    return list(found)


def extract_title(text: str) -> str:
    """
    Extract the job title from the top of a job description.

    Priority:
    1. First line, if short and not a sentence
    2. A "Role:/Position:/Title:" field anywhere in the text
    3. "Unknown Position"
    """
    lines = text.strip().split("\n")
    first_line = lines[0].strip() if lines else ""
    # Strip markdown header markers
    first_line = first_line.lstrip("#").strip().strip("*").strip()

    if first_line and len(first_line) < _SIGNALS.MAX_TITLE_LENGTH and not first_line.endswith("."):
        return first_line

    match = _SIGNALS.TITLE_FIELD.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()

    return UNKNOWN_TITLE


def keyword_based_extraction(text: str) -> JobRequirements:
    """
    Build JobRequirements from a job description using keyword patterns only.

    Every detected technology is treated as required (the patterns cannot tell
    required from preferred) and doubles as a keyword.

    Args:
        text: Raw job description text

    Returns:
        JobRequirements with best-effort fields
    """
    technologies = extract_technologies(text)
    domain = detect_domain(text)

    requirements = JobRequirements(
        title=extract_title(text),
        seniority=detect_seniority(text),
        domain=domain if domain != "other" else None,
        work_arrangement=detect_work_arrangement(text),
        required_technologies=technologies,
        preferred_technologies=[],
        key_responsibilities=[],
        leadership_required=bool(_SIGNALS.LEADERSHIP.search(text)),
        mentorship_expected=bool(_SIGNALS.MENTORSHIP.search(text)),
        keywords=list(technologies),
        buzzwords=extract_buzzwords(text),
    )

    _log_debug(
        f"Keyword extraction: title={requirements.title!r}, seniority={requirements.seniority}, "
        f"{len(technologies)} technologies, domain={requirements.domain}"
    )
    return requirements
