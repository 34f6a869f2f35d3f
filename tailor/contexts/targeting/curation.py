"""
Content curation for selected material.

Two cleanups that ``report.format_match_report`` applies to selected content
as it renders it:

- Technology lists: drop tools everyone uses, vague umbrella terms, and terms
  made redundant by a more specific one; put high-signal technologies first;
  cap the length.
- Bullets: drop near-duplicates (same metric, same number, overlapping action
  words) and order by a heuristic impact score.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Sequence, Tuple

# Tools too common to be worth listing
OBVIOUS_TOOLS = (
    "Git",
    "VS Code",
    "Visual Studio Code",
    "Xcode",
    "Android Studio",
    "npm",
    "yarn",
    "pnpm",
    "ESLint",
    "Prettier",
    "Slack",
    "Jira",
    "Confluence",
    "Notion",
    "Figma",
    "Postman",
)

# (keep, remove): if ``keep`` is listed, ``remove`` is dropped
REDUNDANT_PAIRS = (
    ("Self-hosted runners", "Self-hosted infrastructure"),
    ("Jest", "Unit Testing"),
    ("Jest", "Automated testing"),
    ("Detox", "E2E Testing"),
    ("Cypress", "E2E Testing"),
    ("React Native", "Mobile development"),
    ("Expo", "Expo CLI"),
    ("TypeScript", "JavaScript"),
    ("GitHub Actions", "CI/CD"),
    ("Fastlane", "App deployment"),
    ("iOS", "UIKit"),
    ("Android", "Android SDK"),
    ("PostgreSQL", "SQL"),
    ("MySQL", "SQL"),
    ("SQLite", "SQL"),
    ("AWS", "Cloud"),
    ("GCP", "Cloud"),
    ("Azure", "Cloud"),
    ("React Testing Library", "Testing"),
    ("XCTest", "Testing"),
)

VAGUE_TERMS = (
    "Mobile development",
    "Web development",
    "Software development",
    "App development",
    "Programming",
    "Coding",
    "Development",
    "Testing",
    "Cloud",
    "CI/CD",
    "Agile",
    "Scrum",
)

# Lower-cased name -> display priority (unlisted technologies rank 0)
TECHNOLOGY_PRIORITY = MappingProxyType(
    {
        # Frameworks / platforms
        "expo": 10,
        "react native": 10,
        "react": 9,
        "next.js": 9,
        "node.js": 9,
        "swift": 9,
        "kotlin": 9,
        # Languages
        "typescript": 8,
        "javascript": 7,
        "python": 8,
        "rust": 8,
        "go": 8,
        # APIs
        "graphql": 7,
        "rest api": 7,
        "grpc": 7,
        # State management
        "redux": 6,
        "redux toolkit": 6,
        "mobx": 6,
        # CI/CD
        "github actions": 6,
        "fastlane": 6,
        "bitbucket pipelines": 6,
        "eas build": 6,
        # Databases
        "postgresql": 5,
        "mongodb": 5,
        "firebase": 5,
        # Cloud
        "aws": 5,
        "gcp": 5,
        # Testing
        "jest": 4,
        "detox": 4,
        # Platforms, often implied
        "ios": 3,
        "android": 3,
    }
)


@dataclass(frozen=True)
class TechnologyFilterOptions:
    max_count: int = 8
    remove_obvious: bool = True
    remove_vague: bool = True
    remove_redundant: bool = True


@dataclass(frozen=True)
class BulletPatterns:
    """Regex and word lists used to compare and rate bullet points."""

    METRIC: re.Pattern = re.compile(r"\d+%|\$[\d.]+[kmb]?|\d+x|\d+\+", re.IGNORECASE)
    IMPACT_METRIC: re.Pattern = re.compile(r"\d+%|\$[\d.]+[kmb]?|\d+x|\d+\+|\d+k\+")
    NUMBER: re.Pattern = re.compile(r"\b\d+\b")
    HAS_OUTCOME: re.Pattern = re.compile(r"\d|result|improv|reduc|increas|enabl")

    COMPARISON_KEYWORDS: Tuple[str, ...] = (
        "deployed", "delivered", "launched", "shipped", "released",
        "reduced", "increased", "improved", "optimized", "automated",
        "led", "managed", "built", "created", "developed", "implemented",
        "migrated", "integrated", "designed", "architected",
        "ci/cd", "pipeline", "deployment", "testing", "migration",
    )
    OUTCOME_WORDS: Tuple[str, ...] = (
        "reduced", "increased", "improved", "delivered", "achieved",
        "enabled", "saved", "launched", "shipped", "completed",
        "optimized", "accelerated", "eliminated", "resolved",
    )
    IMPACT_WORDS: Tuple[str, ...] = (
        "users", "customers", "revenue", "cost", "time", "team",
        "production", "performance", "efficiency", "quality",
    )
    STRONG_VERBS: Tuple[str, ...] = (
        "led", "built", "designed", "architected", "drove", "spearheaded",
        "delivered", "launched", "established", "transformed", "pioneered",
    )
    WEAK_PHRASES: Tuple[str, ...] = (
        "worked on", "helped with", "assisted", "involved in",
        "responsible for", "participated", "contributed to",
    )
    TASK_ONLY_STARTS: Tuple[str, ...] = ("building", "implementing", "developing", "creating", "working")

    MIN_DETAILED_LENGTH: int = 30
    MAX_SCANNABLE_LENGTH: int = 150


_BULLETS = BulletPatterns()

DUPLICATE_THRESHOLD = 0.5


# =============================================================================
# TECHNOLOGY LISTS
# =============================================================================


def _should_filter(tech: str, all_lower: Sequence[str], options: TechnologyFilterOptions) -> bool:
    lower = tech.lower()

    if options.remove_obvious and lower in (t.lower() for t in OBVIOUS_TOOLS):
        return True

    if options.remove_vague and lower in (t.lower() for t in VAGUE_TERMS):
        return True

    if options.remove_redundant:
        for keep, remove in REDUNDANT_PAIRS:
            if lower == remove.lower() and keep.lower() in all_lower:
                return True

    return False


def filter_technologies(technologies: Sequence[str], options: TechnologyFilterOptions = None) -> List[str]:
    """
    Clean up a technology list.

    Case-insensitive duplicates are dropped first (first spelling wins), then the
    enabled filters, then the list is cut to ``max_count``.
    """
    options = options or TechnologyFilterOptions()

    seen = set()
    unique = []
    for tech in technologies:
        if tech.lower() not in seen:
            seen.add(tech.lower())
            unique.append(tech)

    all_lower = [t.lower() for t in unique]
    filtered = [tech for tech in unique if not _should_filter(tech, all_lower, options)]
    return filtered[: options.max_count]


def prioritize_technologies(technologies: Sequence[str]) -> List[str]:
    """Stable sort by display priority, highest first."""
    return sorted(technologies, key=lambda t: TECHNOLOGY_PRIORITY.get(t.lower(), 0), reverse=True)


def process_technologies(technologies: Sequence[str], options: TechnologyFilterOptions = None) -> List[str]:
    return filter_technologies(prioritize_technologies(technologies), options)


# =============================================================================
# BULLETS
# =============================================================================


def _key_elements(bullet: str):
    text = bullet.lower()
    metrics = [m.lower() for m in _BULLETS.METRIC.findall(text)]
    numbers = _BULLETS.NUMBER.findall(text)
    keywords = [kw for kw in _BULLETS.COMPARISON_KEYWORDS if kw in text]
    return metrics, numbers, keywords


def bullet_similarity(a: str, b: str) -> float:
    """
    Similarity of two bullets in [0, 1].

    Shared metric +0.5, shared number greater than 1 +0.3, plus 0.2 times the
    share of action keywords the two have in common.
    """
    metrics_a, numbers_a, keywords_a = _key_elements(a)
    metrics_b, numbers_b, keywords_b = _key_elements(b)

    similarity = 0.0

    if any(m in metrics_b for m in metrics_a):
        similarity += 0.5

    if any(int(n) > 1 and n in numbers_b for n in numbers_a):
        similarity += 0.3

    all_keywords = set(keywords_a) | set(keywords_b)
    if all_keywords:
        shared = [k for k in keywords_a if k in keywords_b]
        similarity += len(shared) / len(all_keywords) * 0.2

    return min(1.0, similarity)


def are_similar_bullets(a: str, b: str, threshold: float = DUPLICATE_THRESHOLD) -> bool:
    return bullet_similarity(a, b) >= threshold


def deduplicate_bullets(bullets: Sequence[str]) -> List[str]:
    """Keep each bullet unless it is similar to one already kept."""
    unique: List[str] = []
    for bullet in bullets:
        if not any(are_similar_bullets(existing, bullet) for existing in unique):
            unique.append(bullet)
    return unique


def score_impact(bullet: str) -> float:
    """
    Heuristic resume-worthiness of a bullet, in [0, 1].

    Rewards metrics, outcome words, user/business impact words and a strong
    opening verb; penalizes weak phrasing, task-only openings without an
    outcome, and bullets that are very short or very long.
    """
    text = bullet.lower()
    score = 0.5

    if _BULLETS.IMPACT_METRIC.search(text):
        score += 0.3
    if any(word in text for word in _BULLETS.OUTCOME_WORDS):
        score += 0.2
    if any(word in text for word in _BULLETS.IMPACT_WORDS):
        score += 0.15
    if text.startswith(_BULLETS.STRONG_VERBS):
        score += 0.1

    if any(phrase in text for phrase in _BULLETS.WEAK_PHRASES):
        score -= 0.2
    if text.startswith(_BULLETS.TASK_ONLY_STARTS) and not _BULLETS.HAS_OUTCOME.search(text):
        score -= 0.15

    if len(bullet) < _BULLETS.MIN_DETAILED_LENGTH:
        score -= 0.1
    if len(bullet) > _BULLETS.MAX_SCANNABLE_LENGTH:
        score -= 0.05

    return max(0.0, min(1.0, score))


def sort_by_impact(bullets: Sequence[str]) -> List[str]:
    return sorted(bullets, key=score_impact, reverse=True)


def process_bullets(bullets: Sequence[str], max_bullets: int) -> List[str]:
    """Deduplicate, order by impact, keep the top ``max_bullets``."""
    return sort_by_impact(deduplicate_bullets(bullets))[:max_bullets]
