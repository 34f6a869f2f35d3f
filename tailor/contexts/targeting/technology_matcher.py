"""
Technology name normalization and fuzzy matching.

Job descriptions and work histories spell the same technology many ways
("k8s", "Kubernetes", "kube"). Everything that compares technology names goes
through ``normalize_tech_name`` / ``tech_matches`` so the alias table is the
single place those spellings are reconciled.

Matching is deliberately permissive: substring containment in either direction
counts, so "Java" matches "JavaScript" and "React" matches "React Native".
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple

from tailor.contexts.history.skills import Skill, SkillsData

# Canonical name -> lower-cased variants seen in the wild
TECH_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        # Languages
        "JavaScript": ("js", "javascript", "es6", "ecmascript", "es2015", "es2020"),
        "TypeScript": ("ts", "typescript"),
        # Mobile
        "React Native": ("react-native", "rn", "reactnative"),
        "React": ("reactjs", "react.js"),
        "Node.js": ("nodejs", "node", "node.js"),
        "Next.js": ("nextjs", "next.js", "next"),
        "Swift": ("swift", "ios"),
        "Kotlin": ("kotlin", "android"),
        "Objective-C": ("objc", "objective-c", "obj-c"),
        # Databases
        "PostgreSQL": ("postgres", "postgresql", "psql", "pg"),
        "MongoDB": ("mongo", "mongodb"),
        "MySQL": ("mysql",),
        "Redis": ("redis",),
        # Cloud / DevOps
        "Docker": ("docker", "containers"),
        "Kubernetes": ("k8s", "kubernetes", "kube"),
        "AWS": ("aws", "amazon web services", "s3", "ec2", "lambda"),
        "GCP": ("gcp", "google cloud", "google cloud platform"),
        "Azure": ("azure", "microsoft azure"),
        # CI/CD
        "GitHub Actions": ("github actions", "gha", "github-actions"),
        "GitLab CI": ("gitlab ci", "gitlab-ci", "gitlab pipelines"),
        "CircleCI": ("circleci", "circle ci", "circle-ci"),
        "Fastlane": ("fastlane",),
        # Mobile services
        "Firebase": ("firebase", "firestore"),
        # APIs
        "GraphQL": ("graphql", "gql"),
        "REST": ("rest", "restful", "rest api"),
        # UI frameworks
        "UIKit": ("uikit", "ui kit"),
        "SwiftUI": ("swiftui", "swift ui"),
        "Jetpack Compose": ("jetpack compose", "compose", "android compose"),
        # Testing
        "Jest": ("jest",),
        "Cypress": ("cypress",),
        "XCTest": ("xctest", "xcode testing"),
        # Build tools
        "Expo": ("expo", "expo-cli", "eas"),
        # Backend frameworks
        "NestJS": ("nestjs", "nest.js", "nest"),
        "Fastify": ("fastify",),
        "Express": ("express", "expressjs", "express.js"),
        # Other languages
        "Python": ("python", "py", "python3"),
        "Go": ("golang", "go"),
        "Rust": ("rust", "rustlang"),
        "Ruby": ("ruby", "rails", "ruby on rails"),
        "Java": ("java", "jvm"),
        # Other databases / platforms
        "SQLite": ("sqlite", "sqlite3"),
        "Supabase": ("supabase",),
        "Heroku": ("heroku",),
        "Dokku": ("dokku",),
        "Ansible": ("ansible",),
        "Terraform": ("terraform", "tf"),
    }
)

_SEPARATORS = re.compile(r"[.\-_\s]")


@dataclass
class TechMatch:
    """Partition of required technologies into matched (canonical names) and missing."""

    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


@dataclass
class SkillPartition:
    """Skills split by whether they satisfy required, preferred, or no technology."""

    required: List[Skill] = field(default_factory=list)
    preferred: List[Skill] = field(default_factory=list)
    other: List[Skill] = field(default_factory=list)


def normalize_tech_name(tech: str) -> str:
    """
    Map a technology spelling to its canonical name.

    Unknown names come back with only the first character upper-cased.

    Examples:
        >>> normalize_tech_name("k8s")
        'Kubernetes'
        >>> normalize_tech_name("svelte")
        'Svelte'
    """
    lower = tech.lower().strip()

    for canonical, aliases in TECH_ALIASES.items():
        if lower == canonical.lower() or lower in aliases:
            return canonical

    return tech[:1].upper() + tech[1:]


def tech_matches(tech1: str, tech2: str) -> bool:
    """
    True if two technology names refer to the same thing.

    Compares canonical forms case-insensitively: equal, substring either way,
    or equal once dots, dashes, underscores and whitespace are removed.
    """
    norm1 = normalize_tech_name(tech1).lower()
    norm2 = normalize_tech_name(tech2).lower()

    if norm1 == norm2:
        return True

    if norm1 in norm2 or norm2 in norm1:
        return True

    return _SEPARATORS.sub("", norm1) == _SEPARATORS.sub("", norm2)


def find_matching_techs(candidate_techs: Sequence[str], required_techs: Sequence[str]) -> TechMatch:
    """
    Partition required technologies by whether any candidate technology matches.

    Each required entry lands in exactly one list, under its canonical name.
    """
    result = TechMatch()

    for required in required_techs:
        canonical = normalize_tech_name(required)
        if any(tech_matches(candidate, required) for candidate in candidate_techs):
            result.matched.append(canonical)
        else:
            result.missing.append(canonical)

    return result


def skill_matches(skill: Skill, tech: str) -> bool:
    """True if the skill's name or any of its keywords matches the technology."""
    return tech_matches(skill.name, tech) or any(tech_matches(keyword, tech) for keyword in skill.keywords)


def find_matching_skills(
    skills: Iterable[Skill],
    required_techs: Sequence[str],
    preferred_techs: Sequence[str],
) -> SkillPartition:
    """
    Split skills into required / preferred / other.

    A skill matching both a required and a preferred technology counts as required.
    """
    partition = SkillPartition()

    for skill in skills:
        if any(skill_matches(skill, tech) for tech in required_techs):
            partition.required.append(skill)
        elif any(skill_matches(skill, tech) for tech in preferred_techs):
            partition.preferred.append(skill)
        else:
            partition.other.append(skill)

    return partition


def calculate_tech_coverage(
    candidate_techs: Sequence[str],
    required_techs: Sequence[str],
    preferred_techs: Sequence[str],
) -> float:
    """
    Weighted coverage in [0, 1]: 70% required, 30% preferred.

    An empty requirement list counts as fully covered.
    """
    required = find_matching_techs(candidate_techs, required_techs)
    preferred = find_matching_techs(candidate_techs, preferred_techs)

    required_ratio = len(required.matched) / len(required_techs) if required_techs else 1.0
    preferred_ratio = len(preferred.matched) / len(preferred_techs) if preferred_techs else 1.0

    return required_ratio * 0.7 + preferred_ratio * 0.3


def is_deprecated(skill_name: str, skills: SkillsData) -> bool:
    return any(tech_matches(skill_name, name) for name in skills.deprecated)


def is_featured(skill_name: str, skills: SkillsData) -> bool:
    return any(tech_matches(skill_name, name) for name in skills.featured)
