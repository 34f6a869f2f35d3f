"""
Reusable patterns and constants for keyword-based requirements extraction.

Used by the fallback extractor when no model-backed extractor is available.

Conventions:
- Static tables are read-only mappings built once at import
- Pattern groups that belong together live in frozen dataclasses
- All patterns are case-insensitive
"""

import re
from dataclasses import dataclass
from types import MappingProxyType


def _ci(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


# =============================================================================
# TECHNOLOGIES
# =============================================================================

# Canonical technology name -> pattern that detects it in free text
TECH_PATTERNS = MappingProxyType(
    {
        # Languages
        "JavaScript": _ci(r"\bjavascript\b|\bJS\b"),
        "TypeScript": _ci(r"\btypescript\b|\bTS\b"),
        "Swift": _ci(r"\bswift\b"),
        "Kotlin": _ci(r"\bkotlin\b"),
        "Objective-C": _ci(r"\bobjective-c\b|\bobjc\b"),
        "Java": _ci(r"\bjava\b(?!script)"),
        "Python": _ci(r"\bpython\b"),
        "Go": _ci(r"\bgolang\b|\bgo\s+lang\b"),
        "Rust": _ci(r"\brust\b"),
        "Ruby": _ci(r"\bruby\b"),
        # Mobile
        "iOS": _ci(r"\bios\b"),
        "Android": _ci(r"\bandroid\b"),
        "React Native": _ci(r"\breact\s*native\b"),
        "SwiftUI": _ci(r"\bswiftui\b"),
        "UIKit": _ci(r"\buikit\b"),
        "Jetpack Compose": _ci(r"\bjetpack\s*compose\b|\bcompose\b"),
        "Expo": _ci(r"\bexpo\b"),
        # Frontend
        "React": _ci(r"\breact\b(?!\s*native)"),
        "Next.js": _ci(r"\bnext\.?js\b|\bnext\s+js\b"),
        "Vue": _ci(r"\bvue\.?js\b|\bvue\b"),
        "Angular": _ci(r"\bangular\b"),
        # Backend
        "Node.js": _ci(r"\bnode\.?js\b|\bnode\s+js\b"),
        "Express": _ci(r"\bexpress\.?js\b|\bexpress\b"),
        "NestJS": _ci(r"\bnest\.?js\b"),
        "Fastify": _ci(r"\bfastify\b"),
        # Databases
        "PostgreSQL": _ci(r"\bpostgres\b|\bpostgresql\b"),
        "MySQL": _ci(r"\bmysql\b"),
        "MongoDB": _ci(r"\bmongodb\b|\bmongo\b"),
        "Redis": _ci(r"\bredis\b"),
        "SQLite": _ci(r"\bsqlite\b"),
        "Firebase": _ci(r"\bfirebase\b"),
        "Supabase": _ci(r"\bsupabase\b"),
        # Cloud
        "AWS": _ci(r"\baws\b|\bamazon\s+web\s+services\b"),
        "GCP": _ci(r"\bgcp\b|\bgoogle\s+cloud\b"),
        "Azure": _ci(r"\bazure\b"),
        # DevOps
        "Docker": _ci(r"\bdocker\b"),
        "Kubernetes": _ci(r"\bkubernetes\b|\bk8s\b"),
        "GitHub Actions": _ci(r"\bgithub\s*actions\b"),
        "CI/CD": _ci(r"\bci/?cd\b"),
        "Fastlane": _ci(r"\bfastlane\b"),
        "Terraform": _ci(r"\bterraform\b"),
        # Testing
        "Jest": _ci(r"\bjest\b"),
        "Cypress": _ci(r"\bcypress\b"),
        "XCTest": _ci(r"\bxctest\b"),
        # APIs
        "REST": _ci(r"\brest\b|\brestful\b"),
        "GraphQL": _ci(r"\bgraphql\b"),
        "gRPC": _ci(r"\bgrpc\b"),
    }
)

# =============================================================================
# SENIORITY, DOMAIN, WORK ARRANGEMENT
# =============================================================================

# Seniority level -> indicator patterns (each hit counts one vote)
SENIORITY_PATTERNS = MappingProxyType(
    {
        "junior": (_ci(r"\bjunior\b"), _ci(r"\bentry[- ]level\b"), _ci(r"\b0-2\s*years?\b"), _ci(r"\b1-2\s*years?\b")),
        "mid": (_ci(r"\bmid[- ]level\b"), _ci(r"\b2-5\s*years?\b"), _ci(r"\b3-5\s*years?\b"), _ci(r"\bintermediate\b")),
        "senior": (_ci(r"\bsenior\b"), _ci(r"\bsr\.?(?!\w)"), _ci(r"\b5\+?\s*years?\b"), _ci(r"\b5-8\s*years?\b")),
        "staff": (_ci(r"\bstaff\b"), _ci(r"\b8\+?\s*years?\b"), _ci(r"\b10\+?\s*years?\b")),
        "principal": (_ci(r"\bprincipal\b"), _ci(r"\barchitect\b"), _ci(r"\bdistinguished\b")),
        "lead": (_ci(r"\blead\b"), _ci(r"\btech\s*lead\b"), _ci(r"\bteam\s*lead\b")),
        "manager": (_ci(r"\bmanager\b"), _ci(r"\bengineering\s*manager\b"), _ci(r"\bem\b")),
        "director": (_ci(r"\bdirector\b"), _ci(r"\bvp\b"), _ci(r"\bhead\s+of\b")),
    }
)

# Domain -> indicator patterns, checked in declaration order (first hit wins)
DOMAIN_PATTERNS = MappingProxyType(
    {
        "fintech": (_ci(r"\bfintech\b"), _ci(r"\bfinancial\b"), _ci(r"\bbanking\b"), _ci(r"\bpayments?\b")),
        "healthcare": (_ci(r"\bhealthcare\b"), _ci(r"\bmedical\b"), _ci(r"\bhealth\s*tech\b")),
        "ecommerce": (_ci(r"\becommerce\b"), _ci(r"\be-commerce\b"), _ci(r"\bretail\b"), _ci(r"\bmarketplace\b")),
        "gaming": (_ci(r"\bgaming\b"), _ci(r"\bgames?\b")),
        "enterprise": (_ci(r"\benterprise\b"), _ci(r"\bb2b\b")),
        "consumer": (_ci(r"\bconsumer\b"), _ci(r"\bb2c\b")),
        "saas": (_ci(r"\bsaas\b"), _ci(r"\bsoftware\s*as\s*a\s*service\b")),
        "crypto": (_ci(r"\bcrypto\b"), _ci(r"\bblockchain\b"), _ci(r"\bweb3\b"), _ci(r"\bdefi\b")),
        "ai-ml": (_ci(r"\bai\b"), _ci(r"\bmachine\s*learning\b"), _ci(r"\bml\b"), _ci(r"\bllm\b")),
        "social": (_ci(r"\bsocial\b"), _ci(r"\bsocial\s*media\b")),
        "media": (_ci(r"\bmedia\b"), _ci(r"\bstreaming\b"), _ci(r"\bcontent\b")),
        "education": (_ci(r"\beducation\b"), _ci(r"\bedtech\b"), _ci(r"\blearning\b")),
    }
)

WORK_ARRANGEMENT_PATTERNS = MappingProxyType(
    {
        "remote": (_ci(r"\bremote\b"), _ci(r"\bfully\s*remote\b"), _ci(r"\bwork\s*from\s*home\b"), _ci(r"\bwfh\b")),
        "hybrid": (_ci(r"\bhybrid\b"), _ci(r"\bflexible\b")),
        "onsite": (_ci(r"\bonsite\b"), _ci(r"\bon-site\b"), _ci(r"\bin[- ]office\b"), _ci(r"\bin[- ]person\b")),
    }
)

# =============================================================================
# SOFT SIGNALS
# =============================================================================

BUZZWORD_PATTERNS = (
    _ci(r"\bagile\b"),
    _ci(r"\bscrum\b"),
    _ci(r"\bcross[- ]functional\b"),
    _ci(r"\bcollaborat"),
    _ci(r"\bself[- ]starter\b"),
    _ci(r"\bfast[- ]paced\b"),
    _ci(r"\bmentorship\b"),
    _ci(r"\bleadership\b"),
    _ci(r"\bteamwork\b"),
    _ci(r"\bcommunication\b"),
    _ci(r"\bproblem[- ]solving\b"),
)


@dataclass(frozen=True)
class RequirementSignalPatterns:
    """
    Patterns for boolean requirement signals and title lookup.

    Example:
        >>> patterns = RequirementSignalPatterns()
        >>> bool(patterns.LEADERSHIP.search("You will lead a squad"))
        True
    """

    LEADERSHIP: re.Pattern = _ci(r"\blead\b|\bleading\b|\bmanag|\bteam\s*lead\b")
    MENTORSHIP: re.Pattern = _ci(r"\bmentor\b|\bmentoring\b|\bmentorship\b|\bcoach\b|\bcoaching\b")

    # "Role: ...", "Position: ...", "Title: ...", "Job Title: ..." lines
    TITLE_FIELD: re.Pattern = _ci(r"(?:role|position|title|job\s*title)\s*:?\s*([^\n]+)")

    # Maximum length of a first line that still reads as a title
    MAX_TITLE_LENGTH: int = 100
