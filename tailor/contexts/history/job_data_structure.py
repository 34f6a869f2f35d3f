"""
Job history data structures for the History context.

A candidate's job history arrives in two shapes:

- Basic: flat fields (company name string, position, dates, technology list,
  achievement strings). Older job files use this.
- Enhanced: structured company/role/duration objects, categorized technologies,
  achievement records, projects, relevance weights and keyword bundles.

The two shapes are modelled as separate dataclasses joined in the ``Job`` union.
``parse_job()`` decides which one a raw record is, exactly once, by looking at the
type of its ``company`` field. Everything downstream of the normalizer works on
``NormalizedJob`` only.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Literal, Optional, Union

from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.utils.text_processing import snake_case_keys, string_list

# =============================================================================
# ENUMERATIONS
# =============================================================================

CompanySize = Literal["startup", "small", "medium", "large", "enterprise"]
CompanyStage = Literal["seed", "series-a", "series-b", "series-c", "public", "established"]
RoleLevel = Literal["junior", "mid", "senior", "staff", "principal", "lead", "manager", "director"]
RoleType = Literal["full-time", "part-time", "contract", "freelance", "internship"]
WorkStyle = Literal["remote", "hybrid", "onsite"]
AchievementCategory = Literal["performance", "quality", "cost", "time", "user", "business", "team"]

ROLE_LEVELS = ("junior", "mid", "senior", "staff", "principal", "lead", "manager", "director")
ACHIEVEMENT_CATEGORIES = ("performance", "quality", "cost", "time", "user", "business", "team")

# Technology sub-lists of an enhanced job, in flattening order
TECHNOLOGY_CATEGORIES = (
    "languages",
    "frameworks",
    "databases",
    "cloud",
    "devops",
    "tools",
    "mobile",
    "testing",
)

# Responsibility sub-lists of an enhanced job, in flattening order
RESPONSIBILITY_CATEGORIES = ("primary", "secondary", "leadership", "technical", "business")


def _known_fields(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only keys that are fields of ``cls`` and carry a non-null value."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names and v is not None}


# =============================================================================
# SHARED COMPONENTS
# =============================================================================


@dataclass
class Company:
    name: str
    industry: Optional[str] = None
    size: Optional[CompanySize] = None
    stage: Optional[CompanyStage] = None
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Company":
        return cls(**{"name": "", **_known_fields(cls, data)})


@dataclass
class Role:
    title: str
    level: Optional[RoleLevel] = None
    type: Optional[RoleType] = None
    department: Optional[str] = None
    reporting_to: Optional[str] = None
    team_size: Optional[int] = None
    direct_reports: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Role":
        values = _known_fields(cls, data)
        if "level" in values:
            values["level"] = str(values["level"]).lower()
        return cls(**values)


@dataclass
class Duration:
    """Employment period. ``end`` absent means the job is current."""

    start: str
    end: Optional[str] = None
    total_months: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Duration":
        return cls(**{"start": "", **_known_fields(cls, data)})


@dataclass
class Responsibilities:
    primary: List[str] = field(default_factory=list)
    secondary: List[str] = field(default_factory=list)
    leadership: List[str] = field(default_factory=list)
    technical: List[str] = field(default_factory=list)
    business: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Responsibilities":
        return cls(**{name: string_list(data.get(name)) for name in RESPONSIBILITY_CATEGORIES})

    def flatten(self) -> List[str]:
        """All responsibilities as one ordered list (primary first, business last)."""
        flat: List[str] = []
        for name in RESPONSIBILITY_CATEGORIES:
            flat.extend(getattr(self, name))
        return flat


@dataclass
class Technologies:
    languages: List[str] = field(default_factory=list)
    frameworks: List[str] = field(default_factory=list)
    databases: List[str] = field(default_factory=list)
    cloud: List[str] = field(default_factory=list)
    devops: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    mobile: List[str] = field(default_factory=list)
    testing: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Technologies":
        return cls(**{name: string_list(data.get(name)) for name in TECHNOLOGY_CATEGORIES})

    def flatten(self) -> List[str]:
        flat: List[str] = []
        for name in TECHNOLOGY_CATEGORIES:
            flat.extend(getattr(self, name))
        return flat


@dataclass
class Project:
    name: str
    description: Optional[str] = None
    role: Optional[str] = None
    duration: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    impact: Optional[str] = None
    team_size: Optional[int] = None
    challenges: List[str] = field(default_factory=list)
    solutions: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        values = _known_fields(cls, data)
        for name in ("technologies", "challenges", "solutions"):
            values[name] = string_list(data.get(name))
        return cls(**{"name": "", **values})


@dataclass
class Achievement:
    """
    A single accomplishment.

    ``quantifiable`` stays None until the normalizer infers it from the
    description (explicit True/False from the source file is kept as-is).
    """

    description: str
    impact: Optional[str] = None
    metrics: Optional[str] = None
    category: Optional[AchievementCategory] = None
    quantifiable: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Achievement":
        return cls(**{"description": "", **_known_fields(cls, data)})


@dataclass
class Keywords:
    job_titles: List[str] = field(default_factory=list)
    domains: List[str] = field(default_factory=list)
    buzzwords: List[str] = field(default_factory=list)
    certifications: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Keywords":
        return cls(**{f.name: string_list(data.get(f.name)) for f in fields(cls)})


@dataclass
class RelevanceWeights:
    """Author-supplied [0, 1] emphasis of a job on each kind of work."""

    mobile: Optional[float] = None
    web: Optional[float] = None
    backend: Optional[float] = None
    frontend: Optional[float] = None
    fullstack: Optional[float] = None
    leadership: Optional[float] = None
    startup: Optional[float] = None
    enterprise: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RelevanceWeights":
        return cls(**{k: float(v) for k, v in _known_fields(cls, data).items()})


@dataclass
class JobContext:
    business_context: Optional[str] = None
    challenges: List[str] = field(default_factory=list)
    constraints: List[str] = field(default_factory=list)
    stakeholders: List[str] = field(default_factory=list)
    methodology: Optional[str] = None
    work_style: Optional[WorkStyle] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JobContext":
        values = _known_fields(cls, data)
        for name in ("challenges", "constraints", "stakeholders"):
            values[name] = string_list(data.get(name))
        return cls(**values)


# =============================================================================
# JOB VARIANTS
# =============================================================================


@dataclass
class BasicJob:
    """
    Flat job record used by older job files.

    Dates may be given either as ``start_date``/``end_date`` or, in legacy files,
    as a nested ``duration`` object.
    """

    company: str
    position: str
    location: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    company_description: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    clients: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)
    description: List[str] = field(default_factory=list)
    duration: Optional[Duration] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BasicJob":
        if not str(data.get("company") or "").strip():
            raise UnknownJobFormatError("Unknown job format: basic job without a company name", record=data)
        if not data.get("position"):
            raise UnknownJobFormatError("Unknown job format: basic job without a position", record=data)

        values = _known_fields(cls, data)
        for name in ("technologies", "clients", "achievements"):
            values[name] = string_list(data.get(name))

        # ``description`` holds responsibility bullets; a single string is one bullet
        values["description"] = string_list(data.get("description"))

        duration = data.get("duration")
        values["duration"] = Duration.from_dict(duration) if isinstance(duration, Mapping) else None

        return cls(**values)


@dataclass
class EnhancedJob:
    """Structured job record with company/role/duration objects and rich metadata."""

    company: Company
    role: Role
    duration: Duration
    responsibilities: Optional[Responsibilities] = None
    projects: List[Project] = field(default_factory=list)
    technologies: Optional[Technologies] = None
    achievements: List[Achievement] = field(default_factory=list)
    context: Optional[JobContext] = None
    keywords: Optional[Keywords] = None
    relevance_weights: Optional[RelevanceWeights] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnhancedJob":
        company = data.get("company")
        role = data.get("role")
        duration = data.get("duration")
        if not isinstance(company, Mapping) or not str(company.get("name") or "").strip():
            raise UnknownJobFormatError("Unknown job format: enhanced job without company.name", record=data)
        if not isinstance(role, Mapping) or not role.get("title"):
            raise UnknownJobFormatError("Unknown job format: enhanced job without role.title", record=data)
        if not isinstance(duration, Mapping):
            raise UnknownJobFormatError("Unknown job format: enhanced job without duration", record=data)

        def optional(key, builder):
            value = data.get(key)
            return builder(value) if isinstance(value, Mapping) else None

        return cls(
            company=Company.from_dict(company),
            role=Role.from_dict(role),
            duration=Duration.from_dict(duration),
            responsibilities=optional("responsibilities", Responsibilities.from_dict),
            projects=[Project.from_dict(p) for p in data.get("projects") or []],
            technologies=optional("technologies", Technologies.from_dict),
            achievements=[
                Achievement.from_dict(a) if isinstance(a, Mapping) else Achievement(description=str(a))
                for a in data.get("achievements") or []
            ],
            context=optional("context", JobContext.from_dict),
            keywords=optional("keywords", Keywords.from_dict),
            relevance_weights=optional("relevance_weights", RelevanceWeights.from_dict),
        )


Job = Union[BasicJob, EnhancedJob]


def parse_job(raw: Any, source: Optional[str] = None) -> Job:
    """
    Build the tagged job variant from a raw record.

    Discriminates on the type of ``company``: a string means a basic job, a
    mapping means an enhanced job. Already-parsed variants pass through.
    camelCase keys (as written in JSON job files) are accepted.

    Args:
        raw: Job mapping (or BasicJob/EnhancedJob instance)
        source: Optional origin used in error messages

    Returns:
        BasicJob or EnhancedJob

    Raises:
        UnknownJobFormatError: If the record matches neither shape
    """
    if isinstance(raw, (BasicJob, EnhancedJob)):
        return raw

    if not isinstance(raw, Mapping):
        raise UnknownJobFormatError(record=raw, source=source)

    data = snake_case_keys(raw)
    company = data.get("company")

    try:
        if isinstance(company, Mapping):
            return EnhancedJob.from_dict(data)
        if isinstance(company, str):
            return BasicJob.from_dict(data)
    except UnknownJobFormatError as e:
        if source and not e.source:
            raise UnknownJobFormatError(e.message, record=e.record, source=source) from e
        raise

    raise UnknownJobFormatError(record=raw, source=source)


# =============================================================================
# NORMALIZED SHAPE
# =============================================================================


@dataclass(frozen=True)
class NormalizedJob:
    """
    Common internal job shape that all scoring operates on.

    Invariants: ``title`` and ``company_name`` are always present;
    ``end_date`` None means the job is current; dates are YYYY-MM when parsable.
    """

    company_name: str
    title: str
    location: str
    start_date: str
    duration_months: int
    end_date: Optional[str] = None
    company_description: Optional[str] = None
    company_info: Optional[Company] = None
    level: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    achievements: List[Achievement] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    relevance_weights: Optional[RelevanceWeights] = None
    keywords: Optional[Keywords] = None
    work_style: Optional[str] = None

    @property
    def is_current(self) -> bool:
        return self.end_date is None

    @property
    def job_id(self) -> str:
        """Informational identifier used to reference the job in results."""
        return f"{self.company_name}-{self.start_date}"
