"""
Job requirements data structure for the Intake context.

JobRequirements is the record the Targeting context scores against. It is
produced by an external extractor (LLM call, manual entry) or by the keyword
fallback in ``tailor.contexts.intake.fallback``, and treated as immutable input.

Factory methods:
    from_dict(data) - Build from a parsed mapping (camelCase or snake_case keys)
    from_file(path) - Load from a .json or .yaml requirements file
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from tailor.contexts.intake.exceptions import RequirementsFileError
from tailor.utils.structured_file import read_structured_file
from tailor.utils.text_processing import snake_case_keys, string_list

SeniorityLevel = Literal["junior", "mid", "senior", "staff", "principal", "lead", "manager", "director"]
JobDomain = Literal[
    "fintech",
    "healthcare",
    "ecommerce",
    "gaming",
    "enterprise",
    "consumer",
    "saas",
    "crypto",
    "ai-ml",
    "social",
    "media",
    "education",
    "other",
]
CompanyType = Literal["startup", "scaleup", "enterprise", "agency", "consulting", "faang"]
WorkArrangement = Literal["remote", "hybrid", "onsite"]

SENIORITY_LEVELS = ("junior", "mid", "senior", "staff", "principal", "lead", "manager", "director")
JOB_DOMAINS = (
    "fintech",
    "healthcare",
    "ecommerce",
    "gaming",
    "enterprise",
    "consumer",
    "saas",
    "crypto",
    "ai-ml",
    "social",
    "media",
    "education",
    "other",
)
COMPANY_TYPES = ("startup", "scaleup", "enterprise", "agency", "consulting", "faang")
WORK_ARRANGEMENTS = ("remote", "hybrid", "onsite")

_LIST_FIELDS = (
    "required_technologies",
    "preferred_technologies",
    "key_responsibilities",
    "keywords",
    "buzzwords",
)


@dataclass(frozen=True)
class JobRequirements:
    """
    Requirements extracted from a job description.

    Absent optional fields mean "no preference" and contribute neutral scores.
    """

    # Role info
    title: str
    seniority: SeniorityLevel = "mid"
    department: Optional[str] = None

    # Company info
    company_name: Optional[str] = None
    company_type: Optional[CompanyType] = None
    domain: Optional[JobDomain] = None
    location: Optional[str] = None
    work_arrangement: Optional[WorkArrangement] = None

    # Technical requirements
    required_technologies: List[str] = field(default_factory=list)
    preferred_technologies: List[str] = field(default_factory=list)
    years_experience: Optional[float] = None

    # Responsibilities
    key_responsibilities: List[str] = field(default_factory=list)

    # Soft requirements
    leadership_required: bool = False
    team_size: Optional[str] = None
    mentorship_expected: bool = False

    # Keywords for matching
    keywords: List[str] = field(default_factory=list)
    buzzwords: List[str] = field(default_factory=list)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: Optional[Path] = None) -> "JobRequirements":
        """
        Build requirements from a mapping.

        Args:
            data: Parsed requirements (camelCase keys as written by extractors are accepted)
            path: Optional source file, used in error messages

        Raises:
            RequirementsFileError: If the title is missing or an enum field holds an unknown value
        """
        values = snake_case_keys(data)
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in values.items() if k in known and v is not None}

        if not values.get("title"):
            raise RequirementsFileError("Requirements must have a title", field_name="title", path=path)

        values["seniority"] = str(values.get("seniority", "mid")).lower()
        _check_choice(values, "seniority", SENIORITY_LEVELS, path)
        _check_choice(values, "domain", JOB_DOMAINS, path)
        _check_choice(values, "company_type", COMPANY_TYPES, path)
        _check_choice(values, "work_arrangement", WORK_ARRANGEMENTS, path)

        for name in _LIST_FIELDS:
            values[name] = string_list(values.get(name))

        if values.get("team_size") is not None:
            values["team_size"] = str(values["team_size"])

        return cls(**values)

    @classmethod
    def from_file(cls, path: Path) -> "JobRequirements":
        """
        Load requirements from a .json or .yaml/.yml file.

        Raises:
            StructuredFileError: If the file is not valid JSON or YAML
            RequirementsFileError: If the content is not a valid requirements record
        """
        path = Path(path)
        data = read_structured_file(path)
        if not isinstance(data, Mapping):
            raise RequirementsFileError("Requirements file must hold a mapping", path=path)
        return cls.from_dict(data, path=path)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    @property
    def all_technologies(self) -> List[str]:
        """Required followed by preferred technologies."""
        return [*self.required_technologies, *self.preferred_technologies]

    @property
    def non_buzzword_keywords(self) -> List[str]:
        """Keywords that are not also listed as buzzwords."""
        return [k for k in self.keywords if k not in self.buzzwords]


def _check_choice(values: Dict[str, Any], name: str, choices: tuple, path: Optional[Path]) -> None:
    value = values.get(name)
    if value is None:
        return
    value = str(value).lower()
    if value not in choices:
        raise RequirementsFileError(
            f"Unknown {name} '{value}'. Expected one of: {', '.join(choices)}",
            field_name=name,
            path=path,
        )
    values[name] = value
