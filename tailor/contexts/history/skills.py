"""
Skills inventory data structures for the History context.

The inventory maps category names (languages, frameworks, mobile, ...) to skill
lists, plus two cross-cutting name lists: ``featured`` skills to push forward
and ``deprecated`` skills to never show.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal

from tailor.utils.structured_file import read_structured_file
from tailor.utils.text_processing import snake_case_keys, string_list

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]

SKILL_LEVELS = ("beginner", "intermediate", "advanced", "expert")

# Keys of a skills file that are not categories
_RESERVED_KEYS = {"categories", "featured", "deprecated"}


@dataclass
class Skill:
    name: str
    level: SkillLevel = "intermediate"
    years_used: float = 0
    last_used: int = 0
    want_to_use: bool = False
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Skill":
        if not isinstance(data, Mapping):
            raise ValueError(f"Skill must be a mapping with a name, got {data!r}")
        data = snake_case_keys(data)
        name = str(data.get("name") or "").strip()
        if not name:
            raise ValueError(f"Skill without a name: {dict(data)!r}")
        level = str(data.get("level") or "intermediate").lower()
        if level not in SKILL_LEVELS:
            raise ValueError(f"Unknown skill level '{level}' for skill {data.get('name')!r}")
        return cls(
            name=name,
            level=level,
            years_used=data.get("years_used") or 0,
            last_used=int(data.get("last_used") or 0),
            want_to_use=bool(data.get("want_to_use", False)),
            keywords=string_list(data.get("keywords")),
        )


@dataclass
class SkillsData:
    """
    Candidate skills inventory.

    Attributes:
        categories: Category name -> skills in that category
        featured: Skill names to favour regardless of category
        deprecated: Skill names never to surface
    """

    categories: Dict[str, List[Skill]] = field(default_factory=dict)
    featured: List[str] = field(default_factory=list)
    deprecated: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillsData":
        """
        Build from a parsed skills file.

        Accepts either ``{"categories": {...}, "featured": [...], "deprecated": [...]}``
        or a flat layout where every list-valued key other than featured/deprecated
        is a category. Category names are kept verbatim.
        """
        if "categories" in data:
            raw_categories = data.get("categories") or {}
        else:
            raw_categories = {k: v for k, v in data.items() if k not in _RESERVED_KEYS}

        categories = {
            str(name): [Skill.from_dict(s) for s in skills or []]
            for name, skills in raw_categories.items()
            if isinstance(skills, (list, tuple))
        }

        return cls(
            categories=categories,
            featured=string_list(data.get("featured")),
            deprecated=string_list(data.get("deprecated")),
        )

    @classmethod
    def from_file(cls, path: Path) -> "SkillsData":
        """Load a skills inventory from a .json or .yaml/.yml file."""
        return cls.from_dict(read_structured_file(path) or {})

    def all_skills(self) -> List[Skill]:
        """Flat list of every skill, in category order."""
        flat: List[Skill] = []
        for skills in self.categories.values():
            flat.extend(skills)
        return flat

    def category_of(self, skill_name: str) -> str:
        """Name of the first category holding a skill with this exact name ('' if none)."""
        for category, skills in self.categories.items():
            if any(s.name == skill_name for s in skills):
                return category
        return ""
