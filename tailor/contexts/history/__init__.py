"""
History Context

Responsibilities:
- Represents the candidate's job history in its two source shapes (basic, enhanced)
- Normalizes job records into one internal shape with derived dates and durations
- Represents the skills inventory (categorized skills, featured, deprecated)
- Loads job history and skills from JSON/YAML files

Owns: Job record shapes, NormalizedJob, job normalization, skills inventory
Never: Scores or selects content
"""

from tailor.contexts.history.exceptions import UnknownJobFormatError
from tailor.contexts.history.job_data_structure import (
    Achievement,
    BasicJob,
    EnhancedJob,
    Job,
    NormalizedJob,
    Project,
    parse_job,
)
from tailor.contexts.history.job_loader import load_jobs
from tailor.contexts.history.normalizer import get_all_technologies, normalize_job, normalize_jobs
from tailor.contexts.history.skills import Skill, SkillsData

__all__ = [
    # Job shapes
    "Achievement",
    "BasicJob",
    "EnhancedJob",
    "Job",
    "NormalizedJob",
    "Project",
    "parse_job",
    # Normalization
    "normalize_job",
    "normalize_jobs",
    "get_all_technologies",
    "UnknownJobFormatError",
    # Skills
    "Skill",
    "SkillsData",
    # Loading
    "load_jobs",
]
