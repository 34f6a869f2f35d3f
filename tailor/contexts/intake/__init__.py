"""
Intake Context

Responsibilities:
- Represents the requirements extracted from a job description
- Loads requirements produced by external extractors (JSON/YAML)
- Provides keyword-based extraction as a fallback extractor

Owns: JobRequirements record, requirement enumerations, fallback extraction patterns
Never: Makes targeting decisions or reads candidate history
"""

from tailor.contexts.intake.exceptions import RequirementsFileError
from tailor.contexts.intake.fallback import keyword_based_extraction
from tailor.contexts.intake.job_requirements import SENIORITY_LEVELS, JobRequirements

__all__ = [
    "JobRequirements",
    "SENIORITY_LEVELS",
    "RequirementsFileError",
    "keyword_based_extraction",
]
