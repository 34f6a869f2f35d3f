"""
Shared utilities for TAILOR.

Common functionality used across contexts:
- Logger setup
- Report formatting
- Key-case conversion and list coercion for JSON/YAML input
- JSON/YAML file reading
- Reference dates
"""

from tailor.utils.timestamp import now, today

__all__ = ["now", "today"]
