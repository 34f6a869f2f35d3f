"""Custom exceptions for the Intake context."""

from pathlib import Path
from typing import Optional


class RequirementsFileError(ValueError):
    """
    Exception raised when a requirements record cannot be turned into JobRequirements.

    Attributes:
        message: Error description
        field_name: Offending field, if a single field is to blame
        path: File the record came from, if loaded from disk
    """

    def __init__(self, message: str, field_name: Optional[str] = None, path: Optional[Path] = None):
        self.message = message
        self.field_name = field_name
        self.path = path

        parts = [message]
        if field_name:
            parts.append(f"Field: {field_name}")
        if path:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))
