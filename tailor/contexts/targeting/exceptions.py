"""Custom exceptions for the Targeting context."""

from pathlib import Path
from typing import Optional


class InvalidMatchConfigError(ValueError):
    """
    Exception raised when a match configuration is malformed.

    Raised for negative weights or bounds, min > max bounds, and keys that are
    not part of the configuration schema.

    Attributes:
        message: Error description
        config_path: Config file the values came from, if any
    """

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path

        parts = [message]
        if config_path:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))
