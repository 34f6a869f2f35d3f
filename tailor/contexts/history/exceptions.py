"""Custom exceptions for the History context."""

from typing import Any, Optional


class UnknownJobFormatError(ValueError):
    """
    Exception raised when a job record matches neither the basic nor the enhanced shape.

    This is the only hard failure in job normalization. It signals malformed
    upstream data and is never recovered from inside the matching engine.

    Attributes:
        message: Error description
        record: The offending job record (as received)
        source: Optional origin of the record (e.g., file path)
    """

    def __init__(self, message: str = "Unknown job format", record: Any = None, source: Optional[str] = None):
        self.message = message
        self.record = record
        self.source = source

        parts = [message]

        if source:
            parts.append(f"Source: {source}")

        if record is not None:
            snippet = repr(record)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Record: {snippet}")

        super().__init__("\n".join(parts))
