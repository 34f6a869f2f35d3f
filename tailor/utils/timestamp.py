"""Timestamp and date utilities."""

from datetime import date, datetime
from typing import Optional


def today(override: Optional[date] = None) -> date:
    """
    Return the reference date for date-dependent scoring.

    Every scorer that depends on "now" accepts an optional date and resolves it
    through here, so tests can pin the calendar without patching.
    """
    return override if override is not None else date.today()


def now() -> str:
    """Compact local timestamp for log directory names (e.g., 20251114_183045)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
