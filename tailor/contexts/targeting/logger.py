"""
Targeting context logger.

Provides logging interface for the targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, requirements_source: str = "", console_level: str = "INFO") -> Path:
    """
    Setup logger for targeting context.

    Configures loguru with provenance tracking and targeting-specific context.

    Args:
        log_dir: Directory for this matching session
        requirements_source: Where the job requirements came from (file or description)
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file

    Example:
        from tailor.contexts.targeting.logger import setup_targeting_logger, _log_info

        log_file = setup_targeting_logger(log_dir, requirements_source="senior_ios.yaml")
        _log_info("Starting match...")
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Requirements": requirements_source} if requirements_source else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_match_start(requirements_title: str, job_count: int, skill_count: int) -> None:
    """Log start of a match run."""
    _log_debug(f"Matching {job_count} job(s) and {skill_count} skill(s) against '{requirements_title}'")


def log_match_result(result) -> None:
    """
    Log a match result summary.

    Args:
        result: MatchResult from match_against_requirements()
    """
    coverage = result.technology_coverage.coverage_percent
    fit = result.summary.overall_fit

    if fit in ("excellent", "good"):
        _log_success(f"Overall fit: {fit} ({coverage}% technology coverage)")
    elif fit == "moderate":
        _log_info(f"Overall fit: {fit} ({coverage}% technology coverage)")
    else:
        _log_warning(f"Overall fit: {fit} ({coverage}% technology coverage)")

    if result.ranked_jobs:
        top = result.ranked_jobs[0]
        _log_info(f"  Top job: {top.company_name} - {top.title} ({top.total_score:.2f})")
    _log_info(
        f"  Selected {len(result.selected_projects)} project(s), "
        f"{len(result.selected_achievements)} achievement(s), {len(result.selected_skills)} skill(s)"
    )
