#!/usr/bin/env python3
"""
Match a job history against one job's requirements.

Requirements come either from a structured file (.yaml/.yml/.json, as written
by an extractor or by extract_requirements.py) or from a raw job description,
in which case keyword-based extraction is used.

Usage:
    # Structured requirements, default data paths
    python scripts/match_job.py senior_ios.yaml

    # Raw job description, custom history, JSON output
    python scripts/match_job.py posting.txt --jobs data/jobs --skills data/skills.yaml --json result.json

    # Only rank jobs scoring at least 0.6
    python scripts/match_job.py senior_ios.yaml --min-job-score 0.6
"""

import json
import os
from pathlib import Path
from typing import List, Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from tailor.contexts.history import SkillsData, load_jobs
from tailor.contexts.intake import JobRequirements, keyword_based_extraction
from tailor.contexts.targeting import (
    format_match_report,
    load_match_config,
    match_against_requirements,
    recommend_summary_template,
)
from tailor.contexts.targeting.logger import _log_error, log_match_result, setup_targeting_logger
from tailor.utils.timestamp import now

load_dotenv()
DATA_PATH = Path(os.getenv("DATA_PATH", "data"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

STRUCTURED_SUFFIXES = (".yaml", ".yml", ".json")

app = typer.Typer(
    help="Match job history and skills against job requirements.",
    add_completion=False,
)


def load_requirements(path: Path) -> JobRequirements:
    """Structured requirements file, or keyword extraction over a raw job description."""
    if path.suffix in STRUCTURED_SUFFIXES:
        return JobRequirements.from_file(path)
    return keyword_based_extraction(path.read_text(encoding="utf-8"))


@app.command()
def main(
    requirements_file: Annotated[
        Path,
        typer.Argument(
            help="Requirements file (.yaml/.json) or raw job description text",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    jobs: Annotated[
        Optional[Path],
        typer.Option("--jobs", "-j", help="Job file or directory (default: $DATA_PATH/jobs)", exists=True),
    ] = None,
    skills: Annotated[
        Optional[Path],
        typer.Option("--skills", "-s", help="Skills file (default: $DATA_PATH/skills.yaml)", exists=True),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Match config YAML (default: $MATCH_CONFIG_PATH)", exists=True),
    ] = None,
    overrides: Annotated[
        Optional[List[str]],
        typer.Option("--set", help="Config override in dotlist form, e.g. weights.technology=0.5"),
    ] = None,
    min_job_score: Annotated[
        Optional[float],
        typer.Option("--min-job-score", help="Only rank jobs with at least this composite score"),
    ] = None,
    json_output: Annotated[
        Optional[Path],
        typer.Option("--json", help="Also write the full result as JSON to this file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo DEBUG messages to the console"),
    ] = False,
):
    """Score jobs, select content and print a match report."""
    log_dir = LOGS_PATH / f"match_{now()}"
    log_file = setup_targeting_logger(
        log_dir,
        requirements_source=requirements_file.name,
        console_level="DEBUG" if verbose else "INFO",
    )

    try:
        requirements = load_requirements(requirements_file)
        match_config = load_match_config(config, overrides)
        job_history = load_jobs(jobs)
        skills_data = SkillsData.from_file(skills or DATA_PATH / "skills.yaml")
        result = match_against_requirements(
            job_history,
            skills_data,
            requirements,
            match_config,
            min_job_score=min_job_score,
        )
    except (ValueError, OSError) as e:
        _log_error(f"Match failed: {e}")
        raise typer.Exit(1)

    log_match_result(result)

    typer.echo(format_match_report(result, skills_data))
    typer.echo(f"\nSuggested summary template: {recommend_summary_template(requirements)}")

    if json_output:
        json_output.parent.mkdir(parents=True, exist_ok=True)
        json_output.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        typer.echo(f"JSON result: {json_output}")

    typer.echo(f"Log: {log_file}")


if __name__ == "__main__":
    app()
