#!/usr/bin/env python3
"""
Extract structured requirements from a job description with keyword patterns.

Writes a requirements YAML that match_job.py accepts, so the extraction can be
reviewed and corrected by hand before matching.

Usage:
    python scripts/extract_requirements.py posting.txt
    python scripts/extract_requirements.py posting.txt --output senior_ios.yaml
"""

import os
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf

from tailor.contexts.intake import keyword_based_extraction
from tailor.contexts.intake.logger import _log_info, _log_success, setup_intake_logger
from tailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Extract job requirements from a job description.",
    add_completion=False,
)


@app.command()
def main(
    description_file: Annotated[
        Path,
        typer.Argument(help="Job description text or markdown", exists=True, dir_okay=False, resolve_path=True),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Requirements YAML to write (default: print to stdout)"),
    ] = None,
):
    """Run keyword-based extraction and emit requirements as YAML."""
    setup_intake_logger(LOGS_PATH / f"extract_{now()}", source=description_file.name)

    text = description_file.read_text(encoding="utf-8")
    requirements = keyword_based_extraction(text)
    _log_info(
        f"'{requirements.title}': {len(requirements.required_technologies)} technologies, "
        f"seniority {requirements.seniority}"
    )

    config = OmegaConf.create(requirements.to_dict())

    if output is None:
        typer.echo(OmegaConf.to_yaml(config))
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(config, output)
    _log_success(f"Requirements written to {output}")


if __name__ == "__main__":
    app()
