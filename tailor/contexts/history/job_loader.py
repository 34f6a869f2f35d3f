"""
Job history loading for the History context.

Job files live under ``$DATA_PATH/jobs`` by default, one job per file or a list
of jobs per file, in JSON or YAML. Loading parses each record into its tagged
variant (BasicJob / EnhancedJob) so shape errors surface with the offending
file named.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from tailor.contexts.history.job_data_structure import Job, parse_job
from tailor.contexts.history.logger import _log_debug, _log_info
from tailor.utils.structured_file import read_structured_file

load_dotenv()
DATA_PATH = Path(os.getenv("DATA_PATH", "data"))
JOBS_PATH = DATA_PATH / "jobs"

JOB_FILE_SUFFIXES = (".json", ".yaml", ".yml")


def load_job_file(path: Path) -> List[Job]:
    """
    Load one job file.

    The file may hold a single job record, a list of records, or a mapping with
    a ``jobs`` list.

    Raises:
        StructuredFileError: If the file is not valid JSON or YAML
        UnknownJobFormatError: If any record matches neither job shape
    """
    path = Path(path)
    data = read_structured_file(path)

    if isinstance(data, dict) and isinstance(data.get("jobs"), list):
        records = data["jobs"]
    elif isinstance(data, list):
        records = data
    else:
        records = [data]

    jobs = [parse_job(record, source=str(path)) for record in records]
    _log_debug(f"Loaded {len(jobs)} job(s) from {path.name}")
    return jobs


def load_jobs(path: Optional[Path] = None) -> List[Job]:
    """
    Load job history from a file or a directory of job files.

    Directory files are read in sorted filename order so results are
    reproducible.

    Args:
        path: File or directory (defaults to $DATA_PATH/jobs)

    Returns:
        Parsed job variants in file order
    """
    path = Path(path) if path is not None else JOBS_PATH

    if path.is_dir():
        files = sorted(p for p in path.iterdir() if p.suffix in JOB_FILE_SUFFIXES and p.is_file())
    else:
        files = [path]

    jobs: List[Job] = []
    for job_file in files:
        jobs.extend(load_job_file(job_file))

    _log_info(f"Loaded {len(jobs)} job(s) from {path}")
    return jobs
