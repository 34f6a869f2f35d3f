"""
Reading of JSON and YAML data files.

Job history, skills and requirements files share one reader so a malformed
file fails the same way everywhere: as a ``StructuredFileError`` naming the
file, never as a parser-specific exception.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf


class StructuredFileError(ValueError):
    """
    Exception raised when a data file is not valid JSON or YAML.

    Attributes:
        message: Parser error description
        path: File that failed to parse
    """

    def __init__(self, message: str, path: Path):
        self.message = message
        self.path = path
        super().__init__(f"Could not parse {path}: {message}")


def read_structured_file(path: Path) -> Any:
    """
    Read a ``.json`` file with json, anything else as YAML through OmegaConf.

    Returns:
        Plain Python containers (dicts, lists, scalars)

    Raises:
        StructuredFileError: If the file does not parse
    """
    path = Path(path)
    try:
        if path.suffix == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        return OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise StructuredFileError(str(e), path) from e
