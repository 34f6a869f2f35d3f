"""
Text processing helpers shared across contexts.

Job history and requirements files are authored as JSON/YAML with camelCase
keys (``startDate``, ``relevanceWeights``). The loaders convert keys to
snake_case once, at the file boundary, so dataclass fields can be filled
directly.
"""

import re
from collections.abc import Mapping
from typing import Any, List

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(key: str) -> str:
    """
    Convert a camelCase (or already snake_case) key to snake_case.

    Examples:
        >>> to_snake_case("relevanceWeights")
        'relevance_weights'
        >>> to_snake_case("start_date")
        'start_date'
    """
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def snake_case_keys(data: Any) -> Any:
    """
    Recursively convert mapping keys to snake_case.

    Lists are walked element-wise; scalar values are returned unchanged.
    Only keys are touched, so free-text values keep their original casing.
    """
    if isinstance(data, Mapping):
        return {to_snake_case(str(k)): snake_case_keys(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [snake_case_keys(item) for item in data]
    return data


def string_list(value: Any) -> List[str]:
    """
    Coerce a list-of-strings field from a data file.

    A single string is one item, not a sequence of characters. None and
    blank items are dropped, since an empty name matches every technology.

    Examples:
        >>> string_list("Haskell")
        ['Haskell']
        >>> string_list(["Swift", "", "  ", None, 3])
        ['Swift', '3']
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def dedupe_preserving_order(items) -> list:
    """Remove exact duplicates while keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()
