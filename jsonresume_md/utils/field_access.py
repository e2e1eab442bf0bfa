"""
Defensive field access for loosely-typed resume data.

Resume documents come from arbitrary sources, so every lookup has to tolerate
missing keys, null values and unexpected shapes. None stands for "absent".
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional


def get_path(root: Any, *path: Any) -> Any:
    """
    Walk a key path through nested mappings and lists.

    Returns None as soon as a step cannot be taken (missing key, null value,
    non-container value, out-of-range index). Never raises.

    Args:
        root: Top-level value (usually the resume dict)
        *path: Keys (str for mappings, int for lists)

    Returns:
        Value at the end of the path, or None if any step is absent

    Example:
        >>> get_path({"basics": {"location": {"countryCode": "DE"}}},
        ...          "basics", "location", "countryCode")
        'DE'
        >>> get_path({"basics": None}, "basics", "location") is None
        True
    """
    current = root
    for key in path:
        if isinstance(current, Mapping):
            current = current.get(key)
        elif isinstance(current, (list, tuple)) and isinstance(key, int) and not isinstance(key, bool):
            if -len(current) <= key < len(current):
                current = current[key]
            else:
                return None
        else:
            return None
    return current


def as_mapping(value: Any) -> Optional[Dict[str, Any]]:
    """Return value if it is a mapping, else None."""
    return value if isinstance(value, Mapping) else None


def as_list(value: Any) -> List[Any]:
    """Return value as a list if it is a list/tuple, else an empty list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []
