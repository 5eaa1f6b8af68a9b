"""
Where: services/metadata/core/function_name.py
What: Validate function names used as directory names and URL segments.
Why: A name ends up in both a filesystem path and an admin URL.
"""

import re

# A letter, then up to 127 letters, digits, underscores or hyphens.
_FUNCTION_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_\-]{0,127}$", re.IGNORECASE)


def validate_function_name(function_name: str) -> str:
    """
    Validate a function name and return it stripped of surrounding whitespace.

    Raises:
        ValueError: when the name is empty or not a safe path/URL segment
    """
    normalized = (function_name or "").strip()
    if not normalized:
        raise ValueError("Function name is required")

    if not _FUNCTION_NAME_PATTERN.match(normalized):
        raise ValueError(f"Invalid function name: {normalized!r}")

    return normalized


def function_name_key(function_name: str) -> str:
    """Lookup key for a function name; names are compared case-insensitively."""
    return function_name.casefold()
