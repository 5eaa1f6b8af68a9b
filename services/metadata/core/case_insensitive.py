"""
Where: services/metadata/core/case_insensitive.py
What: Case-insensitive key lookup over JSON objects.
Why: function.json keys are matched without regard to case by the host.
"""

from typing import Any, Mapping, Optional


def find_key_ignore_case(mapping: Mapping[str, Any], key: str) -> Optional[str]:
    """
    Return the key stored in `mapping` that matches `key` ignoring case.

    An exact match wins; otherwise the first match in insertion order.
    """
    if key in mapping:
        return key

    folded = key.casefold()
    for candidate in mapping:
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return candidate
    return None


def get_ignore_case(mapping: Optional[Mapping[str, Any]], key: str, default: Any = None) -> Any:
    """Look up `key` ignoring case, returning `default` when it is absent."""
    if not mapping:
        return default

    found = find_key_ignore_case(mapping, key)
    if found is None:
        return default
    return mapping[found]


def ends_with_ignore_case(value: Any, suffix: str) -> bool:
    return isinstance(value, str) and value.casefold().endswith(suffix.casefold())


def equals_ignore_case(value: Any, other: str) -> bool:
    return isinstance(value, str) and value.casefold() == other.casefold()
