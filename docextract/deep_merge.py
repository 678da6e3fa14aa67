"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"exclude_regexes"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for specific keys.
    - 'exclude_regexes' is additive.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Additive merge, keeping first-seen order and dropping duplicates
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result
