"""Merging of user configuration over the built-in defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"exclude_dirs"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return `base` with the values from `update` layered on top.

    Nested sections such as `fragment` or `anchors` merge key by key, so a
    file setting only `fragment.route_prefix` keeps the other defaults.
    Excluded directory names accumulate instead of replacing the built-in
    `bin`/`obj` list. Any other value, lists included, overrides the default.
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
            result[key] = sorted(set(result[key]) | set(value))
        else:
            result[key] = value
    return result
