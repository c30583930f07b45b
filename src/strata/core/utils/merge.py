"""Canonical merge utilities.

Three merge orders are used across Strata and each has its own function so
callers never pick up the wrong precedence by accident:

- ``deep_merge``: recursive merge for configuration files (override wins)
- ``cascade_merge``: shallow merge along the normal cascade (override wins)
- ``merge_widget_vars``: shallow merge for widget rendering (template wins)
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Args:
        base: Base dictionary (lower priority)
        override: Override dictionary (higher priority)

    Returns:
        New merged dictionary

    Example:
        >>> base = {"a": 1, "b": {"c": 2}}
        >>> override = {"b": {"d": 3}}
        >>> deep_merge(base, override)
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result:
            if isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            elif isinstance(result[key], list) and isinstance(value, list):
                result[key] = merge_arrays(result[key], value)
            else:
                result[key] = value
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge arrays with override semantics.

    A leading ``"+"`` item appends the rest of ``override`` to ``base``; a
    leading ``"="`` (or no marker) replaces ``base``.

    Example:
        >>> merge_arrays([1, 2], [3, 4])
        [3, 4]
        >>> merge_arrays([1, 2], ["+", 3, 4])
        [1, 2, 3, 4]
    """
    if not override:
        return base
    first = override[0]
    if isinstance(first, str):
        if first.startswith("+"):
            return [*base, *override[1:]]
        if first == "=":
            return list(override[1:])
    return list(override)


def cascade_merge(
    base: Optional[Mapping[str, Any]],
    override: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Shallow merge where ``override`` wins on key collision.

    This is the normal cascade order: system < base < theme, and
    resource-level config < page-level override.

    Example:
        >>> cascade_merge({"use": "default", "enable": True}, {"use": "compact"})
        {'use': 'compact', 'enable': True}
    """
    result: Dict[str, Any] = dict(base or {})
    result.update(override or {})
    return result


def merge_widget_vars(
    template_vars: Optional[Mapping[str, Any]],
    effective_config: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Build a widget's ``this_config`` where template values win.

    This inverts the cascade on purpose. Values declared inline in a widget
    template are that template's implementation defaults; keys only present
    in ``effective_config`` (resource config merged with the page override)
    are added, but on overlap the template value is kept.

    Example:
        >>> merge_widget_vars({"title": "Recent"}, {"title": "Latest", "limit": 5})
        {'title': 'Recent', 'limit': 5}
    """
    result: Dict[str, Any] = dict(effective_config or {})
    result.update(template_vars or {})
    return result


__all__ = ["deep_merge", "merge_arrays", "cascade_merge", "merge_widget_vars"]
