"""Recursive merge primitives for JSON-like option trees."""

import copy
from typing import Any, Dict, Iterable


def clone(value: Any) -> Any:
    """Deep copy an option value so merged trees never share containers."""
    return copy.deepcopy(value)


def deep_merge(target: Any, source: Any, overwrite: bool = False) -> Any:
    """Merge ``source`` into ``target`` in place.

    Nested dicts are merged recursively. Any other value (lists included) is
    replaced wholesale, never concatenated.

    Args:
        target: Dict to merge into.
        source: Dict to merge from. Non-dict sources are ignored unless
            ``overwrite`` is set, in which case a copy of ``source`` is returned.
        overwrite: When False, keys already present in ``target`` are kept;
            when True, values from ``source`` win.

    Returns:
        The merged target.
    """
    if not isinstance(source, dict) or not isinstance(target, dict):
        return clone(source) if overwrite else target

    for key, value in source.items():
        target_value = target.get(key)
        if isinstance(value, dict) and isinstance(target_value, dict):
            deep_merge(target_value, value, overwrite)
        elif overwrite or key not in target:
            target[key] = clone(value)
    return target


def merge_all(options: Iterable[Dict[str, Any]], overwrite: bool = True) -> Dict[str, Any]:
    """Fold several option dicts into a new one, later dicts taking priority."""
    result: Dict[str, Any] = {}
    for option in options:
        if option:
            deep_merge(result, option, overwrite)
    return result
