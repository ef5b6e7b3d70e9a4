"""Box layout parameters (left/right/top/bottom/width/height).

Each axis of a box is fully described by two of its three parameters
(``width``/``left``/``right`` horizontally, ``height``/``top``/``bottom``
vertically). ``merge_layout_param`` reconciles an existing box with a
partial override so that over- and under-constrained specs settle on the
parameters the override meant.
"""

from typing import Any, Dict, Optional, Sequence, Union

LOCATION_PARAMS = ("left", "right", "top", "bottom", "width", "height")

HV_NAMES = (
    ("width", "left", "right"),
    ("height", "top", "bottom"),
)

# Two parameters pin down one axis.
ENOUGH_PARAM_NUMBER = 2

LayoutMode = Union[str, Dict[str, Any]]


def get_layout_params(option: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the box parameters present in ``option``."""
    return {name: option[name] for name in LOCATION_PARAMS if name in option}


def _has_value(obj: Dict[str, Any], name: str) -> bool:
    value = obj.get(name)
    return value is not None and value != "auto"


def _ignore_size_flags(layout_mode: Optional[LayoutMode]) -> Sequence[bool]:
    ignore_size = layout_mode.get("ignoreSize", False) if isinstance(layout_mode, dict) else False
    if isinstance(ignore_size, (list, tuple)):
        return [bool(ignore_size[0]), bool(ignore_size[1])]
    return [bool(ignore_size), bool(ignore_size)]


def _merge_axis(
    target: Dict[str, Any], source: Dict[str, Any], names: Sequence[str], ignore_size: bool
) -> Dict[str, Any]:
    new_params: Dict[str, Any] = {}
    merged = {name: target.get(name) for name in names}
    new_count = 0
    merged_count = 0

    for name in names:
        if name in source:
            new_params[name] = merged[name] = source[name]
        if _has_value(new_params, name):
            new_count += 1
        if _has_value(merged, name):
            merged_count += 1

    if ignore_size:
        # Only one of the two edges may stay.
        if _has_value(source, names[1]):
            merged[names[2]] = None
        elif _has_value(source, names[2]):
            merged[names[1]] = None
        return merged

    # Nothing new, or the merged axis is exactly determined.
    if merged_count == ENOUGH_PARAM_NUMBER or not new_count:
        return merged

    # The override alone pins down the axis.
    if new_count >= ENOUGH_PARAM_NUMBER:
        return new_params

    # Complete the override with the first other parameter the target has.
    for name in names:
        if name not in new_params and name in target:
            new_params[name] = target[name]
            break
    return new_params


def merge_layout_param(
    target: Dict[str, Any], source: Dict[str, Any], layout_mode: Optional[LayoutMode] = None
) -> Dict[str, Any]:
    """Reconcile the box parameters of ``target`` with ``source`` in place.

    Args:
        target: Option holding the current box parameters.
        source: Box parameters that must be honoured.
        layout_mode: ``"box"`` or ``{"type": "box", "ignoreSize": ...}``.
            ``ignoreSize`` is a bool or a ``[horizontal, vertical]`` pair; an
            ignored axis keeps its size and only one of its edges.

    Returns:
        The updated target. Parameters that end up empty are removed.
    """
    ignore_size = _ignore_size_flags(layout_mode)
    results = [
        _merge_axis(target, source, names, ignore_size[index])
        for index, names in enumerate(HV_NAMES)
    ]
    for names, result in zip(HV_NAMES, results):
        for name in names:
            value = result.get(name)
            if value is None:
                target.pop(name, None)
            else:
                target[name] = value
    return target
