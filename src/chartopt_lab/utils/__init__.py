"""Option tree utilities."""

from .merge import clone, deep_merge, merge_all
from .layout import LOCATION_PARAMS, get_layout_params, merge_layout_param

__all__ = [
    "clone", "deep_merge", "merge_all",
    "LOCATION_PARAMS", "get_layout_params", "merge_layout_param",
]
