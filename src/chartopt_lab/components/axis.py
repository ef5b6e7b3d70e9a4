"""Cartesian axes: ``xAxis`` and ``yAxis`` with ``category`` and ``value`` subtypes."""

from typing import Any, Dict, Optional

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel
from ..utils.merge import merge_all

AXIS_DEFAULT_OPTION = {
    "show": True,
    "z": 0,
    "inverse": False,
    "name": "",
    "nameLocation": "end",
    "nameGap": 15,
    "silent": False,
    "triggerEvent": False,
    "axisLine": {
        "show": True,
        "onZero": True,
        "lineStyle": {"color": "#6E7079", "width": 1, "type": "solid"},
    },
    "axisTick": {"show": True, "inside": False, "length": 5},
    "axisLabel": {"show": True, "inside": False, "rotate": 0, "margin": 8, "fontSize": 12},
    "splitLine": {
        "show": True,
        "lineStyle": {"color": ["#E0E6F1"], "width": 1, "type": "solid"},
    },
}

CATEGORY_AXIS_OPTION = {
    # The first value should be set as 0 in category axis
    "boundaryGap": True,
    "deduplication": None,
    "splitLine": {"show": False},
    "axisTick": {"alignWithLabel": False, "interval": "auto"},
    "axisLabel": {"interval": "auto"},
}

VALUE_AXIS_OPTION = {
    "boundaryGap": [0, 0],
    "splitNumber": 5,
    "scale": False,
    "minInterval": 0,
}


def axis_subtype_defaulter(option: Dict[str, Any]) -> str:
    # An explicit type wins; otherwise axes that carry data are categorical.
    declared = option.get("type")
    if declared:
        return str(declared).split(".")[-1]
    return "category" if option.get("data") is not None else "value"


class CartesianAxisModel(ComponentModel):
    """Axis laid out in a grid, referenced through ``gridIndex``/``gridId``."""

    dependencies = ["grid"]

    default_option = merge_all([AXIS_DEFAULT_OPTION, {"gridIndex": 0, "offset": 0}])

    def option_updated(self, new_option: Optional[Dict[str, Any]], is_init: bool) -> None:
        if self.sub_type == "value":
            low, high = self.option.get("min"), self.option.get("max")
            if isinstance(low, (int, float)) and isinstance(high, (int, float)) and low > high:
                raise ValueError(f"{self.main_type}[{self.component_index}]: min {low} is greater than max {high}")

    def get_grid(self) -> Optional[ComponentModel]:
        grids = self.get_referring_components("grid")
        return grids[0] if grids else None

    def is_category(self) -> bool:
        return self.sub_type == "category"


class XAxisModel(CartesianAxisModel):
    type = "xAxis"

    default_option = merge_all([CartesianAxisModel.default_option, {"position": "bottom"}])


class YAxisModel(CartesianAxisModel):
    type = "yAxis"

    default_option = merge_all([CartesianAxisModel.default_option, {"position": "left"}])


def install(registry: ClassRegistry) -> None:
    for base in (XAxisModel, YAxisModel):
        registry.extend(base, {"type": f"{base.type}.category", "default_option": CATEGORY_AXIS_OPTION})
        registry.extend(base, {"type": f"{base.type}.value", "default_option": VALUE_AXIS_OPTION})
        registry.register_subtype_defaulter(base.type, axis_subtype_defaulter)
