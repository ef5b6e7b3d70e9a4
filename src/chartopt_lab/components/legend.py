"""Legend components.

``legend.plain`` is declared as a class; ``legend.scroll`` is derived from it
with ``ClassRegistry.extend`` and only adds its own defaults.
"""

from typing import Any, Dict, List, Optional

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel


def legend_subtype_defaulter(option: Dict[str, Any]) -> str:
    declared = str(option.get("type") or "")
    return "scroll" if declared.split(".")[-1] == "scroll" else "plain"


class LegendModel(ComponentModel):
    type = "legend.plain"

    dependencies = ["series"]

    layout_mode = {"type": "box", "ignoreSize": True}

    default_option = {
        "z": 4,
        "show": True,
        "orient": "horizontal",
        "left": "center",
        "top": 0,
        "align": "auto",
        "backgroundColor": "rgba(0,0,0,0)",
        "borderColor": "#ccc",
        "borderRadius": 0,
        "borderWidth": 0,
        "padding": 5,
        "itemGap": 10,
        "itemWidth": 25,
        "itemHeight": 14,
        "inactiveColor": "#ccc",
        "textStyle": {
            "color": "#333",
        },
        "selectedMode": True,
        "selected": {},
        "tooltip": {
            "show": False,
        },
    }

    def option_updated(self, new_option: Optional[Dict[str, Any]], is_init: bool) -> None:
        self._update_data()

        selected = self.option.setdefault("selected", {})
        names = self.get_data_names()
        if self.option.get("selectedMode") == "single":
            # Exactly one item stays selected.
            chosen = [name for name in names if selected.get(name, True)]
            keep = chosen[0] if chosen else (names[0] if names else None)
            for name in names:
                selected[name] = name == keep

    def _update_data(self) -> None:
        data = self.option.get("data")
        if not data:
            series = self.dependent_models.get("series") or []
            data = [model.name for model in series if model.name]
        self._data: List[Dict[str, Any]] = [
            dict(item) if isinstance(item, dict) else {"name": str(item)} for item in data
        ]

    def get_data(self) -> List[Dict[str, Any]]:
        return list(self._data)

    def get_data_names(self) -> List[str]:
        return [item.get("name", "") for item in self._data]

    def is_selected(self, name: str) -> bool:
        return name in self.get_data_names() and self.option.get("selected", {}).get(name, True) is not False


SCROLLABLE_LEGEND_SPEC = {
    "type": "legend.scroll",
    "class_name": "ScrollableLegendModel",
    "default_option": {
        "scrollDataIndex": 0,
        "pageButtonItemGap": 5,
        "pageButtonGap": None,
        # 'start' or 'end'
        "pageButtonPosition": "end",
        "pageFormatter": "{current}/{total}",
        "pageIconColor": "#2f4554",
        "pageIconInactiveColor": "#aaa",
        "pageIconSize": 15,
        "pageTextStyle": {
            "color": "#333",
        },
        "animationDurationUpdate": 800,
    },
}


def install(registry: ClassRegistry) -> None:
    registry.register(LegendModel.type, LegendModel)
    registry.extend(LegendModel, SCROLLABLE_LEGEND_SPEC)
    registry.register_subtype_defaulter("legend", legend_subtype_defaulter)
