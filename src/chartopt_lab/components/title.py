"""Title component."""

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel


class TitleModel(ComponentModel):
    type = "title"

    layout_mode = {"type": "box", "ignoreSize": True}

    default_option = {
        "z": 6,
        "show": True,
        "text": "",
        "target": "blank",
        "subtext": "",
        "subtarget": "blank",
        "left": 0,
        "top": 0,
        "backgroundColor": "rgba(0,0,0,0)",
        "borderColor": "#ccc",
        "borderWidth": 0,
        "padding": 5,
        "itemGap": 10,
        "textStyle": {
            "fontSize": 18,
            "fontWeight": "bold",
            "color": "#464646",
        },
        "subtextStyle": {
            "fontSize": 12,
            "color": "#6E7079",
        },
    }


def install(registry: ClassRegistry) -> None:
    registry.register(TitleModel.type, TitleModel)
