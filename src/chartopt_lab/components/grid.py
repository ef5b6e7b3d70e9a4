"""Grid component: the rectangle cartesian axes are laid out in."""

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel


class GridModel(ComponentModel):
    type = "grid"

    layout_mode = "box"

    default_option = {
        "show": False,
        "z": 0,
        "left": "10%",
        "top": 60,
        "right": "10%",
        "bottom": 70,
        # If grid size contain label
        "containLabel": False,
        "backgroundColor": "rgba(0,0,0,0)",
        "borderWidth": 1,
        "borderColor": "#ccc",
    }


def install(registry: ClassRegistry) -> None:
    registry.register(GridModel.type, GridModel)
