"""Cartesian series: ``series.line`` and ``series.bar``.

Series carry no subtype defaulter, so every series option must name its type.
"""

from typing import Any, Dict, Optional, Tuple

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel
from ..utils.merge import merge_all


class SeriesModel(ComponentModel):
    type = "series"

    dependencies = ["grid", "xAxis", "yAxis"]

    default_option = {
        "z": 2,
        "legendHoverLink": True,
        "xAxisIndex": 0,
        "yAxisIndex": 0,
        "datasetIndex": 0,
        "clip": True,
        "label": {"show": False, "position": "top"},
        "emphasis": {"focus": "none"},
    }

    def option_updated(self, new_option: Optional[Dict[str, Any]], is_init: bool) -> None:
        if is_init and not self.name:
            self.name = f"series{self.component_index}"

    def get_axes(self) -> Tuple[Optional[ComponentModel], Optional[ComponentModel]]:
        x_axes = self.get_referring_components("xAxis")
        y_axes = self.get_referring_components("yAxis")
        return (x_axes[0] if x_axes else None, y_axes[0] if y_axes else None)

    def get_data(self) -> Any:
        data = self.option.get("data")
        if data is not None or self.option.get("datasetIndex") is None:
            return data
        datasets = self.get_referring_components("dataset")
        return datasets[0].get("source") if datasets else None


class LineSeriesModel(SeriesModel):
    type = "series.line"

    default_option = merge_all([SeriesModel.default_option, {
        "showSymbol": True,
        "symbol": "emptyCircle",
        "symbolSize": 4,
        "smooth": False,
        "step": False,
        "connectNulls": False,
        "lineStyle": {"width": 2, "type": "solid"},
        "areaStyle": None,
    }])


class BarSeriesModel(SeriesModel):
    type = "series.bar"

    default_option = merge_all([SeriesModel.default_option, {
        "barMinHeight": 0,
        "barMinAngle": 0,
        "large": False,
        "largeThreshold": 400,
        "roundCap": False,
        "showBackground": False,
        "backgroundStyle": {"color": "rgba(180, 180, 180, 0.2)"},
        "itemStyle": {},
    }])


def install(registry: ClassRegistry) -> None:
    registry.register(LineSeriesModel.type, LineSeriesModel)
    registry.register(BarSeriesModel.type, BarSeriesModel)
