"""Dataset component: tabular source data shared by other components."""

from typing import Any, Dict, Optional

from ..core.registry import ClassRegistry
from ..model.component import ComponentModel


class DatasetModel(ComponentModel):
    type = "dataset"

    default_option = {
        "seriesLayoutBy": "column",
        "sourceHeader": None,
        "dimensions": None,
        "source": None,
    }

    def option_updated(self, new_option: Optional[Dict[str, Any]], is_init: bool) -> None:
        layout = self.option.get("seriesLayoutBy")
        if layout not in ("column", "row"):
            raise ValueError(f"dataset.seriesLayoutBy must be 'column' or 'row', got {layout!r}")


def install(registry: ClassRegistry) -> None:
    registry.register(DatasetModel.type, DatasetModel)
