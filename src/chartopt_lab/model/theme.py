"""Theme: option fragments keyed by component main type."""

import logging
import os
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class Theme:
    """Read-only source of per-main-type option fragments."""

    def __init__(self, option: Optional[Dict[str, Any]] = None, name: str = "default"):
        self.name = name
        self._option: Dict[str, Any] = option or {}

    def __repr__(self):
        return f"<Theme {self.name}: {list(self._option.keys())}>"

    def get(self, main_type: str) -> Optional[Dict[str, Any]]:
        """Return the fragment for ``main_type``, or None when the theme has none."""
        return self._option.get(main_type)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._option)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "Theme":
        """Load a theme from a YAML file; the file stem names the theme."""
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Theme file must hold a mapping: {yaml_path}")
        name = os.path.splitext(os.path.basename(yaml_path))[0]
        logger.debug("Loaded theme '%s' with %d entries", name, len(data))
        return cls(data, name=name)


def load_theme(theme_path: Optional[str] = None) -> Theme:
    """Load a theme file, or return an empty theme when no path is given."""
    if not theme_path:
        return Theme()
    if not os.path.exists(theme_path):
        raise FileNotFoundError(f"Theme file not found: {theme_path}")
    return Theme.from_yaml(theme_path)
