"""Component and document models."""

from .component import ComponentModel
from .theme import Theme, load_theme
from .global_model import GlobalModel

__all__ = ["ComponentModel", "Theme", "load_theme", "GlobalModel"]
