"""ChartOpt-Lab: component registry and option merging for declarative charts."""

from .core import (
    COMPONENT_REGISTRY,
    AmbiguousSubtypeError,
    ClassRegistry,
    CyclicDependencyError,
    NotFoundError,
    get_dependencies,
    topological_travel,
)
from .model import ComponentModel, GlobalModel, Theme
from .components import register_builtin_components

__version__ = "0.1.0"

__all__ = [
    "COMPONENT_REGISTRY", "ClassRegistry", "ComponentModel", "GlobalModel", "Theme",
    "register_builtin_components", "get_dependencies", "topological_travel",
    "NotFoundError", "AmbiguousSubtypeError", "CyclicDependencyError",
]
