"""Core module init."""

from .errors import AmbiguousSubtypeError, CyclicDependencyError, NotFoundError
from .registry import (
    COMPONENT_REGISTRY,
    WILDCARD_SUBTYPE,
    ClassRegistry,
    ClassType,
    is_extended_class,
    parse_class_type,
)
from .dependency import dependency_order, get_dependencies, topological_travel

__all__ = [
    "ClassRegistry", "ClassType", "COMPONENT_REGISTRY", "WILDCARD_SUBTYPE",
    "parse_class_type", "is_extended_class",
    "get_dependencies", "topological_travel", "dependency_order",
    "NotFoundError", "AmbiguousSubtypeError", "CyclicDependencyError",
]
