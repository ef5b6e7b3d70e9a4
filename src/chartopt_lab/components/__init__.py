"""Built-in component kinds.

Nothing is registered on import. Call :func:`register_builtin_components`
once before building any document.
"""

import logging
from typing import Optional

from ..core.registry import COMPONENT_REGISTRY, ClassRegistry
from . import axis, dataset, grid, legend, series, title

logger = logging.getLogger(__name__)

_INSTALLERS = (dataset.install, grid.install, title.install, axis.install, series.install, legend.install)


def register_builtin_components(registry: Optional[ClassRegistry] = None) -> ClassRegistry:
    """Register every built-in component kind into ``registry``."""
    registry = registry or COMPONENT_REGISTRY
    for install in _INSTALLERS:
        install(registry)
    logger.debug("Registered built-in components: %s", registry.get_all_types())
    return registry


__all__ = ["register_builtin_components"]
