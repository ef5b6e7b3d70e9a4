"""Dependency resolution between component main types."""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from .errors import CyclicDependencyError
from .registry import COMPONENT_REGISTRY, ClassRegistry, parse_class_type

logger = logging.getLogger(__name__)

# Dataset components feed every other component, so they always come first.
DATASET = "dataset"

Visitor = Callable[..., None]


def get_dependencies(main_type: str, registry: Optional[ClassRegistry] = None) -> List[str]:
    """Collect the main types ``main_type`` depends on.

    Every class registered under ``main_type`` contributes its
    ``dependencies`` attribute. Entries are reduced to their main type and
    de-duplicated in first-seen order. ``"dataset"`` is prepended for every
    main type except itself.

    Args:
        main_type: Main type (a ``"main.sub"`` identifier is reduced to main).
        registry: Registry to scan. Defaults to COMPONENT_REGISTRY.

    Returns:
        Ordered list of main types; empty when nothing is registered.
    """
    registry = registry or COMPONENT_REGISTRY
    main_type = parse_class_type(main_type).main
    classes = registry.get_classes_by_main_type(main_type)
    if not classes:
        return []

    deps: List[str] = []
    for cls in classes:
        for dep in getattr(cls, "dependencies", None) or []:
            dep_main = parse_class_type(dep).main
            if dep_main and dep_main not in deps:
                deps.append(dep_main)

    if main_type != DATASET and DATASET not in deps:
        deps.insert(0, DATASET)
    return deps


def build_dependency_graph(
    main_types: Iterable[str], registry: Optional[ClassRegistry] = None
) -> Dict[str, List[str]]:
    """Map each main type to its full dependency list."""
    return {main_type: get_dependencies(main_type, registry) for main_type in main_types}


def topological_travel(
    main_types: Iterable[str],
    visit: Visitor,
    registry: Optional[ClassRegistry] = None,
    graph: Optional[Mapping[str, Sequence[str]]] = None,
    with_dependencies: bool = False,
) -> None:
    """Visit main types so that each comes after its dependencies.

    Depth-first post-order over ``main_types`` in the given order. Dependency
    targets outside ``main_types`` are skipped; they are assumed resolved
    elsewhere.

    Args:
        main_types: Main types to visit. Duplicates are visited once.
        visit: Called as ``visit(main_type)``, or as
            ``visit(main_type, dependencies)`` with ``with_dependencies`` set,
            where ``dependencies`` are the in-set dependencies of ``main_type``.
        registry: Registry used to compute dependencies when ``graph`` is None.
        graph: Precomputed ``main_type -> dependencies`` mapping.
        with_dependencies: Also pass the in-set dependencies to ``visit``.

    Raises:
        CyclicDependencyError: A main type depends on itself, directly or
            through other main types.
    """
    targets = list(dict.fromkeys(main_types))
    target_set = set(targets)

    if graph is None:
        graph = build_dependency_graph(targets, registry)
    edges = {
        main_type: [dep for dep in graph.get(main_type, ()) if dep in target_set]
        for main_type in targets
    }

    visited = set()
    visiting: List[str] = []

    def _travel(main_type: str):
        if main_type in visited:
            return
        if main_type in visiting:
            raise CyclicDependencyError(main_type, visiting[visiting.index(main_type):])
        visiting.append(main_type)
        for dep in edges[main_type]:
            _travel(dep)
        visiting.pop()
        visited.add(main_type)
        if with_dependencies:
            visit(main_type, list(edges[main_type]))
        else:
            visit(main_type)

    for main_type in targets:
        _travel(main_type)


def dependency_order(
    main_types: Iterable[str],
    registry: Optional[ClassRegistry] = None,
    graph: Optional[Mapping[str, Sequence[str]]] = None,
) -> List[str]:
    """Return ``main_types`` in the order :func:`topological_travel` visits them."""
    order: List[str] = []
    topological_travel(main_types, order.append, registry, graph)
    logger.debug("Dependency order: %s", order)
    return order
