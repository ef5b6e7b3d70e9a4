"""Shared fixtures for ChartOpt-Lab tests."""

import pytest

from chartopt_lab.components import register_builtin_components
from chartopt_lab.core.registry import COMPONENT_REGISTRY, ClassRegistry


@pytest.fixture
def registry() -> ClassRegistry:
    """A fresh, empty registry."""
    return ClassRegistry("TEST")


@pytest.fixture
def builtin_registry() -> ClassRegistry:
    """A fresh registry with every built-in component kind."""
    return register_builtin_components(ClassRegistry("BUILTIN"))


@pytest.fixture
def global_registry():
    """The process-wide registry, emptied before and after the test."""
    COMPONENT_REGISTRY.reset()
    yield COMPONENT_REGISTRY
    COMPONENT_REGISTRY.reset()
