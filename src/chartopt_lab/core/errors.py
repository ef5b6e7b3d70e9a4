"""Errors raised while resolving component classes and build order."""

from typing import List, Optional


class NotFoundError(LookupError):
    """No class is registered for the requested component type."""

    def __init__(self, main_type: str, sub_type: Optional[str] = None, registry: str = ""):
        self.main_type = main_type
        self.sub_type = sub_type
        type_str = f"{main_type}.{sub_type}" if sub_type else main_type
        where = f" in {registry}" if registry else ""
        super().__init__(f"Component type '{type_str}' is not registered{where}")


class AmbiguousSubtypeError(ValueError):
    """The subtype of a component cannot be determined from its option."""

    def __init__(self, main_type: str, candidates: List[str]):
        self.main_type = main_type
        self.candidates = list(candidates)
        super().__init__(
            f"Cannot determine subtype of '{main_type}': option has no 'type' "
            f"and several subtypes are registered: {self.candidates}"
        )


class CyclicDependencyError(ValueError):
    """The dependency graph between component main types has a cycle."""

    def __init__(self, main_type: str, path: Optional[List[str]] = None):
        self.main_type = main_type
        self.path = list(path or [])
        cycle = " -> ".join(self.path + [main_type]) if self.path else main_type
        super().__init__(f"Cyclic dependency detected at '{main_type}': {cycle}")
