"""Registry mechanism mapping component types to classes.

A component type is written ``"main"`` or ``"main.sub"``. Classes are stored
under the ``(main, sub)`` pair; a class registered under ``"main"`` alone acts
as the wildcard entry for every subtype of that main type.

Registration is expected to happen once, before any document is resolved.
The registry holds no locks.
"""

import logging
import re
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type

from .errors import AmbiguousSubtypeError, NotFoundError
from ..utils.merge import merge_all

logger = logging.getLogger(__name__)

WILDCARD_SUBTYPE = "*"
TYPE_DELIMITER = "."

EXTENDED_MARK = "_extended_class"
SUPER_CLASS_ATTR = "_super_class"
CLASS_REGISTRY_ATTR = "_class_registry"

_TYPE_PATTERN = re.compile(r"^[a-zA-Z0-9_]+([.][a-zA-Z0-9_]+)?$")

SubtypeDefaulter = Callable[[Dict[str, Any]], Optional[str]]


class ClassType(NamedTuple):
    main: str
    sub: str


def parse_class_type(identifier: Optional[str]) -> ClassType:
    """Split ``"main.sub"`` into its parts. Missing parts never raise."""
    main, sub = "", WILDCARD_SUBTYPE
    if identifier:
        parts = str(identifier).split(TYPE_DELIMITER, 1)
        main = parts[0]
        if len(parts) > 1 and parts[1]:
            sub = parts[1]
    return ClassType(main, sub)


def is_extended_class(cls: Type) -> bool:
    """Whether ``cls`` was produced by :meth:`ClassRegistry.extend`."""
    return bool(cls.__dict__.get(EXTENDED_MARK, False))


def _class_name(base: Type, type_identifier: Optional[str]) -> str:
    if not type_identifier:
        return f"Extended{base.__name__}"
    parts = [p for p in str(type_identifier).split(TYPE_DELIMITER) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) + "Model"


class ClassRegistry:
    """A registry to map component types to classes."""

    def __init__(self, name: str):
        self._name = name
        self._storage: Dict[str, Dict[str, Type]] = {}
        self._subtype_defaulters: Dict[str, SubtypeDefaulter] = {}
        self._default_options: Dict[Type, Dict[str, Any]] = {}

    def __repr__(self):
        return f"<ClassRegistry {self._name}: {self.get_all_types()}>"

    @property
    def name(self) -> str:
        return self._name

    def register(self, type_identifier: str, cls: Optional[Type] = None):
        """Register a class under a component type.

        Registering the same type twice replaces the previous class.

        Args:
            type_identifier: ``"main"`` or ``"main.sub"``.
            cls: Class to register. If None, return a decorator.
        """
        if not isinstance(type_identifier, str) or not _TYPE_PATTERN.match(type_identifier):
            raise ValueError(f"'{type_identifier}' is not a valid component type in {self._name}")
        main, sub = parse_class_type(type_identifier)

        def _register(cls):
            subtypes = self._storage.setdefault(main, {})
            previous = subtypes.get(sub)
            if previous is not None and previous is not cls:
                logger.debug("Replacing %s registered as '%s' in %s with %s",
                             previous.__name__, type_identifier, self._name, cls.__name__)
            subtypes[sub] = cls
            return cls

        if cls is None:
            return _register
        return _register(cls)

    def extend(self, base: Type, spec: Dict[str, Any]) -> Type:
        """Create a subclass of ``base`` from a mapping of attributes.

        The new class is marked as extended, so its default option is merged
        along the chain of extended ancestors. If ``spec`` has a ``type``
        entry the class is registered under it as well.

        Args:
            base: Class to derive from.
            spec: Class attributes and methods of the new class. The optional
                ``class_name`` entry names the class.

        Returns:
            The new class.
        """
        attrs = dict(spec)
        type_identifier = attrs.get("type")
        class_name = attrs.pop("class_name", None) or _class_name(base, type_identifier)
        attrs.setdefault("__module__", base.__module__)
        attrs[EXTENDED_MARK] = True
        attrs[SUPER_CLASS_ATTR] = base
        attrs[CLASS_REGISTRY_ATTR] = self

        cls = type(class_name, (base,), attrs)
        if type_identifier:
            self.register(type_identifier, cls)
        return cls

    def get_class(self, main_type: str, sub_type: Optional[str] = None) -> Type:
        """Get the class registered for a component type.

        Falls back to the wildcard class of ``main_type`` when the subtype has
        no class of its own.

        Args:
            main_type: Main type, or a full ``"main.sub"`` identifier when
                ``sub_type`` is omitted.
            sub_type: Subtype name.
        """
        if sub_type is None:
            main_type, sub_type = parse_class_type(main_type)

        subtypes = self._storage.get(main_type)
        if subtypes:
            if sub_type in subtypes:
                return subtypes[sub_type]
            if WILDCARD_SUBTYPE in subtypes:
                return subtypes[WILDCARD_SUBTYPE]
        raise NotFoundError(main_type, sub_type if sub_type != WILDCARD_SUBTYPE else None, self._name)

    def get_classes_by_main_type(self, main_type: str) -> List[Type]:
        """Return every class registered under ``main_type``, in registration order."""
        return list(self._storage.get(main_type, {}).values())

    def has_class(self, type_identifier: str) -> bool:
        return bool(self._storage.get(parse_class_type(type_identifier).main))

    def has_subtypes(self, type_identifier: str) -> bool:
        subtypes = self._storage.get(parse_class_type(type_identifier).main, {})
        return any(sub != WILDCARD_SUBTYPE for sub in subtypes)

    def get_all_main_types(self) -> List[str]:
        return [main for main, subtypes in self._storage.items() if subtypes]

    def get_all_types(self) -> List[str]:
        types = []
        for main, subtypes in self._storage.items():
            for sub in subtypes:
                types.append(main if sub == WILDCARD_SUBTYPE else f"{main}{TYPE_DELIMITER}{sub}")
        return types

    def register_subtype_defaulter(self, main_type: str, defaulter: SubtypeDefaulter) -> None:
        """Register the rule that picks a subtype when an option does not name one."""
        main = parse_class_type(main_type).main
        if main in self._subtype_defaulters:
            logger.debug("Replacing subtype defaulter of '%s' in %s", main, self._name)
        self._subtype_defaulters[main] = defaulter

    def determine_sub_type(self, main_type: str, raw_option: Optional[Dict[str, Any]]) -> str:
        """Work out the subtype for a raw component option.

        Order: the registered defaulter, then the option's ``type`` field
        (``"main.sub"`` or bare ``"sub"``), then the registered subtypes. A
        registered wildcard class, or a single registered subtype, is used as
        is; several subtypes with no wildcard raise AmbiguousSubtypeError.
        """
        raw_option = raw_option if isinstance(raw_option, dict) else {}
        main = parse_class_type(main_type).main

        defaulter = self._subtype_defaulters.get(main)
        if defaulter is not None:
            sub_type = defaulter(raw_option)
            if sub_type:
                return sub_type

        declared = raw_option.get("type")
        if declared:
            declared = str(declared)
            if TYPE_DELIMITER in declared:
                return parse_class_type(declared).sub
            return declared

        subtypes = self._storage.get(main, {})
        if WILDCARD_SUBTYPE in subtypes:
            return WILDCARD_SUBTYPE
        candidates = list(subtypes)
        if len(candidates) == 1:
            return candidates[0]
        if len(candidates) > 1:
            raise AmbiguousSubtypeError(main, candidates)
        return WILDCARD_SUBTYPE

    def get_default_option(self, cls: Type) -> Dict[str, Any]:
        """Return the default option of ``cls``.

        Classes made by :meth:`extend` merge the ``default_option`` of every
        extended ancestor, base first, so derived fields win. The result is
        computed once per class and kept until :meth:`reset`. Other classes
        return their own ``default_option`` untouched.
        """
        if not is_extended_class(cls):
            return getattr(cls, "default_option", None) or {}

        cached = self._default_options.get(cls)
        if cached is None:
            chain = []
            clz = cls
            while clz is not None:
                if not is_extended_class(clz):
                    chain.append(getattr(clz, "default_option", None))
                    break
                chain.append(clz.__dict__.get("default_option"))
                clz = clz.__dict__.get(SUPER_CLASS_ATTR)
            cached = merge_all(reversed(chain))
            self._default_options[cls] = cached
        return cached

    def reset(self) -> None:
        """Forget every registered class, defaulter and cached default option."""
        self._storage.clear()
        self._subtype_defaulters.clear()
        self._default_options.clear()


# Global Registries
COMPONENT_REGISTRY = ClassRegistry("COMPONENT")
