"""Document model: turns a raw option tree into component models."""

import logging
import traceback
from typing import Any, Callable, Dict, List, Optional

from ..core.dependency import get_dependencies, topological_travel
from ..core.errors import NotFoundError
from ..core.registry import COMPONENT_REGISTRY, WILDCARD_SUBTYPE, ClassRegistry
from ..utils.merge import clone
from .component import ComponentModel
from .theme import Theme

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class GlobalModel:
    """Owns every component model built from one option tree.

    Components are built main type by main type in dependency order. Calling
    :meth:`set_option` again patches the existing components instead of
    rebuilding them.
    """

    def __init__(
        self,
        option: Optional[Dict[str, Any]] = None,
        theme: Optional[Theme] = None,
        registry: Optional[ClassRegistry] = None,
    ):
        self.registry = registry or COMPONENT_REGISTRY
        self._theme = theme if theme is not None else Theme()
        self._components: Dict[str, List[ComponentModel]] = {}
        self.errors: List[Exception] = []
        if option is not None:
            self.set_option(option)

    def __repr__(self):
        counts = {main_type: len(models) for main_type, models in self._components.items()}
        return f"<GlobalModel {counts}>"

    def get_theme(self) -> Theme:
        return self._theme

    def set_option(self, option: Dict[str, Any], not_merge: bool = False) -> None:
        """Build or patch components from a raw option tree.

        A component whose patch fails validation keeps its previous option
        and the error propagates. Main types visited before it stay patched,
        so a failed call can leave the document partly applied.

        Args:
            option: Mapping of main type to one option dict or a list of them.
                Keys with no registered component class are ignored.
            not_merge: Drop every existing component before building.
        """
        if not isinstance(option, dict):
            raise ValueError(f"Option must be a mapping, got {type(option).__name__}")
        if not_merge:
            self._components = {}
            self.errors = []

        main_types = []
        for key in option:
            if self.registry.has_class(key):
                main_types.append(key)
            else:
                logger.debug("Ignoring option '%s': no component registered", key)

        def _visit(main_type: str):
            self._merge_main_type(main_type, _as_list(option[main_type]))

        topological_travel(main_types, _visit, registry=self.registry)
        logger.info("Resolved %d components across %d main types",
                    sum(len(models) for models in self._components.values()), len(self._components))

    def _merge_main_type(self, main_type: str, blocks: List[Any]) -> None:
        existing = self._components.setdefault(main_type, [])

        for position, block in enumerate(blocks):
            if not isinstance(block, dict):
                logger.warning("Skipping %s[%d]: option must be a mapping", main_type, position)
                continue

            current = self._match_existing(existing, block, position)
            if current is not None:
                self._patch(current, main_type, block)
                continue

            try:
                model = self._create(main_type, block, len(existing))
            except NotFoundError as e:
                logger.warning("Skipping %s[%d]: %s", main_type, position, e)
                logger.debug(traceback.format_exc())
                self.errors.append(e)
                continue
            existing.append(model)

    @staticmethod
    def _match_existing(
        existing: List[ComponentModel], block: Dict[str, Any], position: int
    ) -> Optional[ComponentModel]:
        block_id = block.get("id")
        if block_id is not None:
            for model in existing:
                if model.id == str(block_id):
                    return model
            return None
        if position < len(existing):
            return existing[position]
        return None

    def _dependent_models(self, main_type: str) -> Dict[str, List[ComponentModel]]:
        return {
            dep: list(self._components.get(dep, []))
            for dep in get_dependencies(main_type, self.registry)
        }

    def _patch(self, model: ComponentModel, main_type: str, block: Dict[str, Any]) -> None:
        # Dependencies may have gained or lost components since the last pass.
        model.dependent_models = self._dependent_models(main_type)
        previous = clone(model.option)
        patch = clone(block)
        try:
            model.merge_option(patch, self)
            model.option_updated(patch, False)
        except Exception:
            model.option = previous
            raise

    def _create(self, main_type: str, block: Dict[str, Any], index: int) -> ComponentModel:
        sub_type = self.registry.determine_sub_type(main_type, block)
        cls = self.registry.get_class(main_type, sub_type)

        block_id = block.get("id")
        extra_opt = {
            "main_type": main_type,
            "sub_type": "" if sub_type == WILDCARD_SUBTYPE else sub_type,
            "component_index": index,
            "id": str(block_id) if block_id is not None else f"auto_{main_type}_{index}",
            "name": str(block.get("name") or ""),
            "dependent_models": self._dependent_models(main_type),
        }
        logger.debug("Building %s.%s[%d] with %s", main_type, extra_opt["sub_type"], index, cls.__name__)
        return cls(clone(block), self._theme, self, extra_opt)

    def query_components(self, condition: Dict[str, Any]) -> List[ComponentModel]:
        """Find components by ``main_type`` and one of ``index``, ``id`` or ``name``.

        Each selector may be a scalar or a list. With no selector every
        component of the main type is returned. ``sub_type`` narrows the
        result further.
        """
        main_type = condition.get("main_type")
        components = self._components.get(main_type) if main_type else None
        if not components:
            return []

        index = condition.get("index")
        component_id = condition.get("id")
        name = condition.get("name")
        if index is not None:
            result = [
                components[i] for i in _as_list(index)
                if isinstance(i, int) and not isinstance(i, bool) and 0 <= i < len(components)
            ]
        elif component_id is not None:
            ids = {str(i) for i in _as_list(component_id)}
            result = [model for model in components if model.id in ids]
        elif name is not None:
            names = {str(n) for n in _as_list(name)}
            result = [model for model in components if model.name in names]
        else:
            result = list(components)

        sub_type = condition.get("sub_type")
        if sub_type:
            result = [model for model in result if model.sub_type == sub_type]
        return result

    def get_component(self, main_type: str, index: int = 0) -> Optional[ComponentModel]:
        components = self._components.get(main_type) or []
        return components[index] if 0 <= index < len(components) else None

    def get_components(self, main_type: str) -> List[ComponentModel]:
        return list(self._components.get(main_type) or [])

    def each_component(self, callback: Callable[[str, ComponentModel], None]) -> None:
        """Call ``callback(main_type, model)`` for every component, in build order."""
        for main_type, models in self._components.items():
            for model in models:
                callback(main_type, model)

    def get_option(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return the resolved option tree as plain data."""
        return {
            main_type: [clone(model.option) for model in models]
            for main_type, models in self._components.items()
        }
